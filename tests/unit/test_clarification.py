"""Tests for clarification prompts and follow-up resolution."""

import pytest

from content_ranker.clarification.followup_rules import FOLLOWUP_RULES, FollowupRule, match_rule
from content_ranker.clarification.state_machine import ClarificationStateMachine
from content_ranker.clarification.templates import GENERAL_TEMPLATE, TEMPLATES, select_template
from content_ranker.models.domain import CLARIFICATION_INTENTS, Intent
from content_ranker.query.classifier import IntentClassifier


@pytest.fixture
def clarifier():
    return ClarificationStateMachine()


def test_needs_clarification(clarifier):
    assert clarifier.needs_clarification(Intent.COURSE_CLARIFICATION)
    assert clarifier.needs_clarification(Intent.BROAD_CLARIFICATION)
    assert clarifier.needs_clarification(Intent.DEFAULT_CLARIFICATION)
    assert not clarifier.needs_clarification(Intent.DIRECT_ANSWER)
    assert not clarifier.needs_clarification(Intent.WORKSHOP_EVENT)
    assert not clarifier.needs_clarification(Intent.CONTACT_POLICY)


@pytest.mark.parametrize(
    "query,expected_type",
    [
        ("what courses do you offer", "course_clarification"),
        ("photography equipment", "equipment_clarification"),
        ("do you run workshops", "workshop_clarification"),
        ("what workshops are coming up", "upcoming_workshops_clarification"),
        ("is the free course any good", "free_course_clarification"),
        ("which lens", "lens_clarification"),
        ("tell me about alan", "about_clarification"),
        ("hello there", "general_clarification"),
        ("", "general_clarification"),
    ],
)
def test_generate_clarification_type(clarifier, query, expected_type):
    state = clarifier.generate_clarification(query)
    assert state.type == expected_type
    assert state.question
    assert 2 <= len(state.options) <= 6


def test_every_option_maps_to_non_clarification_intent():
    for template in (*TEMPLATES, GENERAL_TEMPLATE):
        for option in template.build().options:
            assert option.mapped_intent not in CLARIFICATION_INTENTS


def test_every_remap_rule_maps_to_non_clarification_intent():
    for rule in FOLLOWUP_RULES:
        assert rule.mapped_intent not in CLARIFICATION_INTENTS


def test_select_template_falls_back_to_general():
    assert select_template("zzz") is GENERAL_TEMPLATE


def test_option_round_trip(clarifier):
    # Echoing any offered option back resolves to exactly that option.
    for query in ("what courses do you offer", "photography equipment", "hello there"):
        state = clarifier.generate_clarification(query)
        for option in state.options:
            resolution = clarifier.resolve_followup(option.mapped_query, query)
            assert resolution is not None
            assert resolution.source == "option"
            assert resolution.new_query == option.mapped_query
            assert resolution.new_intent == option.mapped_intent


def test_resolve_partial_label(clarifier):
    resolution = clarifier.resolve_followup("online courses", "what courses do you offer")
    assert resolution.new_query == "online photography courses"
    assert resolution.new_intent == Intent.DIRECT_ANSWER
    assert resolution.source == "option"


def test_resolve_label_inside_reply(clarifier):
    resolution = clarifier.resolve_followup("Beginner courses please", "what courses do you offer")
    assert resolution.new_query == "beginner photography courses"


def test_resolve_via_remap_table(clarifier):
    resolution = clarifier.resolve_followup("bluebell", "photography equipment")
    assert resolution.source == "remap"
    assert resolution.new_query == "bluebell photography workshops"
    assert resolution.new_intent == Intent.WORKSHOP_EVENT


def test_unresolved_reply_returns_none(clarifier):
    assert clarifier.resolve_followup("xyz", "hello there") is None
    assert clarifier.resolve_followup("", "what courses do you offer") is None
    assert clarifier.resolve_followup("   ", "what courses do you offer") is None


def test_resolved_query_does_not_loop_back(clarifier):
    # The mapped intent is authoritative even when the mapped text would
    # classify to a clarification intent on its own.
    resolution = clarifier.resolve_followup("private photography lessons", "hello there")
    assert IntentClassifier().classify(resolution.new_query) == Intent.DEFAULT_CLARIFICATION
    assert resolution.new_intent == Intent.DIRECT_ANSWER
    assert not clarifier.needs_clarification(resolution.new_intent)


def test_remap_first_match_wins():
    rules = (
        FollowupRule(("online",), "online photography courses", Intent.DIRECT_ANSWER),
        FollowupRule(("bluebell",), "bluebell photography workshops", Intent.WORKSHOP_EVENT),
    )
    rule = match_rule("online bluebell sessions", rules)
    assert rule.mapped_query == "online photography courses"


def test_remap_all_of_required():
    rule = FollowupRule(("yes",), "free course details", Intent.DIRECT_ANSWER, all_of=("free",))
    assert rule.matches("yes the free one")
    assert not rule.matches("yes please")


def test_match_rule_no_match():
    assert match_rule("nothing relevant here") is None


def test_equipment_question_label_round_trip(clarifier):
    query = "what equipment do I need"
    state = clarifier.generate_clarification(query)
    assert state.type == "equipment_clarification"
    for option in state.options:
        resolution = clarifier.resolve_followup(option.label, query)
        assert (resolution.new_query, resolution.new_intent) == (
            option.mapped_query,
            option.mapped_intent,
        )


@pytest.mark.parametrize(
    "template", [*TEMPLATES, GENERAL_TEMPLATE], ids=lambda t: t.type
)
def test_label_round_trip_every_template(clarifier, template):
    query = " ".join(template.requires)
    assert select_template(query) is template
    for option in template.build().options:
        resolution = clarifier.resolve_followup(option.label, query)
        assert resolution is not None, option.label
        assert resolution.source == "option"
        assert (resolution.new_query, resolution.new_intent) == (
            option.mapped_query,
            option.mapped_intent,
        )
