"""Clarification dialogue: prompt generation and follow-up resolution."""

from __future__ import annotations

import re

from content_ranker.clarification.followup_rules import FOLLOWUP_RULES, FollowupRule, match_rule
from content_ranker.clarification.templates import select_template
from content_ranker.models.domain import (
    CLARIFICATION_INTENTS,
    ClarificationOption,
    ClarificationState,
    FollowupResolution,
    Intent,
)
from content_ranker.observability.logger import get_logger

logger = get_logger("clarification")

# Replies shorter than this are only matched when an option label or
# query occurs inside them, never the other way round.
_MIN_PARTIAL_REPLY = 4


class ClarificationStateMachine:
    def __init__(self, rules: tuple[FollowupRule, ...] = FOLLOWUP_RULES) -> None:
        self._rules = rules

    @staticmethod
    def needs_clarification(intent: Intent) -> bool:
        return intent in CLARIFICATION_INTENTS

    def generate_clarification(self, raw_text: str) -> ClarificationState:
        template = select_template(raw_text)
        logger.info("clarification_generated", type=template.type)
        return template.build()

    def resolve_followup(
        self, user_reply: str, original_query: str
    ) -> FollowupResolution | None:
        """Map a reply to a clarification prompt onto a concrete query and intent.

        Returns None when neither an offered option nor the remap table
        matches; callers treat that as unresolved, not as an error.
        """
        reply = _clean(user_reply)
        if not reply:
            return None

        state = self.generate_clarification(original_query)
        option = self._match_option(reply, state.options)
        if option is not None:
            logger.info("followup_resolved", source="option", type=state.type, query=option.mapped_query)
            return FollowupResolution(
                new_query=option.mapped_query,
                new_intent=option.mapped_intent,
                source="option",
            )

        rule = match_rule(reply, self._rules)
        if rule is not None:
            logger.info("followup_resolved", source="remap", query=rule.mapped_query)
            return FollowupResolution(
                new_query=rule.mapped_query,
                new_intent=rule.mapped_intent,
                source="remap",
            )

        logger.info("followup_unresolved", type=state.type)
        return None

    @staticmethod
    def _match_option(
        reply: str, options: tuple[ClarificationOption, ...]
    ) -> ClarificationOption | None:
        for option in options:
            label = _clean(option.label)
            query = _clean(option.mapped_query)
            if label in reply or query in reply:
                return option
            if len(reply) >= _MIN_PARTIAL_REPLY and (reply in label or reply in query):
                return option
        return None


def _clean(text: str | None) -> str:
    return re.sub(r"\s+", " ", (text or "").lower()).strip()
