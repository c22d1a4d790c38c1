"""Free-text remapping table for clarification follow-ups.

Consulted when a reply does not match any offered option. Rules are
evaluated top to bottom and the first match wins: a reply containing the
triggers of two rules is routed by whichever rule comes first.
"""

from __future__ import annotations

from dataclasses import dataclass

from content_ranker.models.domain import Intent

EVENTS = Intent.WORKSHOP_EVENT
ADVICE = Intent.DIRECT_ANSWER


@dataclass(frozen=True)
class FollowupRule:
    any_of: tuple[str, ...]
    mapped_query: str
    mapped_intent: Intent
    all_of: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        if self.any_of and not any(t in text for t in self.any_of):
            return False
        return all(t in text for t in self.all_of)


FOLLOWUP_RULES: tuple[FollowupRule, ...] = (
    # option queries that commonly come back verbatim
    FollowupRule(("equipment for photography course",), "equipment for photography course", EVENTS),
    FollowupRule(("photography courses",), "photography courses", EVENTS),
    FollowupRule(("photography workshops",), "photography workshops", EVENTS),
    FollowupRule(("photography equipment advice",), "photography equipment advice", ADVICE),
    FollowupRule(("camera lens recommendations",), "camera lens recommendations", ADVICE),
    FollowupRule(("photography exhibitions",), "photography exhibitions", ADVICE),
    FollowupRule(("photography mentoring", "mentoring"), "photography mentoring", ADVICE),
    # free-text phrasings
    FollowupRule(("online", "can't get to coventry"), "online photography courses", ADVICE),
    FollowupRule(("camera course",), "camera course for beginners", ADVICE),
    FollowupRule(("editing course", "beginners editing"), "beginner editing course", EVENTS),
    FollowupRule(("bluebell",), "bluebell photography workshops", EVENTS),
    FollowupRule(("outdoor",), "outdoor photography workshops", EVENTS),
    FollowupRule(("sony",), "sony camera recommendations", ADVICE),
    FollowupRule(("entry level", "beginners camera"), "beginner camera recommendations", ADVICE),
    FollowupRule(
        ("basic camera settings", "composition", "editing"),
        "camera settings and composition lessons",
        ADVICE,
    ),
    FollowupRule(
        ("intermediate",),
        "camera upgrade for intermediate photographers",
        ADVICE,
        all_of=("upgrade",),
    ),
    FollowupRule(("teaching", "how long"), "Alan Ranger teaching experience", ADVICE),
    FollowupRule(("qualified", "qualifications"), "Alan Ranger qualifications", ADVICE),
    FollowupRule(("where is he based", "location"), "Alan Ranger location", ADVICE),
    FollowupRule(("private",), "private photography lessons", ADVICE),
    FollowupRule(("work rota", "shifts", "flexible"), "flexible photography lessons", ADVICE),
    FollowupRule(("exposure",), "manual exposure settings", ADVICE),
    FollowupRule(("manual mode",), "manual mode tutorial", ADVICE),
    FollowupRule(("birmingham",), "photography courses near Birmingham", ADVICE),
    FollowupRule(("suitable for beginners", "complete beginners"), "beginner photography courses", ADVICE),
    FollowupRule(("dates and cost", "where are they"), "workshop dates and locations", EVENTS),
    FollowupRule(("really free",), "free online photography course confirmation", ADVICE),
    FollowupRule(("how do i join", "how to join"), "how to join free course", ADVICE),
    FollowupRule(("astrophotography",), "astrophotography settings", ADVICE),
    FollowupRule(("night photography",), "night photography settings", ADVICE),
    FollowupRule(("differences",), "online vs in-person course differences", ADVICE),
    FollowupRule(("dslr", "mirrorless"), "DSLR vs mirrorless camera comparison", ADVICE),
    FollowupRule(("coming up this month", "upcoming"), "upcoming photography workshops", EVENTS),
    FollowupRule(("yes",), "free course details", ADVICE, all_of=("free",)),
    FollowupRule(("beginner",), "beginner photography courses", ADVICE, all_of=("ok",)),
)


def match_rule(text: str, rules: tuple[FollowupRule, ...] = FOLLOWUP_RULES) -> FollowupRule | None:
    lc = (text or "").lower()
    for rule in rules:
        if rule.matches(lc):
            return rule
    return None
