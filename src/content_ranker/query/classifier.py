"""Priority-cascade intent classifier."""

from __future__ import annotations

from content_ranker.models.domain import Intent
from content_ranker.observability.logger import get_logger
from content_ranker.query.intent_patterns import INTENT_TABLE, IntentPattern

logger = get_logger("intent_classifier")


class IntentClassifier:
    def __init__(self, table: tuple[IntentPattern, ...] = INTENT_TABLE) -> None:
        self._table = tuple(sorted(table, key=lambda p: p.tier))

    def classify(self, raw_text: str | None) -> Intent:
        text = (raw_text or "").strip()
        if not text:
            return Intent.DEFAULT_CLARIFICATION

        match = self.match(text)
        if match is None:
            logger.debug("intent_defaulted", query=text)
            return Intent.DEFAULT_CLARIFICATION

        logger.debug(
            "intent_matched",
            tier=match.tier,
            pattern=match.pattern.pattern,
            intent=match.intent.value,
        )
        return match.intent

    def match(self, text: str) -> IntentPattern | None:
        """Return the first table entry matching ``text``, in tier order."""
        for entry in self._table:
            if entry.pattern.search(text):
                return entry
        return None
