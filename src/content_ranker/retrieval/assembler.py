"""Deduplicate, score, gate and truncate candidate entities."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from content_ranker.models.domain import ContentEntity, ScoredEntity
from content_ranker.observability.logger import get_logger
from content_ranker.scoring.relevance import RelevanceScorer

logger = get_logger("assembler")


def canonicalize_url(url: str) -> str:
    return (url or "").strip().rstrip("/")


def deduplicate(candidates: Iterable[ContentEntity]) -> list[ContentEntity]:
    """Drop later entities whose canonical URL was already seen."""
    seen: set[str] = set()
    unique = []
    for entity in candidates:
        key = canonicalize_url(entity.canonical_url)
        if key in seen:
            continue
        seen.add(key)
        unique.append(entity)
    return unique


class ResultAssembler:
    def __init__(self, scorer: RelevanceScorer) -> None:
        self._scorer = scorer

    def rank(
        self,
        candidates: Iterable[ContentEntity],
        keywords: Iterable[str],
        equipment_keywords: Iterable[str] = (),
        now: datetime | None = None,
    ) -> list[ScoredEntity]:
        """Score unique candidates and sort them, best first."""
        keywords = frozenset(keywords)
        equipment_keywords = frozenset(equipment_keywords)
        scored = [
            self._scorer.score(entity, keywords, equipment_keywords, now)
            for entity in deduplicate(candidates)
        ]
        scored.sort(key=lambda s: s.sort_key, reverse=True)
        return scored

    @staticmethod
    def select(
        ranked: list[ScoredEntity],
        equipment_keywords: Iterable[str],
        limit: int,
    ) -> tuple[list[ScoredEntity], bool]:
        """Apply the equipment filter and truncate.

        Returns the selected slice and whether the filter was abandoned
        because no candidate passed it.
        """
        equipment_keywords = frozenset(equipment_keywords)
        fallback = False
        if equipment_keywords:
            gated = [s for s in ranked if s.equipment_match]
            if gated:
                ranked = gated
            elif ranked:
                fallback = True
                logger.info(
                    "equipment_gate_fallback",
                    equipment_keywords=sorted(equipment_keywords),
                    candidates=len(ranked),
                )
        return ranked[: max(limit, 0)], fallback

    def assemble(
        self,
        candidates: Iterable[ContentEntity],
        keywords: Iterable[str],
        equipment_keywords: Iterable[str],
        limit: int,
        now: datetime | None = None,
    ) -> list[ContentEntity]:
        equipment_keywords = frozenset(equipment_keywords)
        ranked = self.rank(candidates, keywords, equipment_keywords, now)
        selected, _ = self.select(ranked, equipment_keywords, limit)
        return [s.entity for s in selected]
