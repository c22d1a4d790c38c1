"""Multi-factor relevance scoring for candidate content entities.

Base score = equipment gate + keyword matches + curriculum boost
             + concept boosts - generic-content penalty + tips boost.

The recency bonus is kept as a second sort field so it can only break ties
between equal base scores; ``ScoredEntity.score`` exposes the equivalent
``base * 1000 + recency`` integer encoding.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from content_ranker.config.settings import Settings
from content_ranker.config.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from content_ranker.exceptions import ConfigurationError
from content_ranker.models.domain import ContentEntity, ScoredEntity
from content_ranker.scoring.recency import RecencyBonus


def matches_equipment(entity: ContentEntity, equipment_keywords: Iterable[str]) -> bool:
    title = entity.title.lower()
    url = entity.canonical_url.lower()
    return any(eq in title or eq in url for eq in equipment_keywords)


class RelevanceScorer:
    def __init__(self, settings: Settings, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> None:
        self._s = settings
        self._vocab = vocabulary
        self._recency = RecencyBonus(settings)
        self._curriculum = settings.curriculum_category.lower()
        self._tips = settings.tips_category.lower()
        if self._recency.max_bonus >= ScoredEntity.ENCODING_BASE:
            raise ConfigurationError(
                f"recency bonus {self._recency.max_bonus} would overflow the "
                f"score encoding base {ScoredEntity.ENCODING_BASE}"
            )

    def score(
        self,
        entity: ContentEntity,
        keywords: Iterable[str],
        equipment_keywords: Iterable[str] = (),
        now: datetime | None = None,
    ) -> ScoredEntity:
        keywords = frozenset(keywords)
        equipment_keywords = frozenset(equipment_keywords)
        s = self._s
        title = entity.title.lower()
        url = entity.canonical_url.lower()
        categories = {c.lower() for c in entity.categories}
        total = 0

        # 1. Equipment gate
        gate_failed = False
        if equipment_keywords:
            gate_failed = not matches_equipment(entity, equipment_keywords)
            if gate_failed:
                total -= s.equipment_gate_penalty

        # 2. Keyword matches
        for kw in keywords:
            if not kw:
                continue
            if kw in title:
                total += s.title_match_weight
            if kw in url:
                total += s.url_match_weight

        concepts = [c for c in self._vocab.core_concepts if c in keywords]

        # 3. Curriculum boost, withheld from entities that failed the gate
        if concepts and self._curriculum in categories and not gate_failed:
            total += s.curriculum_boost

        # 4. Concept boosts
        for concept in concepts:
            total += self._concept_boost(concept, title, url)

        # 5. Generic changelog-style content
        if concepts and (
            self._vocab.off_topic_title.search(title) or self._vocab.off_topic_url.search(url)
        ):
            total -= s.generic_content_penalty

        # 6. Tips category
        if concepts and self._tips in categories:
            total += s.tips_category_boost

        return ScoredEntity(
            entity=entity,
            base_score=total,
            recency_bonus=self._recency.bonus(entity, now),
            equipment_match=not gate_failed,
        )

    def _concept_boost(self, concept: str, title: str, url: str) -> int:
        s = self._s
        phrase = f"what is {concept}"
        slug = concept.replace(" ", "-")
        boost = 0
        if title.startswith(phrase):
            boost += s.what_is_title_prefix_boost
        if phrase in title:
            boost += s.what_is_title_boost
        if f"/what-is-{slug}" in url:
            boost += s.what_is_url_boost
        if slug in url:
            boost += s.concept_slug_url_boost
        return boost
