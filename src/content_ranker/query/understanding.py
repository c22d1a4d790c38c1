"""Query normalization and keyword extraction composed into a NormalizedQuery."""

from __future__ import annotations

from content_ranker.config.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from content_ranker.models.domain import NormalizedQuery
from content_ranker.observability.logger import get_logger
from content_ranker.query.keywords import KeywordExtractor
from content_ranker.query.normalizer import QueryNormalizer

logger = get_logger("query_understanding")


class QueryUnderstanding:
    def __init__(self, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> None:
        self._normalizer = QueryNormalizer(vocabulary)
        self._extractor = KeywordExtractor(vocabulary)

    def process(self, raw_text: str) -> NormalizedQuery:
        normalized = self._normalizer.normalize(raw_text)
        keywords, equipment = self._extractor.extract(normalized)

        logger.info(
            "query_processed",
            keywords=sorted(keywords),
            equipment_keywords=sorted(equipment),
        )

        return NormalizedQuery(
            normalized_text=normalized,
            keywords=keywords,
            equipment_keywords=equipment,
        )
