"""Concurrent per-kind candidate fetching with isolated failures."""

from __future__ import annotations

import asyncio

from content_ranker.config.settings import Settings
from content_ranker.config.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from content_ranker.exceptions import CandidateFetchError
from content_ranker.models.domain import ContentEntity, ContentKind, Intent
from content_ranker.observability.logger import get_logger
from content_ranker.protocols.content_store import ContentStore

logger = get_logger("candidate_fetcher")

ALL_KINDS = (
    ContentKind.ARTICLE,
    ContentKind.EVENT,
    ContentKind.PRODUCT,
    ContentKind.SERVICE,
    ContentKind.LANDING,
)

INTENT_KINDS: dict[Intent, tuple[ContentKind, ...]] = {
    Intent.WORKSHOP_EVENT: (ContentKind.EVENT, ContentKind.PRODUCT),
    Intent.CONTACT_POLICY: (ContentKind.SERVICE, ContentKind.LANDING, ContentKind.ARTICLE),
    Intent.DIRECT_ANSWER: ALL_KINDS,
}


def kinds_for_intent(intent: Intent) -> tuple[ContentKind, ...]:
    return INTENT_KINDS.get(intent, ())


class CandidateFetcher:
    def __init__(
        self,
        store: ContentStore,
        settings: Settings,
        vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    ) -> None:
        self._store = store
        self._timeout = settings.fetch_timeout_seconds
        self._vocab = vocabulary
        self._limits = {
            ContentKind.EVENT: settings.event_fetch_limit,
            ContentKind.PRODUCT: settings.product_fetch_limit,
            ContentKind.SERVICE: settings.service_fetch_limit,
            ContentKind.ARTICLE: settings.article_fetch_limit,
            ContentKind.LANDING: settings.landing_fetch_limit,
        }

    async def fetch(
        self,
        kinds: tuple[ContentKind, ...],
        keywords: frozenset[str],
    ) -> tuple[list[ContentEntity], dict[str, int], list[str]]:
        """Fetch every kind concurrently and join the slices in kind order.

        Returns ``(candidates, counts_by_kind, failed_kinds)``. A kind that
        fails or times out contributes an empty slice.
        """
        if not kinds:
            return [], {}, []

        outcomes = await asyncio.gather(
            *(self._fetch_kind(kind, keywords) for kind in kinds),
            return_exceptions=True,
        )

        candidates: list[ContentEntity] = []
        counts: dict[str, int] = {}
        failed: list[str] = []
        for kind, outcome in zip(kinds, outcomes):
            if isinstance(outcome, CandidateFetchError):
                failed.append(kind.value)
                counts[kind.value] = 0
                continue
            if isinstance(outcome, BaseException):
                raise outcome
            counts[kind.value] = len(outcome)
            candidates.extend(outcome)
        return candidates, counts, failed

    async def _fetch_kind(
        self, kind: ContentKind, keywords: frozenset[str]
    ) -> list[ContentEntity]:
        keyword_filter = self.keyword_filter(kind, keywords)
        try:
            rows = await asyncio.wait_for(
                self._store.fetch_candidates(kind, keyword_filter),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("candidate_fetch_timeout", kind=kind.value, timeout_s=self._timeout)
            raise CandidateFetchError(kind.value, "timeout") from None
        except Exception as e:
            logger.warning("candidate_fetch_failed", kind=kind.value, error=str(e))
            raise CandidateFetchError(kind.value, str(e)) from e

        return list(rows or [])[: self._limits.get(kind, len(rows or []))]

    def keyword_filter(self, kind: ContentKind, keywords: frozenset[str]) -> list[str]:
        ordered = sorted(keywords)
        if kind is not ContentKind.EVENT:
            return ordered
        # Temporal words kill event matches; keep them only if nothing else is left.
        filtered = [k for k in ordered if k not in self._vocab.event_stop_words]
        return filtered or ordered
