"""Protocol for the external content store."""

from __future__ import annotations

from typing import Protocol

from content_ranker.models.domain import ContentEntity, ContentKind


class ContentStore(Protocol):
    async def fetch_candidates(
        self,
        kind: ContentKind,
        keyword_filter: list[str] | None = None,
    ) -> list[ContentEntity]: ...
