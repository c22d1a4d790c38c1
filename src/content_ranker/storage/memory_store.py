"""In-memory content store used by tests and the evaluation harness."""

from __future__ import annotations

import json
from collections import defaultdict
from collections.abc import Iterable
from pathlib import Path

from content_ranker.exceptions import ContentStoreError
from content_ranker.models.domain import ContentEntity, ContentKind


class InMemoryContentStore:
    def __init__(self, entities: Iterable[ContentEntity] = ()) -> None:
        self._by_kind: dict[ContentKind, list[ContentEntity]] = defaultdict(list)
        self.add(entities)

    @classmethod
    def from_json(cls, path: Path) -> InMemoryContentStore:
        try:
            with open(path) as f:
                rows = json.load(f)
            return cls(ContentEntity.from_dict(row) for row in rows)
        except (OSError, ValueError, KeyError) as e:
            raise ContentStoreError(f"cannot load catalogue {path}: {e}") from e

    def add(self, entities: Iterable[ContentEntity]) -> None:
        for entity in entities:
            self._by_kind[entity.kind].append(entity)

    def __len__(self) -> int:
        return sum(len(v) for v in self._by_kind.values())

    async def fetch_candidates(
        self,
        kind: ContentKind,
        keyword_filter: list[str] | None = None,
    ) -> list[ContentEntity]:
        entities = self._by_kind.get(kind, [])
        if not keyword_filter:
            return list(entities)
        needles = [k.lower() for k in keyword_filter if k]
        return [e for e in entities if any(n in _haystack(e) for n in needles)]


def _haystack(entity: ContentEntity) -> str:
    parts = [entity.title, entity.canonical_url, *entity.categories, *entity.tags]
    return " ".join(parts).lower()
