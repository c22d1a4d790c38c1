"""Core domain objects used throughout the system."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum


class Intent(str, Enum):
    COURSE_CLARIFICATION = "course_clarification"
    CONTACT_POLICY = "contact_policy"
    WORKSHOP_EVENT = "workshop_event"
    DIRECT_ANSWER = "direct_answer"
    BROAD_CLARIFICATION = "broad_clarification"
    DEFAULT_CLARIFICATION = "default_clarification"


CLARIFICATION_INTENTS = frozenset(
    {
        Intent.COURSE_CLARIFICATION,
        Intent.BROAD_CLARIFICATION,
        Intent.DEFAULT_CLARIFICATION,
    }
)


class ContentKind(str, Enum):
    ARTICLE = "article"
    EVENT = "event"
    PRODUCT = "product"
    SERVICE = "service"
    LANDING = "landing"


@dataclass(frozen=True)
class Query:
    raw_text: str
    session_id: str = ""
    previous_query: str | None = None
    page_context: dict | None = None


@dataclass(frozen=True)
class NormalizedQuery:
    normalized_text: str
    keywords: frozenset[str]
    equipment_keywords: frozenset[str]


@dataclass(frozen=True)
class ContentEntity:
    kind: ContentKind
    title: str
    canonical_url: str
    categories: frozenset[str] = frozenset()
    tags: frozenset[str] = frozenset()
    publish_date: date | None = None
    last_seen: datetime | None = None
    raw: dict = field(default_factory=dict, hash=False, compare=False)

    @classmethod
    def from_dict(cls, data: dict) -> ContentEntity:
        """Build an entity from a store row (JSON-compatible dict)."""
        publish = data.get("publish_date")
        seen = data.get("last_seen")
        return cls(
            kind=ContentKind(data["kind"]),
            title=data.get("title") or "",
            canonical_url=data.get("canonical_url") or data.get("page_url") or "",
            categories=frozenset(c.lower() for c in data.get("categories") or []),
            tags=frozenset(t.lower() for t in data.get("tags") or []),
            publish_date=date.fromisoformat(publish[:10]) if publish else None,
            last_seen=_parse_timestamp(seen) if seen else None,
            raw=data.get("raw") or {},
        )


@dataclass(frozen=True)
class ScoredEntity:
    entity: ContentEntity
    base_score: int
    recency_bonus: int
    equipment_match: bool = True

    ENCODING_BASE = 1000

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.base_score, self.recency_bonus)

    @property
    def score(self) -> int:
        """Single-integer encoding: base score dominates, recency breaks ties."""
        return self.base_score * self.ENCODING_BASE + self.recency_bonus


@dataclass(frozen=True)
class ClarificationOption:
    label: str
    mapped_query: str
    mapped_intent: Intent


@dataclass(frozen=True)
class ClarificationState:
    type: str
    question: str
    options: tuple[ClarificationOption, ...]


@dataclass(frozen=True)
class FollowupResolution:
    new_query: str
    new_intent: Intent
    source: str  # "option" or "remap"


@dataclass
class RankingResult:
    intent: Intent
    query: str
    clarification: ClarificationState | None = None
    results: list[ContentEntity] | None = None
    resolution: FollowupResolution | None = None
    followup_unresolved: bool = False
    trace_id: str = ""


@dataclass
class Trace:
    trace_id: str
    query: str
    timestamp: datetime
    latency_ms: float
    intent: str
    result_count: int
    spans: list[dict]


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
