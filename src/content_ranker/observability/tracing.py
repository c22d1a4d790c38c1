"""Per-request tracing: timed stage spans annotated with ranking decisions."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from content_ranker.models.domain import Intent, Trace


@dataclass
class Span:
    name: str
    start_ms: float
    end_ms: float | None = None
    attributes: dict = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.end_ms is None:
            return 0.0
        return self.end_ms - self.start_ms

    def annotate(self, **attributes) -> None:
        """Attach stage outcomes (intent, kinds fetched, gate fallback, ...)."""
        self.attributes.update(attributes)

    def as_dict(self) -> dict:
        return {
            "name": self.name,
            "start_ms": round(self.start_ms, 3),
            "duration_ms": round(self.duration_ms, 3),
            **self.attributes,
        }


class TraceContext:
    """Collects the stage spans of one ``classify_and_rank`` call."""

    def __init__(self, trace_id: str | None = None) -> None:
        self.trace_id = trace_id or str(uuid4())
        self.started_at = datetime.now(timezone.utc)
        self.spans: list[Span] = []
        self.intent: Intent | None = None
        self.result_count = 0
        self._t0 = time.perf_counter()

    def _now_ms(self) -> float:
        return (time.perf_counter() - self._t0) * 1000

    @contextmanager
    def span(self, name: str, **attributes):
        s = Span(name=name, start_ms=self._now_ms(), attributes=dict(attributes))
        self.spans.append(s)
        try:
            yield s
        except Exception as e:
            s.annotate(error=type(e).__name__)
            raise
        finally:
            s.end_ms = self._now_ms()

    def record_outcome(self, intent: Intent, result_count: int) -> None:
        self.intent = intent
        self.result_count = result_count

    def stage_names(self) -> list[str]:
        return [s.name for s in self.spans]

    def to_trace(self, query: str) -> Trace:
        return Trace(
            trace_id=self.trace_id,
            query=query,
            timestamp=self.started_at,
            latency_ms=self._now_ms(),
            intent=self.intent.value if self.intent is not None else "",
            result_count=self.result_count,
            spans=[s.as_dict() for s in self.spans],
        )
