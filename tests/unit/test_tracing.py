"""Tests for per-request stage tracing."""

import pytest

from content_ranker.exceptions import ContentStoreError
from content_ranker.models.domain import Intent
from content_ranker.observability.tracing import Span, TraceContext


def test_span_annotations_in_dict():
    span = Span(name="retrieval", start_ms=1.0, end_ms=3.5, attributes={"kinds": ["article"]})
    span.annotate(candidates=4, failed_kinds=[])
    assert span.duration_ms == 2.5
    assert span.as_dict() == {
        "name": "retrieval",
        "start_ms": 1.0,
        "duration_ms": 2.5,
        "kinds": ["article"],
        "candidates": 4,
        "failed_kinds": [],
    }


def test_open_span_has_zero_duration():
    assert Span(name="assembly", start_ms=5.0).duration_ms == 0.0


def test_span_context_records_stage_and_attributes():
    trace = TraceContext(trace_id="t-1")
    with trace.span("retrieval", kinds=["event", "product"]) as span:
        span.annotate(candidates=2)
    assert trace.stage_names() == ["retrieval"]
    recorded = trace.spans[0]
    assert recorded.end_ms is not None
    assert recorded.attributes == {"kinds": ["event", "product"], "candidates": 2}


def test_span_marks_error_and_reraises():
    trace = TraceContext()
    with pytest.raises(ContentStoreError):
        with trace.span("retrieval"):
            raise ContentStoreError("store down")
    assert trace.spans[0].attributes["error"] == "ContentStoreError"
    assert trace.spans[0].end_ms is not None


def test_to_trace_carries_outcome():
    trace = TraceContext(trace_id="t-2")
    with trace.span("classification") as span:
        span.annotate(intent=Intent.DIRECT_ANSWER.value)
    trace.record_outcome(Intent.DIRECT_ANSWER, 3)
    record = trace.to_trace(query="what is iso")
    assert record.trace_id == "t-2"
    assert record.query == "what is iso"
    assert record.intent == "direct_answer"
    assert record.result_count == 3
    assert record.spans[0]["name"] == "classification"
    assert record.spans[0]["intent"] == "direct_answer"
    assert record.latency_ms >= 0


def test_to_trace_without_outcome():
    record = TraceContext().to_trace(query="")
    assert record.intent == ""
    assert record.result_count == 0
    assert record.spans == []
