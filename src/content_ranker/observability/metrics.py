"""Metric recording helpers for ranking requests."""

from __future__ import annotations

from content_ranker.models.domain import Trace
from content_ranker.observability.logger import get_logger

logger = get_logger("metrics")


def log_fetch_metrics(
    trace_id: str,
    counts: dict[str, int],
    failed_kinds: list[str],
) -> None:
    logger.info(
        "fetch_metrics",
        trace_id=trace_id,
        counts=counts,
        total=sum(counts.values()),
        failed_kinds=failed_kinds,
    )


def log_ranking_metrics(
    trace_id: str,
    intent: str,
    top_scores: list[int],
    num_candidates: int,
    num_returned: int,
    gate_fallback: bool,
) -> None:
    logger.info(
        "ranking_metrics",
        trace_id=trace_id,
        intent=intent,
        top_scores=top_scores[:5],
        num_candidates=num_candidates,
        num_returned=num_returned,
        gate_fallback=gate_fallback,
    )


def log_latency(trace_id: str, stage: str, duration_ms: float) -> None:
    logger.info(
        "latency",
        trace_id=trace_id,
        stage=stage,
        duration_ms=round(duration_ms, 2),
    )


def log_trace(trace: Trace) -> None:
    for span in trace.spans:
        log_latency(trace.trace_id, span["name"], span["duration_ms"])
    logger.info(
        "request_traced",
        trace_id=trace.trace_id,
        intent=trace.intent,
        result_count=trace.result_count,
        latency_ms=round(trace.latency_ms, 2),
        spans=trace.spans,
    )
