"""Evaluation metric computation for intent and ranking regressions."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby

from content_ranker.models.domain import Intent


@dataclass
class EvalCaseResult:
    """Result of running a single evaluation case."""

    case_id: str
    query: str
    category: str
    expected_intent: str
    actual_intent: str
    intent_correct: bool
    expected_top_url: str | None
    actual_top_url: str | None
    top_result_correct: bool | None
    result_count: int
    clarification_type: str | None
    latency_ms: float
    error: str | None = None


def compute_metrics(results: list[EvalCaseResult]) -> dict:
    """Compute overall intent accuracy, top-result accuracy and averages."""
    total = len(results)
    if total == 0:
        return _empty_metrics()

    valid = [r for r in results if r.error is None]
    errors = [r for r in results if r.error is not None]

    intent_accuracy = sum(r.intent_correct for r in valid) / len(valid) if valid else 0.0

    with_top = [r for r in valid if r.top_result_correct is not None]
    top_accuracy = (
        sum(bool(r.top_result_correct) for r in with_top) / len(with_top) if with_top else 0.0
    )

    clarified = sum(1 for r in valid if r.clarification_type is not None)
    clarification_rate = clarified / len(valid) if valid else 0.0

    avg_results = sum(r.result_count for r in valid) / len(valid) if valid else 0.0
    avg_latency = sum(r.latency_ms for r in valid) / len(valid) if valid else 0.0

    return {
        "total_cases": total,
        "valid_cases": len(valid),
        "intent_accuracy": intent_accuracy,
        "ranked_cases": len(with_top),
        "top_result_accuracy": top_accuracy,
        "clarification_rate": clarification_rate,
        "avg_result_count": avg_results,
        "avg_latency_ms": avg_latency,
        "error_count": len(errors),
    }


def build_confusion_matrix(results: list[EvalCaseResult]) -> dict[str, dict[str, int]]:
    """Rows are expected intents, columns are actual intents."""
    labels = [i.value for i in Intent]
    matrix: dict[str, dict[str, int]] = {exp: {act: 0 for act in labels} for exp in labels}

    for r in results:
        if r.error is not None:
            continue
        if r.expected_intent in matrix and r.actual_intent in matrix:
            matrix[r.expected_intent][r.actual_intent] += 1

    return matrix


def compute_category_metrics(results: list[EvalCaseResult]) -> dict[str, dict]:
    valid = [r for r in results if r.error is None]
    if not valid:
        return {}

    categories: dict[str, dict] = {}
    sorted_results = sorted(valid, key=lambda r: r.category)

    for cat, group in groupby(sorted_results, key=lambda r: r.category):
        cat_results = list(group)
        n = len(cat_results)
        categories[cat] = {
            "count": n,
            "intent_accuracy": sum(r.intent_correct for r in cat_results) / n,
            "avg_result_count": sum(r.result_count for r in cat_results) / n,
            "avg_latency_ms": sum(r.latency_ms for r in cat_results) / n,
        }

    return categories


def _empty_metrics() -> dict:
    return {
        "total_cases": 0,
        "valid_cases": 0,
        "intent_accuracy": 0.0,
        "ranked_cases": 0,
        "top_result_accuracy": 0.0,
        "clarification_rate": 0.0,
        "avg_result_count": 0.0,
        "avg_latency_ms": 0.0,
        "error_count": 0,
    }
