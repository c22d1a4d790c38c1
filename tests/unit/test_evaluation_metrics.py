"""Tests for evaluation metric computation."""

from content_ranker.evaluation.metrics import (
    EvalCaseResult,
    build_confusion_matrix,
    compute_category_metrics,
    compute_metrics,
)


def _result(case_id, category, expected, actual, top=None, clarification=None, error=None):
    return EvalCaseResult(
        case_id=case_id,
        query=case_id,
        category=category,
        expected_intent=expected,
        actual_intent=actual,
        intent_correct=expected == actual,
        expected_top_url="https://example.com/x" if top is not None else None,
        actual_top_url="https://example.com/x" if top else None,
        top_result_correct=top,
        result_count=0 if clarification else 3,
        clarification_type=clarification,
        latency_ms=2.0,
        error=error,
    )


def _sample():
    return [
        _result("a", "concepts", "direct_answer", "direct_answer", top=True),
        _result("b", "concepts", "direct_answer", "direct_answer", top=False),
        _result("c", "events", "workshop_event", "contact_policy"),
        _result(
            "d",
            "clarification",
            "broad_clarification",
            "broad_clarification",
            clarification="equipment_clarification",
        ),
        _result("e", "events", "workshop_event", "error", error="boom"),
    ]


def test_compute_metrics():
    metrics = compute_metrics(_sample())
    assert metrics["total_cases"] == 5
    assert metrics["valid_cases"] == 4
    assert metrics["error_count"] == 1
    assert metrics["intent_accuracy"] == 0.75
    assert metrics["ranked_cases"] == 2
    assert metrics["top_result_accuracy"] == 0.5
    assert metrics["clarification_rate"] == 0.25


def test_compute_metrics_empty():
    metrics = compute_metrics([])
    assert metrics["total_cases"] == 0
    assert metrics["intent_accuracy"] == 0.0


def test_confusion_matrix_skips_errors():
    matrix = build_confusion_matrix(_sample())
    assert matrix["direct_answer"]["direct_answer"] == 2
    assert matrix["workshop_event"]["contact_policy"] == 1
    assert matrix["workshop_event"]["workshop_event"] == 0
    assert sum(sum(row.values()) for row in matrix.values()) == 4


def test_category_metrics():
    by_category = compute_category_metrics(_sample())
    assert set(by_category) == {"concepts", "events", "clarification"}
    assert by_category["concepts"]["intent_accuracy"] == 1.0
    assert by_category["events"]["count"] == 1
    assert by_category["events"]["intent_accuracy"] == 0.0
