"""Run the intent/ranking evaluation harness against the catalogue fixture.

Usage:
    python scripts/run_eval.py [--dataset PATH] [--catalogue PATH] [--output PATH]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import asdict
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from content_ranker.config.settings import Settings
from content_ranker.evaluation.metrics import (
    EvalCaseResult,
    build_confusion_matrix,
    compute_category_metrics,
    compute_metrics,
)
from content_ranker.evaluation.runner import DEFAULT_CONCURRENCY, run_evaluation
from content_ranker.models.domain import Intent
from content_ranker.observability.logger import setup_logging

FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"
DATASET_PATH = FIXTURES_DIR / "eval_dataset.json"
CATALOGUE_PATH = FIXTURES_DIR / "catalogue.json"


def print_header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def print_summary(metrics: dict) -> None:
    print_header("EVALUATION SUMMARY")
    print(f"  Total cases:          {metrics['total_cases']}")
    print(f"  Valid cases:          {metrics['valid_cases']}")
    print(f"  Errors:               {metrics['error_count']}")
    print(f"  Intent accuracy:      {metrics['intent_accuracy']:.1%}")
    print(f"  Ranked cases:         {metrics['ranked_cases']}")
    print(f"  Top-result accuracy:  {metrics['top_result_accuracy']:.1%}")
    print(f"  Clarification rate:   {metrics['clarification_rate']:.1%}")
    print(f"  Avg result count:     {metrics['avg_result_count']:.2f}")
    print(f"  Avg latency:          {metrics['avg_latency_ms']:.1f} ms")


def print_category_breakdown(by_category: dict) -> None:
    print_header("PER-CATEGORY BREAKDOWN")
    header = f"  {'Category':<16} {'Count':>5} {'Accuracy':>10} {'Results':>9} {'Latency':>10}"
    print(header)
    print(f"  {'-' * 52}")
    for cat, m in sorted(by_category.items()):
        print(
            f"  {cat:<16} {m['count']:>5} "
            f"{m['intent_accuracy']:>9.1%} "
            f"{m['avg_result_count']:>9.2f} "
            f"{m['avg_latency_ms']:>8.1f}ms"
        )


def print_confusion_matrix(matrix: dict) -> None:
    print_header("INTENT CONFUSION MATRIX (expected \\ actual)")
    labels = [i.value for i in Intent]
    short = [label.split("_")[0][:8] for label in labels]
    print(f"  {'':>22}" + "".join(f"{s:>10}" for s in short))
    print(f"  {'-' * (22 + 10 * len(labels))}")
    for exp in labels:
        row = f"  {exp:>22}"
        for act in labels:
            row += f"{matrix[exp][act]:>10}"
        print(row)


def print_case_details(results: list[EvalCaseResult]) -> None:
    print_header("INDIVIDUAL CASE RESULTS")
    for r in results:
        if r.error:
            status = "ERROR"
        elif r.intent_correct and r.top_result_correct is not False:
            status = "PASS"
        else:
            status = "FAIL"

        print(
            f"  [{status:>5}] {r.case_id:<16} | "
            f"expected={r.expected_intent:<22} actual={r.actual_intent:<22} | "
            f"results={r.result_count}"
        )
        if r.top_result_correct is False:
            print(f"         top: expected {r.expected_top_url} got {r.actual_top_url}")
        if r.error:
            print(f"         error: {r.error}")


def save_results(results: list[EvalCaseResult], metrics: dict, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "metrics": metrics,
        "results": [asdict(r) for r in results],
    }
    with open(output_path, "w") as f:
        json.dump(payload, f, indent=2, default=str)
    print(f"\nRaw results saved to {output_path}")


async def main(dataset: Path, catalogue: Path, output_path: Path, concurrency: int) -> None:
    settings = Settings()
    setup_logging(settings.log_level, settings.log_json)

    print(f"Dataset:   {dataset}")
    print(f"Catalogue: {catalogue}")

    results = await run_evaluation(
        dataset_path=dataset,
        catalogue_path=catalogue,
        concurrency=concurrency,
    )

    metrics = compute_metrics(results)
    confusion = build_confusion_matrix(results)
    by_category = compute_category_metrics(results)

    metrics["confusion_matrix"] = confusion
    metrics["by_category"] = by_category

    print_summary(metrics)
    print_category_breakdown(by_category)
    print_confusion_matrix(confusion)
    print_case_details(results)

    save_results(results, metrics, output_path)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run intent/ranking evaluation harness")
    parser.add_argument("--dataset", default=str(DATASET_PATH), help="Evaluation dataset JSON")
    parser.add_argument("--catalogue", default=str(CATALOGUE_PATH), help="Content catalogue JSON")
    parser.add_argument(
        "--output",
        default="data/eval_results.json",
        help="Path to save raw results JSON (default: data/eval_results.json)",
    )
    parser.add_argument("--concurrency", type=int, default=DEFAULT_CONCURRENCY)
    args = parser.parse_args()
    asyncio.run(main(Path(args.dataset), Path(args.catalogue), Path(args.output), args.concurrency))
