"""Evaluation runner: loads the question dataset and runs it through the pipeline."""

from __future__ import annotations

import asyncio
import json
import time
from datetime import datetime
from pathlib import Path

from content_ranker.evaluation.metrics import EvalCaseResult
from content_ranker.exceptions import ConfigurationError
from content_ranker.models.domain import Query
from content_ranker.observability.logger import get_logger
from content_ranker.pipeline.query_pipeline import QueryPipeline
from content_ranker.storage.memory_store import InMemoryContentStore

logger = get_logger("evaluation")

DEFAULT_CONCURRENCY = 8


def load_dataset(path: Path) -> list[dict]:
    """Load evaluation dataset from JSON file."""
    with open(path) as f:
        return json.load(f)


async def run_single_case(
    pipeline: QueryPipeline,
    case: dict,
    semaphore: asyncio.Semaphore,
    now: datetime | None = None,
) -> EvalCaseResult:
    """Run a single evaluation case through the pipeline."""
    async with semaphore:
        expected_intent = case["expected_intent"]
        expected_top = case.get("expected_top_url")
        start = time.monotonic()
        try:
            result = await pipeline.classify_and_rank(
                Query(
                    raw_text=case["query"],
                    session_id=f"eval-{case['id']}",
                    previous_query=case.get("previous_query"),
                ),
                now=now,
            )
            latency = (time.monotonic() - start) * 1000
            results = result.results or []
            top_url = results[0].canonical_url if results else None

            return EvalCaseResult(
                case_id=case["id"],
                query=case["query"],
                category=case.get("category", "uncategorised"),
                expected_intent=expected_intent,
                actual_intent=result.intent.value,
                intent_correct=result.intent.value == expected_intent,
                expected_top_url=expected_top,
                actual_top_url=top_url,
                top_result_correct=None if expected_top is None else top_url == expected_top,
                result_count=len(results),
                clarification_type=result.clarification.type if result.clarification else None,
                latency_ms=latency,
            )
        except Exception as e:
            logger.error("eval_case_failed", case_id=case["id"], error=str(e))
            return EvalCaseResult(
                case_id=case["id"],
                query=case["query"],
                category=case.get("category", "uncategorised"),
                expected_intent=expected_intent,
                actual_intent="error",
                intent_correct=False,
                expected_top_url=expected_top,
                actual_top_url=None,
                top_result_correct=None if expected_top is None else False,
                result_count=0,
                clarification_type=None,
                latency_ms=0.0,
                error=str(e),
            )


async def run_evaluation(
    dataset_path: Path,
    catalogue_path: Path | None = None,
    pipeline: QueryPipeline | None = None,
    concurrency: int = DEFAULT_CONCURRENCY,
    now: datetime | None = None,
) -> list[EvalCaseResult]:
    """Run the whole dataset with bounded concurrency.

    Without an explicit pipeline, one is built over an in-memory store
    loaded from ``catalogue_path``.
    """
    dataset = load_dataset(dataset_path)
    if pipeline is None:
        if catalogue_path is None:
            raise ConfigurationError("run_evaluation needs a pipeline or a catalogue path")
        store = InMemoryContentStore.from_json(catalogue_path)
        pipeline = QueryPipeline.build(store)

    semaphore = asyncio.Semaphore(concurrency)
    tasks = [run_single_case(pipeline, case, semaphore, now) for case in dataset]
    results = await asyncio.gather(*tasks)
    return list(results)
