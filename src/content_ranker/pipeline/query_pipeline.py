"""Master query pipeline: understanding, classification, clarification, ranking."""

from __future__ import annotations

from datetime import datetime

import structlog

from content_ranker.clarification.state_machine import ClarificationStateMachine
from content_ranker.config.settings import Settings
from content_ranker.config.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from content_ranker.models.domain import (
    FollowupResolution,
    Intent,
    Query,
    RankingResult,
)
from content_ranker.observability.logger import get_logger
from content_ranker.observability.metrics import (
    log_fetch_metrics,
    log_ranking_metrics,
    log_trace,
)
from content_ranker.observability.tracing import TraceContext
from content_ranker.protocols.content_store import ContentStore
from content_ranker.query.classifier import IntentClassifier
from content_ranker.query.understanding import QueryUnderstanding
from content_ranker.retrieval.assembler import ResultAssembler
from content_ranker.retrieval.candidate_fetcher import CandidateFetcher, kinds_for_intent
from content_ranker.scoring.relevance import RelevanceScorer

logger = get_logger("query_pipeline")


class QueryPipeline:
    def __init__(
        self,
        query_understanding: QueryUnderstanding,
        classifier: IntentClassifier,
        clarifier: ClarificationStateMachine,
        fetcher: CandidateFetcher,
        assembler: ResultAssembler,
        settings: Settings,
    ) -> None:
        self._qu = query_understanding
        self._classifier = classifier
        self._clarifier = clarifier
        self._fetcher = fetcher
        self._assembler = assembler
        self._settings = settings

    @classmethod
    def build(
        cls,
        store: ContentStore,
        settings: Settings | None = None,
        vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    ) -> QueryPipeline:
        settings = settings or Settings()
        return cls(
            query_understanding=QueryUnderstanding(vocabulary),
            classifier=IntentClassifier(),
            clarifier=ClarificationStateMachine(),
            fetcher=CandidateFetcher(store, settings, vocabulary),
            assembler=ResultAssembler(RelevanceScorer(settings, vocabulary)),
            settings=settings,
        )

    async def classify_and_rank(
        self,
        query: Query,
        limit: int | None = None,
        now: datetime | None = None,
    ) -> RankingResult:
        trace = TraceContext()
        limit = limit if limit is not None else self._settings.default_result_limit
        structlog.contextvars.bind_contextvars(trace_id=trace.trace_id, session_id=query.session_id)
        try:
            result = await self._execute(query, limit, now, trace)
        finally:
            structlog.contextvars.unbind_contextvars("trace_id", "session_id")
        return result

    async def _execute(
        self,
        query: Query,
        limit: int,
        now: datetime | None,
        trace: TraceContext,
    ) -> RankingResult:
        text = query.raw_text or ""

        # STEP 1: Follow-up to an earlier clarification prompt
        resolution: FollowupResolution | None = None
        unresolved = False
        if query.previous_query:
            with trace.span("followup") as span:
                previous_intent = self._classifier.classify(query.previous_query)
                if self._clarifier.needs_clarification(previous_intent):
                    resolution = self._clarifier.resolve_followup(text, query.previous_query)
                    unresolved = resolution is None
                span.annotate(resolved=resolution is not None)

        # STEP 2: Intent
        with trace.span("classification") as span:
            if resolution is not None:
                text = resolution.new_query
                intent = resolution.new_intent
            else:
                intent = self._classifier.classify(text)
            span.annotate(intent=intent.value)

        logger.info(
            "query_classified",
            intent=intent.value,
            followup=resolution is not None,
            followup_unresolved=unresolved,
        )

        # STEP 3: Clarification short-circuit
        if self._clarifier.needs_clarification(intent):
            with trace.span("clarification") as span:
                clarification = self._clarifier.generate_clarification(text)
                span.annotate(type=clarification.type)
            self._finish(trace, text, intent, 0)
            return RankingResult(
                intent=intent,
                query=text,
                clarification=clarification,
                resolution=resolution,
                followup_unresolved=unresolved,
                trace_id=trace.trace_id,
            )

        # STEP 4: Query understanding
        with trace.span("understanding") as span:
            processed = self._qu.process(text)
            span.annotate(equipment_gate=bool(processed.equipment_keywords))

        # STEP 5: Concurrent candidate fetch per content kind
        kinds = kinds_for_intent(intent)
        with trace.span("retrieval", kinds=[k.value for k in kinds]) as span:
            candidates, counts, failed = await self._fetcher.fetch(kinds, processed.keywords)
            span.annotate(candidates=len(candidates), failed_kinds=failed)
        log_fetch_metrics(trace.trace_id, counts, failed)

        # STEP 6: Score, gate, truncate
        with trace.span("assembly") as span:
            ranked = self._assembler.rank(
                candidates, processed.keywords, processed.equipment_keywords, now
            )
            selected, gate_fallback = self._assembler.select(
                ranked, processed.equipment_keywords, limit
            )
            span.annotate(gate_fallback=gate_fallback, returned=len(selected))

        log_ranking_metrics(
            trace.trace_id,
            intent.value,
            [s.score for s in selected],
            len(ranked),
            len(selected),
            gate_fallback,
        )
        self._finish(trace, text, intent, len(selected))

        return RankingResult(
            intent=intent,
            query=text,
            results=[s.entity for s in selected],
            resolution=resolution,
            followup_unresolved=unresolved,
            trace_id=trace.trace_id,
        )

    @staticmethod
    def _finish(trace: TraceContext, text: str, intent: Intent, result_count: int) -> None:
        trace.record_outcome(intent, result_count)
        log_trace(trace.to_trace(query=text))
