"""Pydantic models for caller-facing request/response serialization."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from content_ranker.models.domain import (
    ContentEntity,
    Intent,
    Query,
    RankingResult,
)


class RankRequest(BaseModel):
    query: str
    session_id: str = ""
    previous_query: str | None = None
    page_context: dict | None = None
    limit: int | None = Field(default=None, ge=1)

    def to_query(self) -> Query:
        return Query(
            raw_text=self.query,
            session_id=self.session_id,
            previous_query=self.previous_query,
            page_context=self.page_context,
        )


class ClarificationOptionSchema(BaseModel):
    label: str
    query: str
    intent: Intent


class ClarificationSchema(BaseModel):
    type: str
    question: str
    options: list[ClarificationOptionSchema]


class EntitySchema(BaseModel):
    kind: str
    title: str
    url: str
    categories: list[str]
    tags: list[str]
    publish_date: date | None = None

    @classmethod
    def from_entity(cls, entity: ContentEntity) -> EntitySchema:
        return cls(
            kind=entity.kind.value,
            title=entity.title,
            url=entity.canonical_url,
            categories=sorted(entity.categories),
            tags=sorted(entity.tags),
            publish_date=entity.publish_date,
        )


class RankResponse(BaseModel):
    intent: Intent
    query: str
    clarification: ClarificationSchema | None = None
    results: list[EntitySchema] | None = None
    followup_unresolved: bool = False
    trace_id: str

    @classmethod
    def from_result(cls, result: RankingResult) -> RankResponse:
        clarification = None
        if result.clarification is not None:
            clarification = ClarificationSchema(
                type=result.clarification.type,
                question=result.clarification.question,
                options=[
                    ClarificationOptionSchema(
                        label=o.label, query=o.mapped_query, intent=o.mapped_intent
                    )
                    for o in result.clarification.options
                ],
            )
        results = None
        if result.results is not None:
            results = [EntitySchema.from_entity(e) for e in result.results]
        return cls(
            intent=result.intent,
            query=result.query,
            clarification=clarification,
            results=results,
            followup_unresolved=result.followup_unresolved,
            trace_id=result.trace_id,
        )
