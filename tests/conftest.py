"""Shared test fixtures."""

from __future__ import annotations

from datetime import date, datetime, timezone
from pathlib import Path

import pytest

from content_ranker.config.settings import Settings
from content_ranker.models.domain import ContentEntity, ContentKind
from content_ranker.pipeline.query_pipeline import QueryPipeline
from content_ranker.storage.memory_store import InMemoryContentStore

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_entity(
    title: str,
    url: str,
    kind: ContentKind = ContentKind.ARTICLE,
    categories: tuple[str, ...] = (),
    tags: tuple[str, ...] = (),
    publish_date: date | None = None,
    last_seen: datetime | None = None,
) -> ContentEntity:
    return ContentEntity(
        kind=kind,
        title=title,
        canonical_url=url,
        categories=frozenset(categories),
        tags=frozenset(tags),
        publish_date=publish_date,
        last_seen=last_seen,
    )


@pytest.fixture
def settings():
    """Default settings, isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def now():
    return datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def dof_article():
    return make_entity(
        "What is Depth of Field in Photography",
        "https://www.alanranger.com/blog-on-photography/what-is-depth-of-field-in-photography",
        categories=("photography-tips",),
    )


@pytest.fixture
def dof_assignment():
    return make_entity(
        "Depth of Field Assignment",
        "https://www.alanranger.com/online-photography-course/depth-of-field-assignment",
        categories=("online photography course",),
    )


@pytest.fixture
def catalogue_store():
    return InMemoryContentStore.from_json(FIXTURES_DIR / "catalogue.json")


@pytest.fixture
def pipeline(catalogue_store, settings):
    return QueryPipeline.build(catalogue_store, settings)
