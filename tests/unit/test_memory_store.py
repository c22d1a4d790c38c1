"""Tests for the in-memory content store and entity parsing."""

from datetime import date, datetime, timezone

import pytest

from content_ranker.exceptions import ContentStoreError
from content_ranker.models.domain import ContentEntity, ContentKind
from content_ranker.storage.memory_store import InMemoryContentStore

from conftest import FIXTURES_DIR


def test_from_dict_normalizes_fields():
    entity = ContentEntity.from_dict(
        {
            "kind": "article",
            "title": "Depth of Field Assignment",
            "page_url": "https://example.com/dof",
            "categories": ["Online Photography Course"],
            "tags": ["Assignment"],
            "publish_date": "2024-06-10T08:00:00Z",
            "last_seen": "2024-06-12T10:30:00Z",
        }
    )
    assert entity.kind is ContentKind.ARTICLE
    assert entity.canonical_url == "https://example.com/dof"
    assert entity.categories == {"online photography course"}
    assert entity.tags == {"assignment"}
    assert entity.publish_date == date(2024, 6, 10)
    assert entity.last_seen == datetime(2024, 6, 12, 10, 30, tzinfo=timezone.utc)


def test_from_dict_rejects_unknown_kind():
    with pytest.raises(ValueError):
        ContentEntity.from_dict({"kind": "podcast", "title": "x"})


def test_load_catalogue(catalogue_store):
    assert len(catalogue_store) == 14


@pytest.mark.asyncio
async def test_fetch_without_filter_returns_kind(catalogue_store):
    events = await catalogue_store.fetch_candidates(ContentKind.EVENT)
    assert len(events) == 3
    assert all(e.kind is ContentKind.EVENT for e in events)


@pytest.mark.asyncio
async def test_fetch_matches_title_url_and_tags(catalogue_store):
    articles = await catalogue_store.fetch_candidates(ContentKind.ARTICLE, ["aperture"])
    titles = {a.title for a in articles}
    # one title match, one tag-only match
    assert titles == {"What is Aperture in Photography", "What is Depth of Field in Photography"}


@pytest.mark.asyncio
async def test_fetch_unknown_keyword(catalogue_store):
    assert await catalogue_store.fetch_candidates(ContentKind.SERVICE, ["zebra"]) == []


def test_missing_catalogue_raises(tmp_path):
    with pytest.raises(ContentStoreError):
        InMemoryContentStore.from_json(tmp_path / "missing.json")


def test_malformed_catalogue_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('[{"title": "no kind"}]')
    with pytest.raises(ContentStoreError):
        InMemoryContentStore.from_json(path)


def test_fixture_dir_has_catalogue():
    assert (FIXTURES_DIR / "catalogue.json").exists()
