"""Tests for the recency tie-break bonus."""

from datetime import date, datetime, timezone

from content_ranker.scoring.recency import RecencyBonus

from conftest import make_entity


def _entity(publish=None, seen=None):
    return make_entity("t", "https://example.com/t", publish_date=publish, last_seen=seen)


def test_recency_windows(settings, now):
    recency = RecencyBonus(settings)
    assert recency.bonus(_entity(date(2025, 5, 30)), now) == 20
    assert recency.bonus(_entity(date(2025, 5, 10)), now) == 10
    assert recency.bonus(_entity(date(2025, 4, 1)), now) == 5
    assert recency.bonus(_entity(date(2024, 1, 1)), now) == 0


def test_window_boundary_is_inclusive(settings):
    recency = RecencyBonus(settings)
    midnight = datetime(2025, 6, 1, tzinfo=timezone.utc)
    assert recency.bonus(_entity(date(2025, 5, 25)), midnight) == 20


def test_last_seen_used_without_publish_date(settings, now):
    recency = RecencyBonus(settings)
    seen = datetime(2025, 5, 31, tzinfo=timezone.utc)
    assert recency.bonus(_entity(seen=seen), now) == 20
    naive = datetime(2025, 5, 31)
    assert recency.bonus(_entity(seen=naive), now) == 20


def test_publish_date_preferred_over_last_seen(settings, now):
    recency = RecencyBonus(settings)
    entity = _entity(date(2024, 1, 1), datetime(2025, 5, 31, tzinfo=timezone.utc))
    assert recency.bonus(entity, now) == 0


def test_no_dates_no_bonus(settings, now):
    assert RecencyBonus(settings).bonus(_entity(), now) == 0


def test_max_bonus(settings):
    assert RecencyBonus(settings).max_bonus == 20


def test_naive_now_treated_as_utc(settings):
    recency = RecencyBonus(settings)
    naive_now = datetime(2025, 6, 1, 12)
    assert recency.bonus(_entity(date(2025, 5, 30)), naive_now) == 20
    assert recency.bonus(_entity(date(2025, 5, 10)), naive_now) == 10
    assert recency.bonus(_entity(seen=datetime(2025, 5, 31)), naive_now) == 20
