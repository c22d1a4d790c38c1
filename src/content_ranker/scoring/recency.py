"""Recency tie-break bonus based on entity age."""

from __future__ import annotations

from datetime import datetime, time, timezone

from content_ranker.config.settings import Settings
from content_ranker.models.domain import ContentEntity


class RecencyBonus:
    def __init__(self, settings: Settings) -> None:
        self.windows = (
            (settings.recency_week_days, settings.recency_week_bonus),
            (settings.recency_month_days, settings.recency_month_bonus),
            (settings.recency_quarter_days, settings.recency_quarter_bonus),
        )

    @property
    def max_bonus(self) -> int:
        return max((bonus for _, bonus in self.windows), default=0)

    def bonus(self, entity: ContentEntity, now: datetime | None = None) -> int:
        reference = self.reference_date(entity)
        if reference is None:
            return 0
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        days = (now - reference).total_seconds() / 86400
        for limit, bonus in self.windows:
            if days <= limit:
                return bonus
        return 0

    @staticmethod
    def reference_date(entity: ContentEntity) -> datetime | None:
        """Publish date when known, otherwise the last time the page was seen."""
        if entity.publish_date is not None:
            return datetime.combine(entity.publish_date, time.min, tzinfo=timezone.utc)
        if entity.last_seen is not None:
            seen = entity.last_seen
            return seen if seen.tzinfo else seen.replace(tzinfo=timezone.utc)
        return None
