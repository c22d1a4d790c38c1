"""Central configuration via Pydantic Settings. All values driven by env vars."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Retrieval
    fetch_timeout_seconds: float = 5.0
    default_result_limit: int = 8
    event_fetch_limit: int = 80
    product_fetch_limit: int = 24
    service_fetch_limit: int = 24
    article_fetch_limit: int = 12
    landing_fetch_limit: int = 12

    # Relevance scoring weights
    equipment_gate_penalty: int = 50
    title_match_weight: int = 3
    url_match_weight: int = 1
    curriculum_boost: int = 25
    what_is_title_prefix_boost: int = 20
    what_is_title_boost: int = 10
    what_is_url_boost: int = 12
    concept_slug_url_boost: int = 3
    generic_content_penalty: int = 12
    tips_category_boost: int = 5

    # Category names carried by the content store
    curriculum_category: str = "online photography course"
    tips_category: str = "photography-tips"

    # Recency tie-break (days -> bonus), evaluated in order
    recency_week_days: int = 7
    recency_week_bonus: int = 20
    recency_month_days: int = 30
    recency_month_bonus: int = 10
    recency_quarter_days: int = 90
    recency_quarter_bonus: int = 5

    model_config = {"env_file": ".env", "env_prefix": "RANKER_"}
