"""Custom exception hierarchy for the ranking engine."""

from __future__ import annotations


class RankingEngineError(Exception):
    """Base exception for all ranking engine errors."""


class ContentStoreError(RankingEngineError):
    """Error raised by a content store while fetching candidates."""


class CandidateFetchError(RankingEngineError):
    """A fetch for one content kind failed or timed out."""

    def __init__(self, kind: str, reason: str) -> None:
        super().__init__(f"fetch for {kind!r} failed: {reason}")
        self.kind = kind
        self.reason = reason


class ConfigurationError(RankingEngineError):
    """Error in system configuration."""
