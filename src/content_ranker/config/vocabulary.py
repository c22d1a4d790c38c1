"""Closed vocabulary tables for normalization, keyword extraction and scoring.

The tables are versioned static data. They are bundled into a frozen
``Vocabulary`` that is passed to the normalizer, extractor and scorer, so
tests can swap in a smaller fixture without touching module globals.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

VOCABULARY_VERSION = "2025.11"

# Trigger word -> terms appended to the text when the trigger is present.
SYNONYMS: dict[str, tuple[str, ...]] = {
    "weekend": (
        "fri", "sat", "sun", "friday", "saturday", "sunday",
        "multi day", "multi-day", "residential",
    ),
    "group": ("participants", "people", "attendees", "max 4", "max 3", "max 2"),
    "advanced": (
        "hard", "difficult", "experienced", "expert", "experience level",
        "intermediate", "professional",
    ),
    "equipment": (
        "gear", "camera", "lens", "tripod", "filters",
        "equipment needed", "what to bring", "required",
    ),
}


@dataclass(frozen=True)
class PhraseRule:
    """Append ``phrase`` when every word in ``requires`` occurs in the text."""

    name: str
    requires: tuple[str, ...]
    phrase: str


SPECIAL_CASE_RULES: tuple[PhraseRule, ...] = (
    PhraseRule(
        name="group_workshop",
        requires=("group", "workshop"),
        phrase="photography workshop residential multi day",
    ),
)

UNIT_REWRITES: tuple[tuple[str, str], ...] = (
    (r"\bb(?:\s*&\s*|\s+and\s+)b\b", "bnb"),
    (r"\bbed\s*(?:and|&)\s*breakfast\b", "bnb"),
)

TOPIC_KEYWORDS: tuple[str, ...] = (
    # locations
    "devon", "snowdonia", "wales", "yorkshire", "lake district", "warwickshire",
    "coventry", "dorset",
    # subjects and formats
    "bluebell", "autumn", "astrophotography", "beginners", "lightroom",
    "long exposure", "landscape", "woodlands", "weekend", "group", "advanced",
    "residential", "multi day", "multi-day",
    # technical terms
    "iso", "aperture", "shutter", "shutter speed", "exposure", "metering",
    "manual", "depth of field", "focal length", "white balance", "composition",
    "macro", "portrait", "street", "wildlife", "hdr", "jpeg",
    # equipment
    "tripod", "filters", "lens", "camera", "equipment",
    # logistics
    "bnb", "accommodation", "bed", "breakfast", "pricing", "price", "cost",
)

TECHNICAL_TERMS: frozenset[str] = frozenset(
    {"iso", "raw", "jpg", "png", "dpi", "ppi", "rgb", "cmyk"}
)

STOP_WORDS: frozenset[str] = frozenset(
    {
        "what", "when", "where", "which", "how", "why", "who",
        "can", "will", "should", "could", "would",
        "do", "does", "did", "are", "is", "was", "were", "have", "has", "had",
        "you", "your", "yours", "me", "my", "mine", "we", "our", "ours",
        "they", "their", "theirs", "them", "us", "him", "her", "his", "hers",
        "it", "its",
    }
)

EQUIPMENT_TERMS: frozenset[str] = frozenset(
    {
        "tripod", "camera", "lens", "filter", "flash", "monopod", "head",
        "ball head", "geared head", "memory card", "battery", "sensor",
        "shutter", "aperture", "iso", "white balance", "depth of field",
        "focal length", "exposure", "metering", "composition", "sharpness",
        "focus", "sharp", "focusing", "blur", "blurry", "camera shake",
        "stabilization", "ibis", "vr", "hdr", "noise", "handheld",
    }
)

CORE_CONCEPTS: tuple[str, ...] = (
    "iso", "aperture", "shutter speed", "white balance", "depth of field",
    "metering", "exposure", "composition", "macro", "landscape", "portrait",
    "street", "wildlife", "raw", "jpeg", "hdr", "focal length", "long exposure",
)

OFF_TOPIC_TITLE = re.compile(r"(lightroom|what's new|whats new)", re.IGNORECASE)
OFF_TOPIC_URL = re.compile(r"(lightroom|whats-new)")

# Temporal words that suppress event matches in the store.
EVENT_STOP_WORDS: frozenset[str] = frozenset(
    {
        "next", "upcoming", "soon", "nearest", "closest", "near",
        "available", "availability", "dates",
    }
)


@dataclass(frozen=True)
class Vocabulary:
    synonyms: dict[str, tuple[str, ...]] = field(default_factory=lambda: dict(SYNONYMS))
    special_cases: tuple[PhraseRule, ...] = SPECIAL_CASE_RULES
    unit_rewrites: tuple[tuple[str, str], ...] = UNIT_REWRITES
    topic_keywords: tuple[str, ...] = TOPIC_KEYWORDS
    technical_terms: frozenset[str] = TECHNICAL_TERMS
    stop_words: frozenset[str] = STOP_WORDS
    equipment_terms: frozenset[str] = EQUIPMENT_TERMS
    core_concepts: tuple[str, ...] = CORE_CONCEPTS
    off_topic_title: re.Pattern = OFF_TOPIC_TITLE
    off_topic_url: re.Pattern = OFF_TOPIC_URL
    event_stop_words: frozenset[str] = EVENT_STOP_WORDS
    min_token_length: int = 4
    version: str = VOCABULARY_VERSION


DEFAULT_VOCABULARY = Vocabulary()
