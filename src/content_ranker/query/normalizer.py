"""Query text canonicalization: unit rewrites, synonym expansion, phrase injection."""

from __future__ import annotations

import re
import unicodedata

from content_ranker.config.vocabulary import DEFAULT_VOCABULARY, Vocabulary


class QueryNormalizer:
    def __init__(self, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> None:
        self._vocab = vocabulary
        self._rewrites = [
            (re.compile(pattern), replacement)
            for pattern, replacement in vocabulary.unit_rewrites
        ]

    def normalize(self, raw_text: str | None) -> str:
        text = unicodedata.normalize("NFKC", raw_text or "")
        text = re.sub(r"\s+", " ", text).strip().lower()
        if not text:
            return ""

        for pattern, replacement in self._rewrites:
            text = pattern.sub(replacement, text)

        text = self._expand_synonyms(text)
        return self._apply_special_cases(text)

    def _expand_synonyms(self, text: str) -> str:
        # Triggers are checked against the text before any expansion.
        original = text
        for trigger, related in self._vocab.synonyms.items():
            if trigger in original:
                text = f"{text} {' '.join(related)}"
        return text

    def _apply_special_cases(self, text: str) -> str:
        original = text
        for rule in self._vocab.special_cases:
            if all(word in original for word in rule.requires):
                text = f"{text} {rule.phrase}"
        return text
