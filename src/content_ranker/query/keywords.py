"""Keyword extraction and equipment-keyword detection."""

from __future__ import annotations

import re

from content_ranker.config.vocabulary import DEFAULT_VOCABULARY, Vocabulary

_NON_WORD = re.compile(r"[^\w\s-]|_")


class KeywordExtractor:
    def __init__(self, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> None:
        self._vocab = vocabulary
        self._single_equipment = frozenset(t for t in vocabulary.equipment_terms if " " not in t)
        self._phrase_equipment = frozenset(t for t in vocabulary.equipment_terms if " " in t)

    def extract(self, normalized_text: str) -> tuple[frozenset[str], frozenset[str]]:
        """Return ``(keywords, equipment_keywords)`` for already-normalized text."""
        if not normalized_text or not normalized_text.strip():
            return frozenset(), frozenset()

        keywords = self.topic_keywords(normalized_text) | self.generic_tokens(normalized_text)
        return frozenset(keywords), self.detect_equipment(keywords, normalized_text)

    def topic_keywords(self, text: str) -> set[str]:
        return {t for t in self._vocab.topic_keywords if t in text}

    def generic_tokens(self, text: str) -> set[str]:
        vocab = self._vocab
        tokens = set()
        for word in _NON_WORD.sub(" ", text).split():
            if word in vocab.stop_words:
                continue
            if word in vocab.technical_terms or len(word) >= vocab.min_token_length:
                tokens.add(word)
        return tokens

    def detect_equipment(self, keywords, text: str) -> frozenset[str]:
        # Phrases never survive tokenization, so they are matched against the text.
        found = {t for t in self._single_equipment if t in keywords}
        found.update(t for t in self._phrase_equipment if t in text)
        return frozenset(found)
