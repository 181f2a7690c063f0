"""Vocabulary statistics: diversity, word length, frequent words."""

from __future__ import annotations

from typing import Iterable

from frdetect.models import VocabularyStats, WordCount
from frdetect.utils.segmentation import tokenize_words

DEFAULT_COMMON_WORDS_LIMIT = 20
MIN_FREQUENT_WORD_LENGTH = 4


def word_frequencies(
    words: Iterable[str],
    min_length: int = MIN_FREQUENT_WORD_LENGTH,
) -> dict[str, int]:
    """Case-folded frequency table of words at least *min_length* long.

    The length filter applies to the token as written. Keys keep the order
    in which each distinct word was first seen.
    """
    frequency: dict[str, int] = {}
    for word in words:
        if len(word) >= min_length:
            lowered = word.lower()
            frequency[lowered] = frequency.get(lowered, 0) + 1
    return frequency


def most_common_words(
    words: Iterable[str],
    limit: int = DEFAULT_COMMON_WORDS_LIMIT,
) -> list[WordCount]:
    """Most frequent eligible words, ties kept in first-seen order."""
    frequency = word_frequencies(words)
    ranked = sorted(frequency.items(), key=lambda item: item[1], reverse=True)
    return [WordCount(word=w, count=c) for w, c in ranked[:limit]]


def analyze_vocabulary(
    text: str,
    limit: int = DEFAULT_COMMON_WORDS_LIMIT,
) -> VocabularyStats:
    """Compute vocabulary statistics over all whitespace tokens of *text*."""
    words = tokenize_words(text)
    if not words:
        return VocabularyStats()

    unique_words = {w.lower() for w in words}
    avg_word_length = sum(len(w) for w in words) / len(words)

    return VocabularyStats(
        unique_words=len(unique_words),
        total_words=len(words),
        avg_word_length=avg_word_length,
        common_words=most_common_words(words, limit),
    )
