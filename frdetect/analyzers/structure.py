"""Sentence structure: type classification and length distribution."""

from __future__ import annotations

from typing import Sequence

from frdetect.analyzers.transitions import COMMON_TRANSITIONS, find_transitions
from frdetect.models import SentenceStats, SentenceType, SentenceTypeCounts
from frdetect.utils.segmentation import segment_sentences, count_words

# Substring tests, case-sensitive, no word boundaries.
_RELATIVE_MARKERS = ("qui", "que")
_COORDINATION_MARKERS = (",", "et", "ou")


def classify_sentence(sentence: str) -> SentenceType:
    """
    Classify a sentence as complex, compound or simple.

    Complex wins over compound: a comma plus "qui"/"que" is complex even
    though the comma alone would make it compound.
    """
    if "," in sentence and any(m in sentence for m in _RELATIVE_MARKERS):
        return SentenceType.complex
    if any(m in sentence for m in _COORDINATION_MARKERS):
        return SentenceType.compound
    return SentenceType.simple


def analyze_sentence_structure(
    text: str,
    lexicon: Sequence[str] = COMMON_TRANSITIONS,
) -> SentenceStats:
    """Classify every sentence of *text* and collect its connectors."""
    sentences = segment_sentences(text)
    types = SentenceTypeCounts()
    for sentence in sentences:
        kind = classify_sentence(sentence)
        setattr(types, kind.value, getattr(types, kind.value) + 1)

    return SentenceStats(
        lengths=[count_words(s) for s in sentences],
        types=types,
        transitions=find_transitions(text, lexicon),
    )


def average_sentence_length(total_words: int, sentence_count: int) -> float:
    if not sentence_count:
        return 0.0
    return total_words / sentence_count
