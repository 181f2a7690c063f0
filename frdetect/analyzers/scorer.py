"""Weighted scoring rules producing the AI-likeness score and markers."""

from __future__ import annotations

import logging
import math
from typing import Optional

from frdetect.analyzers.structure import average_sentence_length
from frdetect.analyzers.vocabulary import word_frequencies
from frdetect.config import ScoringThresholds
from frdetect.models import (
    Marker, MarkerKind, SentenceStats, Severity, VocabularyStats, WordCount,
)
from frdetect.utils.segmentation import tokenize_words

logger = logging.getLogger("frdetect")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def find_repeated_words(
    text: str,
    min_length: int = 4,
    min_count: int = 3,
) -> list[WordCount]:
    """Case-folded words seen more than *min_count* times, first-seen order."""
    frequency = word_frequencies(tokenize_words(text.lower()), min_length=min_length)
    return [
        WordCount(word=w, count=c)
        for w, c in frequency.items()
        if c > min_count
    ]


def score_text(
    text: str,
    vocabulary: VocabularyStats,
    sentences: SentenceStats,
    thresholds: Optional[ScoringThresholds] = None,
) -> tuple[int, list[Marker]]:
    """
    Evaluate every scoring rule independently and sum their weights.

    Sentence-based rules are skipped when there is no sentence, and the
    diversity rule when there is no word, so no rule divides by zero.

    Returns:
        (score, markers) with markers in rule order.
    """
    th = thresholds or ScoringThresholds()
    markers: list[Marker] = []
    score = 0

    sentence_count = len(sentences.lengths)

    # ── Sentence length ──────────────────────────────────────────────
    if sentence_count:
        avg_len = average_sentence_length(vocabulary.total_words, sentence_count)
        if avg_len > th.long_sentence_words:
            markers.append(Marker(
                type=MarkerKind.structure,
                message=(
                    f"Les phrases sont très longues (moyenne > "
                    f"{th.long_sentence_words:g} mots). Considérez les raccourcir "
                    "pour améliorer la lisibilité."
                ),
                severity=Severity.high,
            ))
            score += th.long_sentence_weight

    # ── Word repetition ──────────────────────────────────────────────
    repeated = find_repeated_words(
        text,
        min_length=th.repeated_word_min_length,
        min_count=th.repeated_word_count,
    )
    if repeated:
        listed = ", ".join(
            f'"{r.word}" ({r.count} fois)'
            for r in repeated[:th.repeated_words_listed]
        )
        markers.append(Marker(
            type=MarkerKind.vocabulary,
            message=f"Mots fréquemment répétés : {listed}",
            severity=Severity.medium,
        ))

    # ── Transitions ──────────────────────────────────────────────────
    if sentence_count:
        if len(sentences.transitions) < sentence_count * th.transitions_per_sentence:
            markers.append(Marker(
                type=MarkerKind.coherence,
                message=(
                    "Manque de mots de transition. Ajoutez des connecteurs "
                    "logiques pour améliorer la fluidité."
                ),
                severity=Severity.medium,
            ))
            score += th.transitions_weight

    # ── Structure variety ────────────────────────────────────────────
    total_typed = sentences.types.total
    if sentence_count and total_typed:
        if sentences.types.simple / total_typed > th.simple_ratio:
            markers.append(Marker(
                type=MarkerKind.structure,
                message=(
                    "Structure des phrases trop simple. Variez les constructions "
                    "pour un style plus engageant."
                ),
                severity=Severity.medium,
            ))
            score += th.simple_ratio_weight

    # ── Vocabulary diversity ─────────────────────────────────────────
    if vocabulary.total_words:
        ratio = vocabulary.diversity_ratio
        if ratio < th.diversity_ratio:
            markers.append(Marker(
                type=MarkerKind.vocabulary,
                message=(
                    f"Vocabulaire peu varié ({round_half_up(ratio * 100)}% de mots "
                    "uniques). Enrichissez votre lexique."
                ),
                severity=Severity.high,
            ))
            score += th.diversity_weight

    logger.debug("Scoring: %d markers, score %d", len(markers), score)
    return score, markers
