"""Analysis pipeline: tokenize, measure, score.

``analyze`` is a pure function of its input. Every call builds fresh
statistics, so concurrent callers never share a mutable result.
"""

from __future__ import annotations

import logging
from typing import Optional

from frdetect.analyzers.scorer import score_text
from frdetect.analyzers.structure import analyze_sentence_structure
from frdetect.analyzers.vocabulary import analyze_vocabulary
from frdetect.config import DetectorConfig
from frdetect.models import AnalysisResult
from frdetect.utils.segmentation import is_blank

logger = logging.getLogger("frdetect")

EMPTY_TEXT_MESSAGE = "Veuillez entrer du texte à analyser."


def analyze(text: str, config: Optional[DetectorConfig] = None) -> AnalysisResult:
    """
    Score how AI-generated a French passage looks.

    Blank input short-circuits to a zero result flagged ``is_empty`` with
    an advisory message in ``details``.
    """
    config = config or DetectorConfig()

    if is_blank(text):
        logger.info("Empty input, skipping analysis")
        return AnalysisResult(is_empty=True, details=EMPTY_TEXT_MESSAGE)

    vocabulary = analyze_vocabulary(text, limit=config.top_words_limit)
    logger.debug(
        "Vocabulary: %d words, %d unique",
        vocabulary.total_words, vocabulary.unique_words,
    )

    sentences = analyze_sentence_structure(text)
    logger.debug(
        "Structure: %d sentences, %d transitions",
        len(sentences.lengths), len(sentences.transitions),
    )

    score, markers = score_text(text, vocabulary, sentences, config.thresholds)

    result = AnalysisResult(
        score=score,
        markers=markers,
        vocabulary_stats=vocabulary,
        sentence_stats=sentences,
    )

    logger.info(
        "Analysis complete: %d words, %d sentences, %d markers, score %d",
        vocabulary.total_words, result.sentence_count, len(markers), score,
    )
    return result


async def analyze_async(
    text: str,
    config: Optional[DetectorConfig] = None,
) -> AnalysisResult:
    """Awaitable form of :func:`analyze` for event-driven callers."""
    return analyze(text, config)
