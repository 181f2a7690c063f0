"""Language detection (advisory only, never blocks analysis)."""

from __future__ import annotations

import logging

from langdetect import detect_langs, LangDetectException
from langdetect import DetectorFactory

DetectorFactory.seed = 0

logger = logging.getLogger("frdetect")


def detect_language(text: str) -> tuple[str, float]:
    """
    Detect the dominant language of *text*.

    Returns:
        (iso_code, confidence)  e.g. ("fr", 0.99).
        Falls back to ("unknown", 0.0) on empty input or failure.
    """
    if not text or not text.strip():
        return "unknown", 0.0

    try:
        results = detect_langs(text)
    except LangDetectException as e:
        logger.debug("Language detection failed: %s", e)
        return "unknown", 0.0

    if not results:
        return "unknown", 0.0
    top = results[0]
    return str(top.lang), round(float(top.prob), 4)


def language_name(code: str) -> str:
    """Human-readable (French) language name for common codes."""
    names = {
        "fr": "Français",
        "en": "Anglais",
        "de": "Allemand",
        "es": "Espagnol",
        "it": "Italien",
        "pt": "Portugais",
        "nl": "Néerlandais",
        "unknown": "Inconnue",
    }
    return names.get(code, code.upper())
