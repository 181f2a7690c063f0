"""Text segmentation: sentences and words.

Both splits are purely lexical. Abbreviations, decimal numbers and
quotations get no special treatment.
"""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r'\s+')
_SENTENCE_DELIMITERS = re.compile(r'[.!?]+')


def is_blank(text: str) -> bool:
    """True for empty or whitespace-only text."""
    return not text or not text.strip()


def tokenize_words(text: str) -> list[str]:
    """Split text on whitespace runs, keeping original case."""
    return [w for w in _WHITESPACE.split(text) if w]


def segment_sentences(text: str) -> list[str]:
    """
    Split text on runs of '.', '!' and '?'.

    Each part is stripped; parts left empty are dropped.
    """
    parts = (p.strip() for p in _SENTENCE_DELIMITERS.split(text))
    return [p for p in parts if p]


def count_words(text: str) -> int:
    """Count whitespace-delimited words in text."""
    return len(tokenize_words(text))
