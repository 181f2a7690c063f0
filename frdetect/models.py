"""Pydantic data models for the frdetect pipeline."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


# ── Enums ────────────────────────────────────────────────────────────────

class Severity(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class MarkerKind(str, Enum):
    structure = "structure"
    vocabulary = "vocabulary"
    coherence = "coherence"


class SentenceType(str, Enum):
    simple = "simple"
    compound = "compound"
    complex = "complex"


# ── Analysis models ──────────────────────────────────────────────────────

class Marker(BaseModel):
    type: MarkerKind
    message: str
    severity: Severity


class WordCount(BaseModel):
    word: str
    count: int


class VocabularyStats(BaseModel):
    unique_words: int = 0
    total_words: int = 0
    avg_word_length: float = 0.0
    common_words: list[WordCount] = Field(default_factory=list)

    @property
    def diversity_ratio(self) -> float:
        if not self.total_words:
            return 0.0
        return self.unique_words / self.total_words


class SentenceTypeCounts(BaseModel):
    simple: int = 0
    compound: int = 0
    complex: int = 0

    @property
    def total(self) -> int:
        return self.simple + self.compound + self.complex

    def percentages(self) -> dict[str, float]:
        """Share of each sentence type in percent, all zero when empty."""
        total = self.total
        if not total:
            return {"simple": 0.0, "compound": 0.0, "complex": 0.0}
        return {
            "simple": self.simple / total * 100,
            "compound": self.compound / total * 100,
            "complex": self.complex / total * 100,
        }


class SentenceStats(BaseModel):
    lengths: list[int] = Field(default_factory=list)
    types: SentenceTypeCounts = Field(default_factory=SentenceTypeCounts)
    transitions: list[str] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    score: int = 0
    markers: list[Marker] = Field(default_factory=list)
    vocabulary_stats: VocabularyStats = Field(default_factory=VocabularyStats)
    sentence_stats: SentenceStats = Field(default_factory=SentenceStats)
    is_empty: bool = False
    details: str = ""

    @property
    def sentence_count(self) -> int:
        return len(self.sentence_stats.lengths)

    @property
    def avg_sentence_length(self) -> float:
        if not self.sentence_count:
            return 0.0
        return self.vocabulary_stats.total_words / self.sentence_count

    @property
    def diversity_ratio(self) -> float:
        return self.vocabulary_stats.diversity_ratio


# ── Visualization series ─────────────────────────────────────────────────

class ChartSeries(BaseModel):
    """Numeric series behind the three chart views."""

    diversity: list[float] = Field(default_factory=lambda: [0.0, 0.0])
    structure: list[float] = Field(default_factory=lambda: [0.0, 0.0, 0.0])
    common_words: list[WordCount] = Field(default_factory=list)


# ── Full report ──────────────────────────────────────────────────────────

class DetectionReport(BaseModel):
    version: str = "1.0.0"
    input_text_hash: str = ""
    input_char_count: int = 0
    language: str = "unknown"
    language_confidence: float = 0.0
    result: AnalysisResult = Field(default_factory=AnalysisResult)
    charts: ChartSeries = Field(default_factory=ChartSeries)
    timestamp: str = ""
    duration_ms: float = 0.0
