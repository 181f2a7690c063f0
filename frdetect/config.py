"""Configuration management for frdetect."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any


@dataclass
class ScoringThresholds:
    long_sentence_words: float = 25
    long_sentence_weight: int = 15
    repeated_word_min_length: int = 4
    repeated_word_count: int = 3
    repeated_words_listed: int = 5
    transitions_per_sentence: float = 0.25
    transitions_weight: int = 10
    simple_ratio: float = 0.7
    simple_ratio_weight: int = 10
    diversity_ratio: float = 0.4
    diversity_weight: int = 20


@dataclass
class DetectorConfig:
    max_input_chars: int = 100_000
    top_words_limit: int = 20
    chart_top_words: int = 10
    check_language: bool = True
    verbosity: int = 1

    thresholds: ScoringThresholds = field(default_factory=ScoringThresholds)

    @classmethod
    def load(
        cls,
        config_path: str | Path | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> "DetectorConfig":
        """Load config from JSON file, env vars, and optional overrides."""
        raw: dict[str, Any] = {}

        if config_path:
            p = Path(config_path)
            if p.exists():
                try:
                    raw = json.loads(p.read_text(encoding="utf-8"))
                except json.JSONDecodeError as e:
                    raise ValueError(f"Invalid config file {p}: {e}") from e

        cfg = cls._from_dict(raw)

        env_verbosity = os.getenv("FRDETECT_VERBOSITY", "")
        if env_verbosity.isdigit():
            cfg.verbosity = int(env_verbosity)

        env_max = os.getenv("FRDETECT_MAX_INPUT_CHARS", "")
        if env_max.isdigit():
            cfg.max_input_chars = int(env_max)

        if overrides:
            cfg._apply_overrides(overrides)

        return cfg

    @classmethod
    def _from_dict(cls, d: dict[str, Any]) -> "DetectorConfig":
        cfg = cls()
        simple = {
            "max_input_chars", "top_words_limit", "chart_top_words",
            "check_language", "verbosity",
        }
        for k in simple:
            if k in d:
                setattr(cfg, k, d[k])

        th = d.get("thresholds", {})
        if th:
            cfg.thresholds = cls._thresholds(th)
        return cfg

    @staticmethod
    def _thresholds(d: dict) -> ScoringThresholds:
        known = ScoringThresholds.__dataclass_fields__
        return ScoringThresholds(**{k: v for k, v in d.items() if k in known})

    def _apply_overrides(self, ov: dict[str, Any]) -> None:
        for k, v in ov.items():
            if k == "thresholds" and isinstance(v, dict):
                for tk, tv in v.items():
                    if hasattr(self.thresholds, tk):
                        setattr(self.thresholds, tk, tv)
            elif hasattr(self, k) and not isinstance(v, dict):
                setattr(self, k, v)

    def to_dict(self) -> dict:
        return {
            "max_input_chars": self.max_input_chars,
            "top_words_limit": self.top_words_limit,
            "chart_top_words": self.chart_top_words,
            "check_language": self.check_language,
            "verbosity": self.verbosity,
            "thresholds": asdict(self.thresholds),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
