"""Chart series and Chart.js configurations for the three result views."""

from __future__ import annotations

import copy
from typing import Optional

from frdetect.models import AnalysisResult, ChartSeries

CHART_NAMES = ("vocabularyDiversity", "sentenceStructure", "commonWords")


def build_chart_series(result: AnalysisResult, top_n: int = 10) -> ChartSeries:
    """Derive the numeric series behind the charts from a result."""
    if result.vocabulary_stats.total_words:
        diversity = result.diversity_ratio * 100
        diversity_series = [diversity, 100 - diversity]
    else:
        diversity_series = [0.0, 0.0]

    pct = result.sentence_stats.types.percentages()
    return ChartSeries(
        diversity=diversity_series,
        structure=[pct["simple"], pct["compound"], pct["complex"]],
        common_words=result.vocabulary_stats.common_words[:top_n],
    )


def _diversity_chart(series: ChartSeries) -> dict:
    return {
        "type": "doughnut",
        "data": {
            "labels": ["Mots uniques", "Répétitions"],
            "datasets": [{
                "data": list(series.diversity),
                "backgroundColor": [
                    "rgba(46, 204, 113, 0.6)",
                    "rgba(231, 76, 60, 0.6)",
                ],
            }],
        },
        "options": {
            "responsive": True,
            "plugins": {"legend": {"position": "bottom"}},
        },
    }


def _structure_chart(series: ChartSeries) -> dict:
    return {
        "type": "pie",
        "data": {
            "labels": ["Phrases Simples", "Phrases Composées", "Phrases Complexes"],
            "datasets": [{
                "data": list(series.structure),
                "backgroundColor": [
                    "rgba(52, 152, 219, 0.6)",
                    "rgba(155, 89, 182, 0.6)",
                    "rgba(230, 126, 34, 0.6)",
                ],
            }],
        },
        "options": {
            "responsive": True,
            "plugins": {"legend": {"position": "bottom"}},
        },
    }


def _common_words_chart(series: ChartSeries) -> dict:
    return {
        "type": "bar",
        "data": {
            "labels": [w.word for w in series.common_words],
            "datasets": [{
                "label": "Fréquence",
                "data": [w.count for w in series.common_words],
                "backgroundColor": "rgba(52, 152, 219, 0.6)",
                "borderColor": "rgba(52, 152, 219, 1)",
                "borderWidth": 1,
            }],
        },
        "options": {
            "responsive": True,
            "scales": {"y": {"beginAtZero": True}},
            "plugins": {"legend": {"display": False}},
        },
    }


class ChartBoard:
    """Holds the current chart configurations, replaced on every update."""

    def __init__(self) -> None:
        self._charts: dict[str, Optional[dict]] = {name: None for name in CHART_NAMES}

    def update(self, series: ChartSeries) -> dict[str, dict]:
        self._charts = {
            "vocabularyDiversity": _diversity_chart(series),
            "sentenceStructure": _structure_chart(series),
            "commonWords": _common_words_chart(series),
        }
        return self.charts()

    def clear(self) -> None:
        self._charts = {name: None for name in CHART_NAMES}

    def charts(self) -> dict[str, dict]:
        """Copies of the charts currently shown, empty after clear()."""
        return {
            name: copy.deepcopy(chart)
            for name, chart in self._charts.items()
            if chart is not None
        }
