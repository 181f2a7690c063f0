"""Tests for report formatting and chart series."""

import json

import pytest

from frdetect.charts import CHART_NAMES, ChartBoard, build_chart_series
from frdetect.models import AnalysisResult, DetectionReport, Marker, MarkerKind, Severity
from frdetect.pipeline import EMPTY_TEXT_MESSAGE, analyze
from frdetect.report_builder import (
    build_html_details,
    build_json_report,
    build_markdown_report,
    build_text_report,
)

TEXT = (
    "Le chat, qui mange, est mignon. Le chat et le chien jouent. "
    "Le chien aboie."
)


@pytest.fixture
def result():
    return analyze(TEXT)


@pytest.fixture
def report(result):
    return DetectionReport(
        input_char_count=len(TEXT),
        language="fr",
        language_confidence=0.99,
        result=result,
        charts=build_chart_series(result),
        timestamp="2025-01-01T00:00:00Z",
    )


# ── Chart series ─────────────────────────────────────────────────────────

class TestChartSeries:
    def test_series(self, result):
        series = build_chart_series(result)
        assert series.diversity[0] == pytest.approx(result.diversity_ratio * 100)
        assert sum(series.diversity) == pytest.approx(100.0)
        assert sum(series.structure) == pytest.approx(100.0)
        assert series.structure[2] == pytest.approx(100 / 3)

    def test_top_n(self):
        result = analyze(" ".join(f"terme{i}" for i in range(15)))
        assert len(result.vocabulary_stats.common_words) == 15
        assert len(build_chart_series(result).common_words) == 10
        assert len(build_chart_series(result, top_n=5).common_words) == 5

    def test_empty_result(self):
        series = build_chart_series(analyze(""))
        assert series.diversity == [0.0, 0.0]
        assert series.structure == [0.0, 0.0, 0.0]
        assert series.common_words == []


class TestChartBoard:
    def test_update_replaces(self, result):
        board = ChartBoard()
        first = board.update(build_chart_series(result))
        assert set(first) == set(CHART_NAMES)
        assert first["vocabularyDiversity"]["type"] == "doughnut"
        assert first["sentenceStructure"]["type"] == "pie"
        assert first["commonWords"]["type"] == "bar"

        other = analyze("pomme pomme pomme pomme poire")
        second = board.update(build_chart_series(other))
        assert second["commonWords"]["data"]["labels"] == ["pomme", "poire"]
        assert board.charts() == second

    def test_clear(self, result):
        board = ChartBoard()
        board.update(build_chart_series(result))
        board.clear()
        assert board.charts() == {}

    def test_returns_copies(self, result):
        board = ChartBoard()
        charts = board.update(build_chart_series(result))
        charts["commonWords"]["type"] = "line"
        assert board.charts()["commonWords"]["type"] == "bar"


# ── Formatters ───────────────────────────────────────────────────────────

class TestHtmlDetails:
    def test_sections(self, result):
        html = build_html_details(result)
        assert "Statistiques Générales" in html
        assert f"Nombre total de mots : {result.vocabulary_stats.total_words}" in html
        assert "Nombre de phrases : 3" in html
        assert "Phrases complexes : 33%" in html
        assert "Connecteurs utilisés : Aucun" in html

    def test_markers_colored(self):
        result = analyze(" ".join(["pomme"] * 10))
        html = build_html_details(result)
        assert "Points d'Attention" in html
        assert 'style="color: #ff4444"' in html
        assert 'style="color: #ffaa00"' in html

    def test_escaping(self):
        result = AnalysisResult(
            vocabulary_stats={"total_words": 1, "unique_words": 1},
            sentence_stats={"lengths": [1]},
            markers=[Marker(
                type=MarkerKind.vocabulary,
                message='Mots fréquemment répétés : "<b>x</b>" (4 fois)',
                severity=Severity.medium,
            )],
        )
        html = build_html_details(result)
        assert "<b>x</b>" not in html
        assert "&lt;b&gt;" in html

    def test_empty(self):
        assert build_html_details(analyze("  ")) == EMPTY_TEXT_MESSAGE


class TestMarkdownReport:
    def test_sections(self, report):
        md = build_markdown_report(report)
        assert md.startswith("# Analyse de texte IA")
        assert "## Score" in md
        assert "## Structure des Phrases" in md
        assert "| chien | 2 |" in md
        assert "Français" in md

    def test_empty(self):
        md = build_markdown_report(DetectionReport(result=analyze("")))
        assert EMPTY_TEXT_MESSAGE in md
        assert "## Score" not in md


class TestTextAndJson:
    def test_text_report(self):
        result = analyze(" ".join(["pomme"] * 10))
        text = build_text_report(result)
        assert text.startswith("Score : 40%")
        assert "[!!] Vocabulaire peu varié (10% de mots uniques)" in text

    def test_text_report_empty(self):
        assert build_text_report(analyze("")) == EMPTY_TEXT_MESSAGE

    def test_json_report(self, report):
        data = json.loads(build_json_report(report))
        assert data["result"]["sentence_stats"]["types"]["complex"] == 1
        assert data["language"] == "fr"
