"""Report builder: renders analysis results as HTML, Markdown, text, JSON."""

from __future__ import annotations

import html
import logging

from frdetect.analyzers.scorer import round_half_up
from frdetect.models import AnalysisResult, DetectionReport, Marker, Severity
from frdetect.utils.language import language_name

logger = logging.getLogger("frdetect")

SEVERITY_COLORS = {
    Severity.high: "#ff4444",
    Severity.medium: "#ffaa00",
    Severity.low: "#44aa44",
}


def _general_stats(result: AnalysisResult) -> list[tuple[str, str]]:
    vs = result.vocabulary_stats
    return [
        ("Nombre total de mots", f"{vs.total_words}"),
        ("Nombre de mots uniques", f"{vs.unique_words}"),
        ("Longueur moyenne des mots", f"{vs.avg_word_length:.1f} caractères"),
        ("Nombre de phrases", f"{result.sentence_count}"),
        ("Longueur moyenne des phrases", f"{result.avg_sentence_length:.1f} mots"),
    ]


def _structure_stats(result: AnalysisResult) -> list[tuple[str, str]]:
    pct = result.sentence_stats.types.percentages()
    return [
        ("Phrases simples", f"{round_half_up(pct['simple'])}%"),
        ("Phrases composées", f"{round_half_up(pct['compound'])}%"),
        ("Phrases complexes", f"{round_half_up(pct['complex'])}%"),
    ]


def _transition_stats(result: AnalysisResult) -> list[tuple[str, str]]:
    transitions = result.sentence_stats.transitions
    return [
        ("Nombre de connecteurs logiques", f"{len(transitions)}"),
        ("Connecteurs utilisés", ", ".join(transitions) or "Aucun"),
    ]


def build_html_details(result: AnalysisResult) -> str:
    """Generate the HTML fragment shown under the score."""
    if result.is_empty:
        return html.escape(result.details)

    def _ul(items: list[tuple[str, str]]) -> str:
        rows = "".join(
            f"<li>{label} : {html.escape(value)}</li>" for label, value in items
        )
        return f"<ul>{rows}</ul>"

    parts = ["<h4>Analyse détaillée du contenu :</h4>"]
    parts.append("<h5>Statistiques Générales</h5>" + _ul(_general_stats(result)))
    parts.append("<h5>Structure des Phrases</h5>" + _ul(_structure_stats(result)))
    parts.append("<h5>Cohérence et Transitions</h5>" + _ul(_transition_stats(result)))

    if result.markers:
        parts.append("<h5>Points d'Attention</h5><ul>")
        for marker in result.markers:
            color = SEVERITY_COLORS.get(marker.severity, "#000000")
            parts.append(
                f'<li style="color: {color}">{html.escape(marker.message)}</li>'
            )
        parts.append("</ul>")

    return "".join(parts)


def build_markdown_report(report: DetectionReport) -> str:
    """Generate a human-readable Markdown report."""
    result = report.result
    lines: list[str] = []

    _h = lambda level, text: "#" * level + " " + text

    lines.append(_h(1, "Analyse de texte IA"))
    lines.append("")
    lines.append(f"**Langue détectée :** {language_name(report.language)} "
                 f"({report.language_confidence:.2f})  ")
    lines.append(f"**Caractères :** {report.input_char_count}  ")
    lines.append(f"**Date :** {report.timestamp}  ")
    lines.append("")

    if result.is_empty:
        lines.append(result.details)
        lines.append("")
        lines.append("---")
        lines.append(f"*Généré par frdetect v{report.version}*")
        return "\n".join(lines)

    lines.append(_h(2, "Score"))
    lines.append("")
    lines.append(f"**{result.score}%**")
    lines.append("")

    for title, items in (
        ("Statistiques Générales", _general_stats(result)),
        ("Structure des Phrases", _structure_stats(result)),
        ("Cohérence et Transitions", _transition_stats(result)),
    ):
        lines.append(_h(2, title))
        lines.append("")
        for label, value in items:
            lines.append(f"- **{label} :** {value}")
        lines.append("")

    if result.vocabulary_stats.common_words:
        lines.append(_h(2, "Mots les plus fréquents"))
        lines.append("")
        lines.append("| Mot | Occurrences |")
        lines.append("|-----|-------------|")
        for wc in report.charts.common_words or result.vocabulary_stats.common_words[:10]:
            lines.append(f"| {wc.word} | {wc.count} |")
        lines.append("")

    if result.markers:
        lines.append(_h(2, "Points d'Attention"))
        lines.append("")
        for marker in result.markers:
            lines.append(f"{_severity_icon(marker)} **[{marker.type.value}]** {marker.message}")
        lines.append("")

    lines.append("---")
    lines.append(f"*Généré par frdetect v{report.version} en {report.duration_ms} ms*")

    return "\n".join(lines)


def build_text_report(result: AnalysisResult) -> str:
    """Plain-text summary for terminals."""
    if result.is_empty:
        return result.details

    lines = [f"Score : {result.score}%", ""]
    for label, value in (
        _general_stats(result) + _structure_stats(result) + _transition_stats(result)
    ):
        lines.append(f"{label} : {value}")

    if result.markers:
        lines.append("")
        lines.append("Points d'Attention :")
        for marker in result.markers:
            lines.append(f"  {_severity_icon(marker)} {marker.message}")

    return "\n".join(lines)


def build_json_report(report: DetectionReport) -> str:
    """Serialize the full report to JSON."""
    return report.model_dump_json(indent=2)


def _severity_icon(marker: Marker) -> str:
    icons = {
        Severity.low: "[.]",
        Severity.medium: "[!]",
        Severity.high: "[!!]",
    }
    return icons.get(marker.severity, "[?]")
