"""Run coordinator: validation, language check, analysis, reports."""

from __future__ import annotations

import hashlib
import logging
import time
from datetime import datetime, timezone
from typing import Optional

from frdetect.charts import build_chart_series
from frdetect.config import DetectorConfig
from frdetect.logger import generate_run_id, setup_logger
from frdetect.models import DetectionReport
from frdetect.pipeline import analyze
from frdetect.report_builder import build_json_report, build_markdown_report
from frdetect.utils.language import detect_language

logger = logging.getLogger("frdetect")


class Orchestrator:
    """Wraps one analysis run with its logging and reporting."""

    def __init__(
        self,
        config: DetectorConfig,
        run_id: Optional[str] = None,
        log_to_file: bool = False,
    ):
        self.config = config
        self.run_id = run_id or generate_run_id()
        self.logger = setup_logger(
            "frdetect",
            verbosity=config.verbosity,
            run_id=self.run_id if log_to_file else None,
        )

    def run(self, text: str) -> tuple[str, str, DetectionReport]:
        """
        Execute the full pipeline on *text*.

        Returns:
            (markdown_report, json_report, report_object)

        Raises:
            ValueError: If input exceeds max_input_chars.
        """
        t0 = time.monotonic()

        if len(text) > self.config.max_input_chars:
            raise ValueError(
                f"Input text exceeds maximum of {self.config.max_input_chars} characters "
                f"(got {len(text)}). Please shorten the text."
            )

        self.logger.info("=== Run %s started (%d chars) ===", self.run_id, len(text))
        self.logger.debug("Input text: %s", text)

        language, language_conf = "unknown", 0.0
        if self.config.check_language and text.strip():
            language, language_conf = detect_language(text)
            if language != "fr":
                self.logger.warning(
                    "Text does not look French (detected %s, %.2f); "
                    "connector lists only cover French",
                    language, language_conf,
                )

        result = analyze(text, self.config)
        charts = build_chart_series(result, top_n=self.config.chart_top_words)

        duration = (time.monotonic() - t0) * 1000
        report = DetectionReport(
            input_text_hash=hashlib.sha256(text.encode()).hexdigest()[:16],
            input_char_count=len(text),
            language=language,
            language_confidence=language_conf,
            result=result,
            charts=charts,
            timestamp=datetime.now(timezone.utc).isoformat(),
            duration_ms=round(duration, 1),
        )

        md_report = build_markdown_report(report)
        json_report = build_json_report(report)

        self.logger.info(
            "=== Run %s completed in %.1f ms (score %d) ===",
            self.run_id, duration, result.score,
        )
        return md_report, json_report, report

    async def run_async(self, text: str) -> tuple[str, str, DetectionReport]:
        return self.run(text)
