#!/usr/bin/env python3
"""CLI entry point for frdetect."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from frdetect.config import DetectorConfig
from frdetect.orchestrator import Orchestrator
from frdetect.report_builder import build_html_details, build_text_report


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="frdetect",
        description="Estimate how AI-generated a French text looks.",
    )
    parser.add_argument(
        "-s", "--source",
        default="source.txt",
        help="Path to source text file (default: source.txt)",
    )
    parser.add_argument(
        "-o", "--output",
        default="result.md",
        help="Path for Markdown output (default: result.md)",
    )
    parser.add_argument(
        "-j", "--json-output",
        default="result.json",
        help="Path for JSON output (default: result.json)",
    )
    parser.add_argument(
        "--html-output",
        default="",
        help="Path for the HTML details fragment (optional)",
    )
    parser.add_argument(
        "-c", "--config",
        default="config.json",
        help="Path to config file (default: config.json)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=None,
        help="Increase verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--print",
        dest="print_report",
        action="store_true",
        help="Print the text report to stdout",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    source_path = Path(args.source)
    if not source_path.exists():
        print(f"Error: source file not found: {source_path}", file=sys.stderr)
        return 1

    text = source_path.read_text(encoding="utf-8")
    if not text.strip():
        print("Error: source file is empty.", file=sys.stderr)
        return 1

    overrides = {}
    if args.verbose is not None:
        overrides["verbosity"] = args.verbose + 1

    try:
        config = DetectorConfig.load(config_path=args.config, overrides=overrides)
    except ValueError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1

    orchestrator = Orchestrator(config=config, log_to_file=True)

    try:
        md_report, json_report, report = orchestrator.run(text)
    except ValueError as e:
        print(f"Input error: {e}", file=sys.stderr)
        return 1

    output_path = Path(args.output)
    output_path.write_text(md_report, encoding="utf-8")
    print(f"Markdown report written to: {output_path}")

    json_path = Path(args.json_output)
    json_path.write_text(json_report, encoding="utf-8")
    print(f"JSON report written to: {json_path}")

    if args.html_output:
        html_path = Path(args.html_output)
        html_path.write_text(build_html_details(report.result), encoding="utf-8")
        print(f"HTML details written to: {html_path}")

    if args.print_report:
        print()
        print(build_text_report(report.result))

    print(f"\nAI score: {report.result.score}%")
    print(f"Run ID: {orchestrator.run_id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
