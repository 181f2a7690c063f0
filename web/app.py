"""Flask web application for frdetect."""

from __future__ import annotations

import argparse
import os
import sys
import threading
from pathlib import Path

from flask import Flask, render_template, request, jsonify, Blueprint, current_app
from werkzeug.middleware.proxy_fix import ProxyFix

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv
load_dotenv()

from frdetect.charts import ChartBoard
from frdetect.config import DetectorConfig
from frdetect.orchestrator import Orchestrator
from frdetect.report_builder import build_html_details

bp = Blueprint("main", __name__)

URL_PREFIX = os.getenv("URL_PREFIX", "")
CONFIG_PATH = os.getenv("FRDETECT_CONFIG", "config.json")

_charts_lock = threading.Lock()


def _chart_board() -> ChartBoard:
    return current_app.extensions["frdetect.charts"]


@bp.route("/")
def index():
    return render_template("index.html", url_prefix=URL_PREFIX)


@bp.route("/api/config", methods=["GET"])
def get_config():
    cfg = DetectorConfig.load(config_path=CONFIG_PATH)
    return jsonify(cfg.to_dict())


@bp.route("/api/analyze", methods=["POST"])
def analyze():
    data = request.get_json(silent=True) or {}
    text = data.get("text", "")
    if not isinstance(text, str):
        return jsonify({"error": "Field 'text' must be a string."}), 400

    config = DetectorConfig.load(config_path=CONFIG_PATH)
    orchestrator = Orchestrator(config=config)

    try:
        _, _, report = orchestrator.run(text)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    with _charts_lock:
        board = _chart_board()
        if report.result.is_empty:
            board.clear()
            charts = board.charts()
        else:
            charts = board.update(report.charts)

    result = report.result
    return jsonify({
        "run_id": orchestrator.run_id,
        "score": result.score,
        "is_empty": result.is_empty,
        "details": build_html_details(result),
        "markers": [m.model_dump(mode="json") for m in result.markers],
        "metrics": {
            "vocabulary_stats": result.vocabulary_stats.model_dump(mode="json"),
            "sentence_stats": result.sentence_stats.model_dump(mode="json"),
        },
        "language": report.language,
        "charts": charts,
    })


@bp.route("/api/charts", methods=["GET"])
def get_charts():
    with _charts_lock:
        charts = _chart_board().charts()
    return jsonify({"charts": charts})


@bp.route("/api/clear", methods=["POST"])
def clear():
    with _charts_lock:
        board = _chart_board()
        board.clear()
        charts = board.charts()
    return jsonify({"score": None, "details": "", "charts": charts})


def create_app() -> Flask:
    app = Flask(
        __name__,
        template_folder=str(Path(__file__).parent / "templates"),
    )
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1)
    app.extensions["frdetect.charts"] = ChartBoard()

    if URL_PREFIX:
        app.register_blueprint(bp, url_prefix=URL_PREFIX)
    else:
        app.register_blueprint(bp)

    return app


def main():
    parser = argparse.ArgumentParser(description="frdetect web UI")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8020)
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    app = create_app()
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
