"""Flask application exposing log ingestion, query, stats and health endpoints."""

import time

import psutil
from flask import Flask, jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge

from log_api.config import load_config
from log_api.generator.builder import create_realistic_log
from log_api.models import ValidationError, utc_now_iso
from log_api.store import DEFAULT_LIMIT, LogStore


def _non_negative_int(name, default):
    """Read an int query parameter, falling back to the default when malformed or negative."""
    value = request.args.get(name, default, type=int)
    return value if value >= 0 else default


def create_app(config=None, store=None):
    """Flask application factory."""
    app = Flask(__name__)

    if config is None:
        config = load_config()
    if store is None:
        store = LogStore(max_size=config["storage"]["max_logs"])

    app.config["MAX_CONTENT_LENGTH"] = config["server"]["max_body_bytes"]
    started = time.monotonic()

    # Store components on app for access in tests
    app.config["components"] = {
        "config": config,
        "store": store,
    }

    @app.errorhandler(ValidationError)
    def handle_validation_error(err):
        return jsonify({"error": err.message}), 400

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(_err):
        limit = app.config["MAX_CONTENT_LENGTH"]
        return jsonify({"error": f"Request body exceeds {limit} bytes"}), 413

    @app.after_request
    def allow_cross_origin(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    # --- Routes ---

    @app.route("/logs", methods=["POST"])
    def ingest_log():
        limit = app.config["MAX_CONTENT_LENGTH"]
        if request.content_length is not None and request.content_length > limit:
            raise RequestEntityTooLarge()
        payload = request.get_json(silent=True)
        record = store.admit(payload)
        return jsonify({
            "status": "accepted",
            "id": record.id,
            "received_at": record.received_at,
        }), 202

    @app.route("/logs", methods=["GET"])
    def list_logs():
        page = store.list(
            level=request.args.get("level"),
            source=request.args.get("source"),
            limit=_non_negative_int("limit", DEFAULT_LIMIT),
            offset=_non_negative_int("offset", 0),
        )
        return jsonify({
            "logs": [r.to_dict() for r in page.records],
            "pagination": {
                "total": page.total,
                "limit": page.limit,
                "offset": page.offset,
                "hasMore": page.has_more,
            },
        })

    @app.route("/logs", methods=["DELETE"])
    def clear_logs():
        count = store.clear()
        return jsonify({
            "message": f"Cleared {count} logs",
            "cleared_at": utc_now_iso(),
        })

    @app.route("/stats")
    def stats():
        snap = store.stats()
        return jsonify({
            "totalReceived": snap.total_received,
            "byLevel": snap.by_level,
            "lastReceived": snap.last_received_at,
            "storage": {
                "totalLogs": snap.total_logs,
                "memoryUsage": snap.memory_usage,
            },
        })

    @app.route("/search")
    def search():
        result = store.search(request.args.get("q"), level=request.args.get("level"))
        return jsonify({
            "results": [r.to_dict() for r in result.results],
            "total": result.total,
        })

    @app.route("/health")
    def health():
        return jsonify({
            "status": "healthy",
            "timestamp": utc_now_iso(),
            "uptime": round(time.monotonic() - started, 3),
            "memory": psutil.Process().memory_info()._asdict(),
            "receivedLogs": store.current_size,
        })

    @app.route("/sample-log")
    def sample_log():
        return jsonify(create_realistic_log())

    return app
