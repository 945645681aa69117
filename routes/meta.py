"""Banner and health endpoints."""

from __future__ import annotations

from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

meta_bp = Blueprint("meta", __name__)

BANNER = "TaskTidy API is running..."


@meta_bp.route("/", methods=["GET"])
def banner():
    return BANNER, 200, {"Content-Type": "text/plain; charset=utf-8"}


@meta_bp.route("/health", methods=["GET"])
def health_check():
    return jsonify(
        {
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "environment": current_app.config.get("ENVIRONMENT", "development"),
        }
    )
