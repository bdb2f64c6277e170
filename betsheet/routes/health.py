"""Health check routes."""

from __future__ import annotations

from flask import Blueprint, current_app

from betsheet.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Health check endpoint; reports which storage port is active."""

    store = current_app.extensions.get("blob_store")
    storage = type(store).__name__ if store is not None else None
    return ok({"status": "ok", "storage": storage})
