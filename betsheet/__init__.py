"""Flask application package."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dotenv import load_dotenv
from flask import Flask


def create_app(overrides: Mapping[str, Any] | None = None, store: Any = None) -> Flask:
    """Application factory.

    Args:
        overrides: config values applied after the environment config.
        store: storage port to use instead of the one STORAGE_BACKEND selects.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from betsheet.config import get_config
    from betsheet.db import init_db
    from betsheet.error_handlers import register_error_handlers
    from betsheet.logging_config import configure_logging
    from betsheet.routes.entries import entries_bp
    from betsheet.routes.health import health_bp
    from betsheet.routes.summary import summary_bp

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    init_db(app, store=store)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(entries_bp, url_prefix="/api")
    app.register_blueprint(summary_bp, url_prefix="/api")

    return app
