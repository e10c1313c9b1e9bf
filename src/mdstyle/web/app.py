from __future__ import annotations

import logging

from flask import Flask, request
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from mdstyle.config import ApiKeyCache, MdStyleConfig
from mdstyle.store.themes import ThemeStore
from mdstyle.web.responses import fail

logger = logging.getLogger(__name__)


def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    if request.path.startswith("/api"):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type, X-API-Key"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, DELETE, OPTIONS"
    return response


def handle_too_large(_error: RequestEntityTooLarge):
    return fail("Upload exceeds the size limit", 413)


def handle_http_error(error: HTTPException):
    return fail(error.description or error.name, error.code or 500)


def handle_unexpected(error: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.path)
    return fail(str(error) or "Internal server error", 500)


def create_app(
    config: MdStyleConfig | None = None,
    store: ThemeStore | None = None,
    api_keys: ApiKeyCache | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    config = config or MdStyleConfig()
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = config.max_request_bytes

    if api_keys is None:
        api_keys = ApiKeyCache(config.config_path)
        api_keys.refresh()

    app.extensions["mdstyle_config"] = config
    app.extensions["theme_store"] = store or ThemeStore(config.themes_dir)
    app.extensions["api_keys"] = api_keys

    app.after_request(add_cors_headers)
    app.register_error_handler(RequestEntityTooLarge, handle_too_large)
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected)

    # Register blueprints
    from mdstyle.web.routes.health import health_bp
    from mdstyle.web.routes.render import render_bp
    from mdstyle.web.routes.themes import themes_bp

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(render_bp, url_prefix="/api")
    app.register_blueprint(themes_bp, url_prefix="/api")

    return app
