from __future__ import annotations

import logging

from flask import current_app, request

from mdstyle.config import API_KEY_HEADER
from mdstyle.web.responses import fail

logger = logging.getLogger(__name__)


def require_api_key():
    """``before_request`` hook rejecting calls without an accepted API key.

    With no keys configured any non-empty key is accepted (development mode).
    """
    if request.method == "OPTIONS":
        return None
    key = request.headers.get(API_KEY_HEADER)
    if not key:
        return fail(f"Missing API key. Please provide {API_KEY_HEADER} header.", 401)
    api_keys = current_app.extensions["api_keys"]
    if api_keys.is_open:
        logger.warning("No API keys configured, accepting any key")
        return None
    if not api_keys.is_allowed(key):
        return fail("Invalid API key.", 401)
    return None
