"""JSON envelope shared by all API routes: ``{success, data}`` or ``{success, error}``."""
from __future__ import annotations

from typing import Any

from flask import jsonify


def ok(data: Any, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "error": message}), status
