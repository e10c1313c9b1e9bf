from __future__ import annotations

from flask import Blueprint, current_app, request

from mdstyle.model import OutputFormat, RenderOptions
from mdstyle.renderer import render
from mdstyle.web.auth import require_api_key
from mdstyle.web.responses import fail, ok

render_bp = Blueprint("render", __name__)
render_bp.before_request(require_api_key)


@render_bp.route("/render", methods=["POST"])
def render_markdown():
    """Render Markdown with an optional stored theme."""
    data = request.get_json(silent=True) or {}
    markdown = data.get("markdown")
    if not markdown or not isinstance(markdown, str):
        return fail("Missing required field: markdown", 400)

    fmt = data.get("format") or OutputFormat.WECHAT
    if not isinstance(fmt, str) or fmt not in set(OutputFormat):
        formats = ", ".join(OutputFormat)
        return fail(f"Unknown format {fmt!r}; expected one of {formats}", 400)

    raw_options = data.get("options")
    options = RenderOptions.from_dict(raw_options if isinstance(raw_options, dict) else None)

    result = render(
        markdown,
        theme_id=data.get("themeId") or None,
        output_format=fmt,
        options=options,
        store=current_app.extensions["theme_store"],
    )
    return ok(result.to_dict())
