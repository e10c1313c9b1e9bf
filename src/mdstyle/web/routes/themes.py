from __future__ import annotations

from urllib.parse import quote

from flask import Blueprint, Response, current_app, request

from mdstyle.errors import InvalidThemeError
from mdstyle.web.auth import require_api_key
from mdstyle.web.responses import fail, ok

themes_bp = Blueprint("themes", __name__)
themes_bp.before_request(require_api_key)

CSS_MIMETYPE = "text/css"


def _is_css_upload(filename: str, mimetype: str | None) -> bool:
    return mimetype == CSS_MIMETYPE or filename.lower().endswith(".css")


@themes_bp.route("/themes", methods=["GET"])
def list_themes():
    """List stored themes, newest first."""
    store = current_app.extensions["theme_store"]
    return ok([record.to_dict() for record in store.list_all()])


@themes_bp.route("/themes", methods=["POST"])
def upload_theme():
    """Store an uploaded CSS file (multipart field ``file``)."""
    upload = request.files.get("file")
    if upload is None or not upload.filename:
        return fail('No CSS file uploaded. Use multipart/form-data with field name "file".', 400)
    if not _is_css_upload(upload.filename, upload.mimetype):
        return fail("Only CSS files are allowed", 400)

    limit = current_app.extensions["mdstyle_config"].max_theme_bytes
    content = upload.read(limit + 1)
    if len(content) > limit:
        return fail(f"Theme file exceeds {limit} bytes", 413)

    name = request.form.get("name") or upload.filename.removesuffix(".css")
    store = current_app.extensions["theme_store"]
    try:
        record = store.save(name, content.decode("utf-8", errors="replace"))
    except InvalidThemeError as exc:
        return fail(str(exc), 400)
    return ok(record.to_dict(), 201)


@themes_bp.route("/themes/<theme_id>", methods=["GET"])
def download_theme(theme_id: str):
    """Return the raw CSS of a theme as an attachment."""
    theme = current_app.extensions["theme_store"].get(theme_id)
    if theme is None:
        return fail("Theme not found", 404)
    filename = quote(theme.record.name, safe="")
    return Response(
        theme.css,
        content_type="text/css; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{filename}.css"},
    )


@themes_bp.route("/themes/<theme_id>", methods=["DELETE"])
def delete_theme(theme_id: str):
    """Delete a theme."""
    if not current_app.extensions["theme_store"].delete(theme_id):
        return fail("Theme not found", 404)
    return ok({"id": theme_id, "deleted": True})
