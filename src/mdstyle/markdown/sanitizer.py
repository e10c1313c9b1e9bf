"""HTML sanitizing for rendered Markdown.

The allow-list is configuration: Markdown output tags, task-list checkboxes,
the ``section`` container, and the SVG used by Mac-style code headers.
``class``, ``id`` and ``style`` are allowed on every tag.
"""
from __future__ import annotations

import bleach
from bleach.css_sanitizer import ALLOWED_CSS_PROPERTIES, CSSSanitizer

ALLOWED_TAGS = frozenset({
    "a", "abbr", "b", "blockquote", "br", "code", "del", "div", "em", "h1",
    "h2", "h3", "h4", "h5", "h6", "hr", "i", "img", "input", "kbd", "li",
    "ol", "p", "pre", "s", "section", "span", "strong", "sub", "sup", "table",
    "tbody", "td", "tfoot", "th", "thead", "tr", "u", "ul",
    # Mac code header
    "svg", "ellipse",
})

ALLOWED_ATTRIBUTES = {
    "*": ["class", "id", "style"],
    "a": ["href", "title"],
    "img": ["src", "alt", "title", "width", "height"],
    # task list checkboxes
    "input": ["type", "checked", "disabled"],
    "ol": ["start"],
    "th": ["align", "colspan", "rowspan"],
    "td": ["align", "colspan", "rowspan"],
    "svg": ["xmlns", "version", "x", "y", "width", "height", "viewBox", "viewbox"],
    "ellipse": ["cx", "cy", "rx", "ry", "stroke", "stroke-width", "fill"],
}

ALLOWED_CSS = ALLOWED_CSS_PROPERTIES | frozenset({
    "background",
    "border-radius",
    "margin",
    "margin-bottom",
    "overflow-x",
    "padding",
})


def sanitize_html(
    html: str,
    tags: frozenset[str] = ALLOWED_TAGS,
    attributes: dict[str, list[str]] | None = None,
) -> str:
    """Strip disallowed tags and attributes from *html*."""
    return bleach.clean(
        html,
        tags=tags,
        attributes=attributes if attributes is not None else ALLOWED_ATTRIBUTES,
        css_sanitizer=CSSSanitizer(allowed_css_properties=ALLOWED_CSS),
        strip=True,
    )
