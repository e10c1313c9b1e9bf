"""Merge a stylesheet into HTML as per-element ``style`` attributes.

Target editors drop ``<style>`` blocks, so for the ``wechat`` format every
rule is written onto the elements it matches. Rules that cannot live in a
``style`` attribute (pseudo-elements, selectors matching nothing) are
dropped by the inliner.

css_inline skips a selector it cannot parse, and an unbalanced one can take
the following rule down with it. Selectors are therefore compiled up front;
a single invalid selector sends the whole stylesheet down the ``<style>``
fallback instead of silently losing rules.
"""
from __future__ import annotations

import logging
import re

import css_inline
import soupsieve

from mdstyle.errors import InvalidSelectorError
from mdstyle.stylesheet import parse_stylesheet

logger = logging.getLogger(__name__)

_BODY_RE = re.compile(r"<body[^>]*>(.*)</body>", re.IGNORECASE | re.DOTALL)

_DOCUMENT = (
    "<!DOCTYPE html><html><head><style>{css}</style></head>"
    "<body>{html}</body></html>"
)

# Pseudo-elements never match an element; the inliner drops them.
_PSEUDO_ELEMENT_RE = re.compile(
    r"::[-\w]+(?:\([^)]*\))?|:(?:before|after|first-line|first-letter)\b",
    re.IGNORECASE,
)


def embed_css(html: str, css: str) -> str:
    """Prepend *css* to *html* as a ``<style>`` block."""
    return f"<style>{css}</style>\n{html}"


def _element_selector(selector: str) -> str:
    """Drop pseudo-elements; a bare one such as ``::selection`` becomes ``*``."""

    def replace(match: re.Match[str]) -> str:
        start = match.start()
        return "" if start and selector[start - 1] not in " \t\n,>+~(" else "*"

    return _PSEUDO_ELEMENT_RE.sub(replace, selector).strip()


def check_selectors(css: str) -> None:
    """Raise InvalidSelectorError for the first selector that cannot be compiled."""
    for selector in parse_stylesheet(css).selectors():
        try:
            soupsieve.compile(_element_selector(selector))
        except soupsieve.SelectorSyntaxError as exc:
            raise InvalidSelectorError(f"Invalid selector {selector!r}", cause=exc) from exc


def _inliner() -> css_inline.CSSInliner:
    return css_inline.CSSInliner(keep_style_tags=False, load_remote_stylesheets=False)


def inline_css(html: str, css: str) -> str:
    """Apply *css* to *html* as inline styles.

    Never raises: if a selector is invalid or inlining fails, the stylesheet
    is embedded instead, which keeps the content intact at the cost of
    editor compatibility.
    """
    document = _DOCUMENT.format(css=css, html=html)
    try:
        check_selectors(css)
        result = _inliner().inline(document)
    except Exception:
        logger.exception("CSS inlining failed, embedding stylesheet instead")
        return embed_css(html, css)
    match = _BODY_RE.search(result)
    return match.group(1).strip() if match else html
