"""Syntax highlighting for fenced code blocks and the matching theme CSS."""
from __future__ import annotations

import logging

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

from mdstyle.model.options import CodeTheme

logger = logging.getLogger(__name__)

PLAINTEXT = "plaintext"

# Class carrying the code colours; highlighted spans sit underneath it.
CODE_THEME_SCOPE = ".hljs"

PYGMENTS_STYLES: dict[CodeTheme, str] = {
    CodeTheme.GITHUB: "default",
    CodeTheme.GITHUB_DARK: "github-dark",
    CodeTheme.VS: "vs",
    CodeTheme.VS2015: "native",
    CodeTheme.ATOM_ONE_DARK: "one-dark",
    CodeTheme.ATOM_ONE_LIGHT: "friendly",
}


def highlight_code(code: str, lang: str | None) -> tuple[str, str]:
    """Highlight *code* and return ``(html, language)``.

    Unknown or missing languages are rendered with the plain-text lexer and
    reported as ``plaintext``.
    """
    language = (lang or "").strip()
    try:
        lexer = get_lexer_by_name(language) if language else TextLexer()
    except ClassNotFound:
        lexer = TextLexer()
        language = ""
    html = highlight(code, lexer, HtmlFormatter(nowrap=True))
    return html, language or PLAINTEXT


def _formatter(theme: CodeTheme) -> HtmlFormatter:
    try:
        return HtmlFormatter(style=PYGMENTS_STYLES[theme])
    except ClassNotFound:
        logger.warning("Pygments style for %s unavailable, using github-dark", theme)
        return HtmlFormatter(style=PYGMENTS_STYLES[CodeTheme.GITHUB_DARK])


def code_theme_css(theme: CodeTheme | str | None = None) -> str:
    """Return the highlight palette for *theme* scoped under ``.hljs``.

    Only background and token rules are emitted; Pygments' line-number
    rules would target bare ``pre`` elements and fight the page theme.
    """
    formatter = _formatter(CodeTheme.parse(theme))
    lines = formatter.get_background_style_defs(CODE_THEME_SCOPE)
    lines += formatter.get_token_style_defs(CODE_THEME_SCOPE)
    return "\n".join(lines)
