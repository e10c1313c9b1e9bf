"""Render entrypoint: Markdown in, themed HTML out."""
from __future__ import annotations

import logging

from mdstyle.inliner import embed_css, inline_css
from mdstyle.markdown import code_theme_css, render_markdown, sanitize_html
from mdstyle.model import OutputFormat, RenderOptions, RenderResult, reading_time
from mdstyle.store.themes import ThemeStore
from mdstyle.styles import BASE_CSS, CONTAINER_CLASS, DEFAULT_THEME_CSS
from mdstyle.transforms import apply_transforms

logger = logging.getLogger(__name__)


def resolve_theme_css(theme_id: str | None, store: ThemeStore | None) -> str:
    """Return the stored theme's CSS, or the default theme when unavailable."""
    if theme_id and store is not None:
        theme = store.get(theme_id)
        if theme is not None:
            return theme.css
        logger.debug("Theme %s not found, using default theme", theme_id)
    return DEFAULT_THEME_CSS


def build_stylesheet(theme_css: str, options: RenderOptions) -> str:
    """Combine base, theme and code-highlight CSS into a variable-free stylesheet."""
    combined = f"{BASE_CSS}\n{theme_css}\n{code_theme_css(options.code_theme)}"
    return apply_transforms(combined)


def render(
    markdown: str,
    theme_id: str | None = None,
    output_format: OutputFormat | str = OutputFormat.WECHAT,
    options: RenderOptions | None = None,
    store: ThemeStore | None = None,
) -> RenderResult:
    """Render *markdown* to HTML in the requested output format.

    Raises ValueError for an unknown *output_format*.
    """
    fmt = OutputFormat(output_format)
    options = options or RenderOptions()

    body = sanitize_html(render_markdown(markdown, options))
    html = f'<section class="{CONTAINER_CLASS}">{body}</section>'
    css = build_stylesheet(resolve_theme_css(theme_id, store), options)

    if fmt is OutputFormat.HTML_PLAIN:
        return RenderResult(html=html, css=css, reading_time=reading_time(markdown))
    if fmt is OutputFormat.WECHAT:
        html = inline_css(html, css)
    else:
        html = embed_css(html, css)
    return RenderResult(html=html, reading_time=reading_time(markdown))
