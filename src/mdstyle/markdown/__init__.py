from mdstyle.markdown.highlight import code_theme_css, highlight_code
from mdstyle.markdown.renderer import build_parser, render_markdown
from mdstyle.markdown.sanitizer import sanitize_html

__all__ = [
    "build_parser",
    "code_theme_css",
    "highlight_code",
    "render_markdown",
    "sanitize_html",
]
