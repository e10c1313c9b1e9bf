"""Markdown to raw HTML with per-block syntax highlighting."""
from __future__ import annotations

from html import escape

from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin

from mdstyle.markdown.highlight import highlight_code
from mdstyle.model.options import RenderOptions

# Three "traffic light" dots drawn in the Mac-style code header.
MAC_CODE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" version="1.1" x="0px" y="0px" '
    'width="45px" height="13px" viewBox="0 0 450 130">'
    '<ellipse cx="50" cy="65" rx="50" ry="52" stroke="rgb(220,60,54)" '
    'stroke-width="2" fill="rgb(237,108,96)" />'
    '<ellipse cx="225" cy="65" rx="50" ry="52" stroke="rgb(218,151,33)" '
    'stroke-width="2" fill="rgb(247,193,81)" />'
    '<ellipse cx="400" cy="65" rx="50" ry="52" stroke="rgb(27,161,37)" '
    'stroke-width="2" fill="rgb(100,200,86)" />'
    "</svg>"
)

# Mac blocks carry their styles inline at render time. They are structure,
# not theme, and must look the same whatever stylesheet follows.
MAC_PRE_STYLE = (
    "font-size: 90%; overflow-x: auto; border-radius: 8px; padding: 0; "
    "line-height: 1.5; margin: 10px 8px;"
)
MAC_SIGN_STYLE = "display: flex; padding: 10px 14px 6px; margin-bottom: 0;"
MAC_CODE_STYLE = (
    "display: block; padding: 0 1em 1em; overflow-x: auto; color: inherit; "
    "background: none; white-space: pre;"
)


def _plain_block(code: str, lang: str) -> str:
    highlighted, language = highlight_code(code, lang)
    return (
        f'<pre><code class="hljs language-{escape(language)}">'
        f"{highlighted}</code></pre>\n"
    )


def _mac_block(code: str, lang: str) -> str:
    highlighted, language = highlight_code(code, lang)
    sign = f'<span class="mac-sign" style="{MAC_SIGN_STYLE}">{MAC_CODE_SVG}</span>'
    return (
        f'<pre class="hljs code__pre" style="{MAC_PRE_STYLE}">{sign}'
        f'<code class="language-{escape(language)}" style="{MAC_CODE_STYLE}">'
        f"{highlighted}</code></pre>\n"
    )


def build_parser(options: RenderOptions | None = None) -> MarkdownIt:
    """Create a GitHub-flavoured parser with soft breaks rendered as ``<br>``.

    Tables, strikethrough, bare-URL autolinks and task lists are enabled.
    """
    options = options or RenderOptions()
    md = MarkdownIt("commonmark", {"breaks": True, "html": True, "linkify": True})
    md.enable(["table", "strikethrough", "linkify"])
    md.use(tasklists_plugin)

    block = _mac_block if options.is_mac_code_block else _plain_block

    def render_code(tokens, idx, _options, _env):
        token = tokens[idx]
        info = (token.info or "").strip()
        lang = info.split()[0] if info else ""
        return block(token.content, lang)

    md.renderer.rules["fence"] = render_code
    md.renderer.rules["code_block"] = render_code
    return md


def render_markdown(text: str, options: RenderOptions | None = None) -> str:
    """Render *text* to raw (unsanitized) HTML."""
    return build_parser(options).render(text)
