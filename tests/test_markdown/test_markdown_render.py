"""Tests for Markdown rendering and code block decoration."""

from mdstyle.markdown import render_markdown
from mdstyle.markdown.renderer import MAC_CODE_SVG, build_parser
from mdstyle.model import RenderOptions


MAC = RenderOptions(is_mac_code_block=True)


# ---------------------------------------------------------------------------
# Markdown features
# ---------------------------------------------------------------------------


class TestMarkdown:
    def test_heading(self):
        assert "<h1>Hello</h1>" in render_markdown("# Hello")

    def test_soft_break_becomes_br(self):
        assert "<br" in render_markdown("Line 1\nLine 2")

    def test_table(self):
        html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |")
        assert "<table>" in html
        assert "<td>1</td>" in html

    def test_strikethrough(self):
        assert "<s>gone</s>" in render_markdown("~~gone~~")

    def test_raw_html_passes_through(self):
        assert '<span class="x">hi</span>' in render_markdown('<span class="x">hi</span>')

    def test_bare_url_autolinked(self):
        html = render_markdown("see https://example.com")
        assert '<a href="https://example.com">https://example.com</a>' in html

    def test_task_list(self):
        html = render_markdown("- [ ] todo\n- [x] done")
        assert 'type="checkbox"' in html
        assert "checked" in html
        assert "[ ]" not in html
        assert "[x]" not in html

    def test_default_options(self):
        assert build_parser().render("`x`") == "<p><code>x</code></p>\n"


# ---------------------------------------------------------------------------
# Code blocks
# ---------------------------------------------------------------------------


class TestPlainCodeBlocks:
    def test_fenced_with_language(self):
        html = render_markdown("```python\ndef f():\n    pass\n```")
        assert html.startswith('<pre><code class="hljs language-python">')
        assert '<span class="k">def</span>' in html

    def test_unknown_language_is_plaintext(self):
        html = render_markdown("```notalanguage\nhello\n```")
        assert 'class="hljs language-plaintext"' in html
        assert "hello" in html

    def test_no_language(self):
        assert "language-plaintext" in render_markdown("```\nhello\n```")

    def test_indented_code_block(self):
        assert "language-plaintext" in render_markdown("    indented code")

    def test_code_is_escaped(self):
        html = render_markdown("```\n<b>x</b>\n```")
        assert "&lt;b&gt;" in html
        assert "<b>" not in html

    def test_info_string_extra_words_ignored(self):
        assert "language-python" in render_markdown("```python title=x\npass\n```")


class TestMacCodeBlocks:
    def test_structure(self):
        html = render_markdown("```js\nlet a = 1\n```", MAC)
        assert html.startswith('<pre class="hljs code__pre" style="')
        assert '<span class="mac-sign"' in html
        assert MAC_CODE_SVG in html
        assert '<code class="language-js" style="' in html

    def test_traffic_light_colours(self):
        html = render_markdown("```\nx\n```", MAC)
        for colour in ("rgb(237,108,96)", "rgb(247,193,81)", "rgb(100,200,86)"):
            assert colour in html

    def test_plain_header_absent_without_option(self):
        assert "mac-sign" not in render_markdown("```\nx\n```")
