"""Tests for the render entrypoint and output formats."""

import re

import pytest

from mdstyle import inliner
from mdstyle.inliner import check_selectors
from mdstyle.model import CodeTheme, OutputFormat, RenderOptions
from mdstyle.renderer import build_stylesheet, render, resolve_theme_css
from mdstyle.styles import DEFAULT_THEME_CSS

SAMPLE = "# Title\n\nSome **bold** text.\n\n- one\n- two\n\n```python\nprint('hi')\n```\n"


class ExplodingInliner:
    def inline(self, html):
        raise RuntimeError("no inlining today")


# ---------------------------------------------------------------------------
# Reading time
# ---------------------------------------------------------------------------


class TestReadingTime:
    def test_hello_world(self):
        rt = render("# Hello\n**World**").reading_time
        assert (rt.chars, rt.words, rt.minutes) == (17, 3, 1)

    def test_reading_time_independent_of_format(self):
        a = render(SAMPLE, output_format="html").reading_time
        b = render(SAMPLE, output_format="html-plain").reading_time
        assert a == b


# ---------------------------------------------------------------------------
# Output formats
# ---------------------------------------------------------------------------


class TestFormats:
    def test_html_plain(self):
        result = render(SAMPLE, output_format=OutputFormat.HTML_PLAIN)
        assert result.css
        assert "<style" not in result.html
        assert result.html.startswith('<section class="md-container">')
        assert result.html.endswith("</section>")

    def test_html(self):
        result = render(SAMPLE, output_format="html")
        assert result.css is None
        assert result.html.count("<style>") == 1
        assert result.html.startswith("<style>")

    def test_wechat(self):
        result = render(SAMPLE)
        assert result.css is None
        assert "<style" not in result.html
        assert re.search(r'style="[^"]+"', result.html)

    def test_no_variables_in_any_output(self):
        for fmt in OutputFormat:
            result = render(SAMPLE, output_format=fmt)
            assert "var(--" not in result.html
            assert "var(--" not in (result.css or "")

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            render(SAMPLE, output_format="pdf")

    def test_mac_code_block_option(self):
        result = render(SAMPLE, output_format="html-plain", options=RenderOptions(is_mac_code_block=True))
        assert "mac-sign" in result.html

    def test_script_stripped(self):
        result = render("hi <script>alert(1)</script>", output_format="html-plain")
        assert "<script" not in result.html

    def test_inliner_failure_embeds_stylesheet(self, monkeypatch):
        monkeypatch.setattr(inliner, "_inliner", ExplodingInliner)
        result = render(SAMPLE)
        css = build_stylesheet(DEFAULT_THEME_CSS, RenderOptions())
        assert result.html.startswith("<style>")
        assert css in result.html
        assert result.css is None


# ---------------------------------------------------------------------------
# Themes
# ---------------------------------------------------------------------------


class TestThemes:
    def test_unknown_theme_same_as_no_theme(self, store):
        assert render(SAMPLE, theme_id="theme_missing", store=store) == render(SAMPLE, store=store)

    def test_theme_without_store_uses_default(self):
        assert resolve_theme_css("theme_abc", None) == DEFAULT_THEME_CSS

    def test_stored_theme_applied(self, store):
        record = store.save("Mine", ":root { --accent: #123456; } p { color: var(--accent); }")
        result = render(SAMPLE, theme_id=record.id, output_format="html-plain", store=store)
        assert "color: #123456" in result.css
        assert "-apple-system-font" not in result.css

    def test_stored_theme_list_display_patched(self, store):
        record = store.save("Lists", "li { display: block; }")
        result = render("- a", theme_id=record.id, output_format="html-plain", store=store)
        assert "li { display: list-item; }" in result.css

    def test_code_theme_css_included(self):
        css = build_stylesheet("", RenderOptions())
        assert ".hljs" in css


# ---------------------------------------------------------------------------
# Selector failures
# ---------------------------------------------------------------------------


class TestSelectorFailures:
    @pytest.mark.parametrize("code_theme", list(CodeTheme))
    def test_builtin_stylesheets_compile(self, code_theme):
        check_selectors(build_stylesheet(DEFAULT_THEME_CSS, RenderOptions(code_theme=code_theme)))

    def test_malformed_theme_selector_falls_back(self, store):
        record = store.save("Broken", "p { color: #123456; } h1[ { color: red; }")
        result = render("# Title\n\ntext", theme_id=record.id, store=store)
        css = build_stylesheet(store.get(record.id).css, RenderOptions())
        assert result.html.startswith("<style>")
        assert css in result.html
        assert result.css is None
