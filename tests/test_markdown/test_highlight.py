"""Tests for syntax highlighting and code theme CSS."""

import pytest

from mdstyle.markdown.highlight import PLAINTEXT, code_theme_css, highlight_code
from mdstyle.model import CodeTheme


class TestHighlightCode:
    def test_known_language(self):
        html, language = highlight_code("x = 1\n", "python")
        assert language == "python"
        assert '<span class="n">x</span>' in html

    def test_unknown_language(self):
        html, language = highlight_code("x = 1\n", "nope-lang")
        assert language == PLAINTEXT
        assert html.strip() == "x = 1"

    def test_missing_language(self):
        _, language = highlight_code("x", None)
        assert language == PLAINTEXT

    def test_output_is_escaped(self):
        html, _ = highlight_code("<script>", "")
        assert "&lt;script&gt;" in html


class TestCodeThemeCss:
    @pytest.mark.parametrize("theme", list(CodeTheme))
    def test_every_theme_scoped(self, theme):
        css = code_theme_css(theme)
        assert css
        assert ".hljs" in css
        assert "var(" not in css

    def test_token_rules_present(self):
        assert ".hljs .k" in code_theme_css(CodeTheme.GITHUB_DARK)

    def test_no_line_number_rules(self):
        assert "line-height: 125%" not in code_theme_css(CodeTheme.GITHUB)

    def test_default_is_github_dark(self):
        assert code_theme_css() == code_theme_css(CodeTheme.GITHUB_DARK)

    def test_unknown_name_falls_back(self):
        assert code_theme_css("solarized") == code_theme_css(CodeTheme.GITHUB_DARK)

    def test_themes_differ(self):
        assert code_theme_css(CodeTheme.GITHUB) != code_theme_css(CodeTheme.GITHUB_DARK)
