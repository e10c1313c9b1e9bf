"""Tests for CSS variable resolution."""

import pytest

from mdstyle.transforms.variables import (
    VariableResolutionTransform,
    extract_variables,
    resolve_variables,
)


# ---------------------------------------------------------------------------
# Variable table
# ---------------------------------------------------------------------------


class TestExtractVariables:
    def test_collects_custom_properties(self):
        rest, table = extract_variables(":root { --main: #333; --gap:  4px ; }\np { margin: 0; }")
        assert table == {"--main": "#333", "--gap": "4px"}
        assert rest == "\np { margin: 0; }"

    def test_multiline_body_with_nested_characters(self):
        css = ':root {\n  --font: "A}B", serif;\n  --size: 15px;\n}\n.x { color: red; }'
        rest, table = extract_variables(css)
        assert table["--font"] == '"A}B", serif'
        assert table["--size"] == "15px"
        assert ":root" not in rest
        assert ".x { color: red; }" in rest

    def test_later_definition_wins(self):
        _, table = extract_variables(":root { --a: 1px; } :root { --a: 2px; }")
        assert table == {"--a": "2px"}

    def test_non_custom_properties_ignored(self):
        _, table = extract_variables(":root { color-scheme: light; --a: 1px; }")
        assert table == {"--a": "1px"}

    def test_no_root_block(self):
        css = "p { color: red; }"
        assert extract_variables(css) == (css, {})


# ---------------------------------------------------------------------------
# Substitution
# ---------------------------------------------------------------------------


class TestResolveVariables:
    def test_substitutes_value(self):
        out = resolve_variables(":root { --main: #333; } p { color: var(--main); }")
        assert "p { color: #333; }" in out
        assert ":root" not in out

    def test_whitespace_inside_var(self):
        out = resolve_variables(":root { --main: #333; } p { color: var(  --main  ); }")
        assert "color: #333;" in out

    def test_value_with_backslash_kept_literally(self):
        out = resolve_variables(':root { --q: "\\201C"; } q::before { content: var(--q); }')
        assert 'content: "\\201C";' in out

    def test_unresolved_becomes_inherit(self):
        assert resolve_variables("p { color: var(--missing); }") == "p { color: inherit; }"

    def test_fallback_argument_becomes_inherit(self):
        out = resolve_variables("p { color: var(--missing, rgba(0, 0, 0, 0.5)); }")
        assert out == "p { color: inherit; }"

    def test_unterminated_reference(self):
        out = resolve_variables("p { color: var(--x; margin: 0 }")
        assert out == "p { color: inherit; margin: 0 }"

    @pytest.mark.parametrize(
        "css",
        [
            "p { color: var(--a); }",
            "p { color: VAR( --a ); }",
            "p { border: 1px solid var(--a, var(--b)); }",
            "p { color: var(--a, calc(var(--b) * (2 + 1))); }",
            ":root { --a: var(--b); } p { color: var(--a); }",
            "p { color: var(--",
        ],
    )
    def test_no_variables_leak(self, css):
        assert "var(--" not in resolve_variables(css).lower()

    def test_var_free_stylesheet_unchanged(self):
        css = "h1 { color: red; }\np { margin: 0 !important; }"
        assert resolve_variables(css) == css

    def test_var_free_stylesheet_only_loses_root(self):
        css = ":root { --unused: 1px; }\np { margin: 0; }"
        assert resolve_variables(css) == "\np { margin: 0; }"

    def test_transform_wrapper(self):
        css = ":root { --a: red; } p { color: var(--a); }"
        assert VariableResolutionTransform().apply(css) == resolve_variables(css)


# ---------------------------------------------------------------------------
# Container rule
# ---------------------------------------------------------------------------


class TestContainerRule:
    def test_font_variables_pinned_on_container(self):
        out = resolve_variables(":root { --md-font-family: Georgia; --md-font-size: 15px; }")
        assert out.startswith(
            ".md-container { font-family: Georgia; font-size: 15px; "
            "line-height: 1.8; color: hsl(0, 0%, 3.9%); }"
        )

    def test_font_size_only(self):
        out = resolve_variables(":root { --md-font-size: 15px; }")
        assert out.startswith(".md-container { font-size: 15px; line-height: 1.8;")
        assert "font-family" not in out

    def test_no_font_variables_no_container_rule(self):
        out = resolve_variables(":root { --md-primary-color: red; } h1 { color: var(--md-primary-color); }")
        assert ".md-container" not in out
        assert "h1 { color: red; }" in out


# ---------------------------------------------------------------------------
# Literal shims
# ---------------------------------------------------------------------------


class TestShims:
    def test_foreground_and_background(self):
        out = resolve_variables("p { color: hsl(var(--foreground)); background: hsl(var(--background)); }")
        assert out == "p { color: hsl(0, 0%, 3.9%); background: hsl(0, 0%, 100%); }"

    def test_bare_foreground(self):
        out = resolve_variables("p { --x: var(--foreground); }")
        assert out == "p { --x: 0 0% 3.9%; }"

    def test_defined_variable_takes_precedence_over_hsl_shim(self):
        out = resolve_variables(":root { --foreground: 10 10% 10%; } p { color: hsl(var(--foreground)); }")
        assert "hsl(10 10% 10%)" in out

    def test_blockquote_background_ignores_definition(self):
        css = ":root { --blockquote-background: #fff; } blockquote { background: var(--blockquote-background); }"
        out = resolve_variables(css)
        assert "blockquote { background: rgba(0,0,0,0.03); }" in out
        assert "#fff" not in out
