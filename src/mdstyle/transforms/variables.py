"""CSS variable resolution: replaces ``var(--name)`` with literal values.

The inliner and the target editors have no notion of custom properties, so
every ``var(...)`` reference must leave this module as a literal. Resolution
is textual: ``:root`` blocks are cut out and their ``--name: value``
declarations become the variable table for a single call.

Besides generic substitution a few literal shims exist for names that
themes use as function arguments rather than as direct values:

* ``hsl(var(--foreground))``  -> ``hsl(0, 0%, 3.9%)``
* ``hsl(var(--background))``  -> ``hsl(0, 0%, 100%)``
* ``var(--blockquote-background)`` -> ``rgba(0,0,0,0.03)`` (always)

These are compatibility substitutions, not an ``hsl()`` evaluator.
"""

from __future__ import annotations

import re

from mdstyle.stylesheet import Declaration, StyleRule, find_block_end, parse_declarations

__all__ = ["VariableResolutionTransform", "resolve_variables", "extract_variables"]

_ROOT_RE = re.compile(r":root\s*\{", re.IGNORECASE)

_VAR_OPEN_RE = re.compile(r"var\s*\(\s*--", re.IGNORECASE)

FOREGROUND_HSL = "hsl(0, 0%, 3.9%)"
BACKGROUND_HSL = "hsl(0, 0%, 100%)"
BLOCKQUOTE_BACKGROUND = "rgba(0,0,0,0.03)"

# Applied after generic substitution, in order.
_SHIMS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"hsl\s*\(\s*var\s*\(\s*--foreground\s*\)\s*\)", re.IGNORECASE), FOREGROUND_HSL),
    (re.compile(r"hsl\s*\(\s*var\s*\(\s*--background\s*\)\s*\)", re.IGNORECASE), BACKGROUND_HSL),
    (re.compile(r"var\s*\(\s*--foreground\s*\)", re.IGNORECASE), "0 0% 3.9%"),
    (re.compile(r"var\s*\(\s*--background\s*\)", re.IGNORECASE), "0 0% 100%"),
)

_BLOCKQUOTE_RE = re.compile(r"var\s*\(\s*--blockquote-background\s*\)", re.IGNORECASE)

FONT_FAMILY_VAR = "--md-font-family"
FONT_SIZE_VAR = "--md-font-size"


def extract_variables(css: str) -> tuple[str, dict[str, str]]:
    """Cut every ``:root`` block out of *css*.

    Returns the remaining text and the variable table built from the blocks'
    custom-property declarations (later definitions win).
    """
    variables: dict[str, str] = {}
    pieces: list[str] = []
    pos = 0
    for match in _ROOT_RE.finditer(css):
        if match.start() < pos:  # inside a block we already consumed
            continue
        end = find_block_end(css, match.end() - 1)
        for decl in parse_declarations(css[match.end():end]):
            if decl.property.startswith("--"):
                variables[decl.property] = decl.value
        pieces.append(css[pos:match.start()])
        pos = end + 1
    pieces.append(css[pos:])
    return "".join(pieces), variables


def _substitute(css: str, variables: dict[str, str]) -> str:
    for name, value in variables.items():
        pattern = re.compile(r"var\(\s*" + re.escape(name) + r"\s*\)")
        css = pattern.sub(lambda _m, v=value: v, css)
    return css


def _container_rule(variables: dict[str, str]) -> str:
    """Pin the theme's font variables onto the container element.

    Themes often define font variables without ever consuming them on the
    container, so they would otherwise vanish with the ``:root`` block.
    """
    decls: list[Declaration] = []
    if variables.get(FONT_FAMILY_VAR):
        decls.append(Declaration("font-family", variables[FONT_FAMILY_VAR]))
    if variables.get(FONT_SIZE_VAR):
        decls.append(Declaration("font-size", variables[FONT_SIZE_VAR]))
    if not decls:
        return ""
    decls.append(Declaration("line-height", "1.8"))
    decls.append(Declaration("color", FOREGROUND_HSL))
    return StyleRule(".md-container", tuple(decls)).to_css() + "\n"


def _matching_paren(text: str, open_index: int) -> int:
    depth = 0
    for i in range(open_index, len(text)):
        if text[i] == "(":
            depth += 1
        elif text[i] == ")":
            depth -= 1
            if depth == 0:
                return i
    return -1


def _sweep_unresolved(css: str) -> str:
    """Replace every remaining ``var(--...)`` (fallbacks included) with ``inherit``."""
    out: list[str] = []
    pos = 0
    while True:
        match = _VAR_OPEN_RE.search(css, pos)
        if match is None:
            break
        close = _matching_paren(css, css.index("(", match.start()))
        out.append(css[pos:match.start()])
        out.append("inherit")
        if close == -1:
            # unterminated reference: drop the rest of the declaration
            stop = re.compile(r"[;}]").search(css, match.end())
            pos = stop.start() if stop else len(css)
        else:
            pos = close + 1
    out.append(css[pos:])
    return "".join(out)


def resolve_variables(css: str) -> str:
    """Return *css* with ``:root`` removed and no ``var(--`` left anywhere."""
    processed, variables = extract_variables(css)
    processed = _BLOCKQUOTE_RE.sub(BLOCKQUOTE_BACKGROUND, processed)
    processed = _substitute(processed, variables)
    processed = _container_rule(variables) + processed
    for pattern, literal in _SHIMS:
        processed = pattern.sub(literal, processed)
    return _sweep_unresolved(processed)


class VariableResolutionTransform:
    """Resolve CSS custom properties to literal values."""

    def apply(self, css: str) -> str:
        return resolve_variables(css)
