"""Best-effort parser for theme stylesheets.

Handles plain ``selector { prop: value; }`` rules. Comments are dropped and
at-rules (``@media``, ``@font-face``, ``@import`` ...) are skipped whole, since
neither the variable resolver nor the inliner can use them. The parser never
raises: anything it cannot make sense of is ignored.
"""

from __future__ import annotations

import re

from mdstyle.stylesheet.model import Declaration, StyleRule, StyleSheet

__all__ = ["parse_stylesheet", "parse_declarations", "find_block_end"]

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)


def find_block_end(text: str, open_index: int) -> int:
    """Return the index of the ``}`` matching the ``{`` at *open_index*.

    Nested braces and quoted strings are skipped. Returns ``len(text)`` when
    the block is never closed.
    """
    depth = 0
    quote = ""
    i = open_index
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = ""
        elif ch in ("'", '"'):
            quote = ch
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return len(text)


def _split_top_level(body: str, sep: str) -> list[str]:
    """Split on *sep* outside parentheses and quotes (data URLs, fonts)."""
    parts: list[str] = []
    depth = 0
    quote = ""
    start = 0
    for i, ch in enumerate(body):
        if quote:
            if ch == quote and body[i - 1] != "\\":
                quote = ""
        elif ch in ("'", '"'):
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif ch == sep and depth == 0:
            parts.append(body[start:i])
            start = i + 1
    parts.append(body[start:])
    return parts


def parse_declarations(body: str) -> tuple[Declaration, ...]:
    """Parse the body of a rule block into declarations, in source order."""
    decls: list[Declaration] = []
    for chunk in _split_top_level(body, ";"):
        prop, colon, value = chunk.partition(":")
        prop = prop.strip()
        value = value.strip()
        if not colon or not prop or not value:
            continue
        important = bool(_IMPORTANT_RE.search(value))
        if important:
            value = _IMPORTANT_RE.sub("", value)
        decls.append(Declaration(property=prop, value=value, important=important))
    return tuple(decls)


def parse_stylesheet(source: str) -> StyleSheet:
    """Parse stylesheet text into a StyleSheet.

    Returns a StyleSheet containing all rules with at least one declaration,
    in source order.
    """
    text = _COMMENT_RE.sub("", source)
    rules: list[StyleRule] = []
    i = 0
    while i < len(text):
        brace = text.find("{", i)
        if brace == -1:
            break
        prelude = text[i:brace]
        # statement at-rules end with ';' and may precede the next block
        if "@" in prelude and ";" in prelude:
            i = i + prelude.rfind(";") + 1
            continue
        end = find_block_end(text, brace)
        selector = " ".join(prelude.split()).lstrip("};").strip()
        if selector and not selector.startswith("@"):
            declarations = parse_declarations(text[brace + 1:end])
            if declarations:  # skip rules with no valid declarations
                rules.append(StyleRule(selector=selector, declarations=declarations))
        i = end + 1
    return StyleSheet(rules=tuple(rules))
