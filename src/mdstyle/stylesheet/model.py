"""Stylesheet model: Declaration, StyleRule, and StyleSheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair, optionally ``!important``."""

    property: str
    value: str
    important: bool = False

    def to_css(self) -> str:
        suffix = " !important" if self.important else ""
        return f"{self.property}: {self.value}{suffix}"


@dataclass(frozen=True)
class StyleRule:
    """A selector (possibly a comma-separated group) and its declarations."""

    selector: str
    declarations: tuple[Declaration, ...]

    def to_css(self) -> str:
        body = "; ".join(d.to_css() for d in self.declarations)
        return f"{self.selector} {{ {body}; }}"


@dataclass(frozen=True)
class StyleSheet:
    """An ordered collection of style rules. Source order is cascade order."""

    rules: tuple[StyleRule, ...]

    def selectors(self) -> list[str]:
        return [rule.selector for rule in self.rules]
