"""Base protocol for stylesheet transforms."""

from __future__ import annotations

from typing import Protocol


class Transform(Protocol):
    """A stylesheet-text to stylesheet-text rewrite step."""

    def apply(self, css: str) -> str: ...
