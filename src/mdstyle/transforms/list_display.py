"""List display patch: restores ``display: list-item`` inside ``li`` rules.

Some themes set ``li { display: block }``, which hides bullets and numbers.
Each ``display: block`` is rewritten when the text just before it opens an
``li {`` rule that has not been closed yet.

Known approximation: only a fixed window of text before the declaration is
inspected. A long ``li`` rule body (or a group such as ``ul li, ol li``
followed by unrelated rules inside the window) can be misclassified. This
is a lookback heuristic, not a CSS parser.
"""

from __future__ import annotations

import re

__all__ = ["ListDisplayTransform", "patch_list_display", "LOOKBACK_CHARS"]

LOOKBACK_CHARS = 50

_DISPLAY_BLOCK_RE = re.compile(r"display\s*:\s*block", re.IGNORECASE)

_OPEN_LI_RE = re.compile(r"li\s*\{[^}]*$", re.IGNORECASE)


def patch_list_display(css: str) -> str:
    """Rewrite ``display: block`` to ``display: list-item`` in ``li`` rule bodies."""

    def replace(match: re.Match[str]) -> str:
        before = css[max(0, match.start() - LOOKBACK_CHARS):match.start()]
        if _OPEN_LI_RE.search(before):
            return "display: list-item"
        return match.group(0)

    return _DISPLAY_BLOCK_RE.sub(replace, css)


class ListDisplayTransform:
    """Keep list markers visible when a theme turns ``li`` into blocks."""

    def apply(self, css: str) -> str:
        return patch_list_display(css)
