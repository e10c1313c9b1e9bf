"""mdstyle: Markdown to platform-safe, inline-styled HTML."""
from __future__ import annotations

from mdstyle.config import MdStyleConfig
from mdstyle.model import CodeTheme, OutputFormat, RenderOptions, RenderResult
from mdstyle.renderer import render

__all__ = [
    "CodeTheme",
    "MdStyleConfig",
    "OutputFormat",
    "RenderOptions",
    "RenderResult",
    "render",
]
