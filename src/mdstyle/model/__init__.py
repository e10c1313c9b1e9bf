from __future__ import annotations

from mdstyle.model.options import CodeTheme, OutputFormat, RenderOptions
from mdstyle.model.result import ReadingTime, RenderResult, reading_time
from mdstyle.model.theme import Theme, ThemeRecord, generate_theme_id

__all__ = [
    # options
    "CodeTheme",
    "OutputFormat",
    "RenderOptions",
    # result
    "ReadingTime",
    "RenderResult",
    "reading_time",
    # theme
    "Theme",
    "ThemeRecord",
    "generate_theme_id",
]
