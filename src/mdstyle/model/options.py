from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class CodeTheme(StrEnum):
    GITHUB = "github"
    GITHUB_DARK = "github-dark"
    VS = "vs"
    VS2015 = "vs2015"
    ATOM_ONE_DARK = "atom-one-dark"
    ATOM_ONE_LIGHT = "atom-one-light"

    @classmethod
    def parse(cls, value: str | None) -> CodeTheme:
        """Return the matching theme, falling back to ``github-dark``."""
        try:
            return cls(value)
        except ValueError:
            return cls.GITHUB_DARK


class OutputFormat(StrEnum):
    WECHAT = "wechat"  # inline styles only
    HTML = "html"  # embedded <style> block
    HTML_PLAIN = "html-plain"  # html and css returned separately


@dataclass(frozen=True)
class RenderOptions:
    cite_status: bool = False  # placeholder
    count_status: bool = False  # placeholder
    is_mac_code_block: bool = False
    is_show_line_number: bool = False  # placeholder
    legend: str = ""  # placeholder
    code_theme: CodeTheme = CodeTheme.GITHUB_DARK

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> RenderOptions:
        """Build options from the camelCase request payload."""
        data = data or {}
        return cls(
            cite_status=bool(data.get("citeStatus", False)),
            count_status=bool(data.get("countStatus", False)),
            is_mac_code_block=bool(data.get("isMacCodeBlock", False)),
            is_show_line_number=bool(data.get("isShowLineNumber", False)),
            legend=str(data.get("legend") or ""),
            code_theme=CodeTheme.parse(data.get("codeTheme")),
        )
