from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

WORDS_PER_MINUTE = 200


@dataclass(frozen=True)
class ReadingTime:
    chars: int
    words: int
    minutes: int

    def to_dict(self) -> dict[str, int]:
        return {"chars": self.chars, "words": self.words, "minutes": self.minutes}


@dataclass(frozen=True)
class RenderResult:
    html: str
    reading_time: ReadingTime
    css: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Wire shape: ``css`` is omitted entirely when there is none."""
        data: dict[str, Any] = {"html": self.html}
        if self.css is not None:
            data["css"] = self.css
        data["readingTime"] = self.reading_time.to_dict()
        return data


def reading_time(markdown: str) -> ReadingTime:
    """Estimate reading time from whitespace-delimited words.

    Blank input still counts as a single (empty) word, so ``minutes`` is
    never zero.
    """
    words = len(markdown.strip().split()) or 1
    return ReadingTime(
        chars=len(markdown),
        words=words,
        minutes=math.ceil(words / WORDS_PER_MINUTE),
    )
