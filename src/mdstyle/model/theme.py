from __future__ import annotations

import secrets
import string
from dataclasses import dataclass
from typing import Any

_ID_ALPHABET = string.ascii_letters + string.digits + "_-"


def generate_theme_id() -> str:
    """Return a fresh ``theme_`` id with 8 URL-safe random characters."""
    return "theme_" + "".join(secrets.choice(_ID_ALPHABET) for _ in range(8))


@dataclass(frozen=True)
class ThemeRecord:
    id: str
    name: str
    created_at: str  # ISO 8601
    updated_at: str  # ISO 8601

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ThemeRecord:
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            created_at=data.get("createdAt", ""),
            updated_at=data.get("updatedAt", ""),
        )


@dataclass(frozen=True)
class Theme:
    """A stored theme: its metadata record plus the stylesheet text."""

    record: ThemeRecord
    css: str
