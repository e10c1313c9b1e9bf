from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from datetime import datetime, timezone
from pathlib import Path

from mdstyle.errors import InvalidThemeError
from mdstyle.model.theme import Theme, ThemeRecord, generate_theme_id
from mdstyle.stylesheet import parse_stylesheet

logger = logging.getLogger(__name__)

METADATA_FILE = "metadata.json"


class ThemeStore:
    """On-disk theme storage.

    One directory holds ``metadata.json`` (theme id -> record) and one
    ``{id}.css`` file per theme. Themes are created and deleted, never
    updated in place.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)
        self._lock = threading.Lock()

    @property
    def root(self) -> Path:
        return self._root

    def _css_path(self, theme_id: str) -> Path:
        return self._root / f"{theme_id}.css"

    def _load_metadata(self) -> dict[str, ThemeRecord]:
        path = self._root / METADATA_FILE
        if not path.exists():
            return {}
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read %s: %s", path, exc)
            return {}
        return {tid: ThemeRecord.from_dict({"id": tid, **raw}) for tid, raw in data.items()}

    def _save_metadata(self, records: dict[str, ThemeRecord]) -> None:
        """Replace ``metadata.json`` in one step.

        Readers take no lock, so they must only ever see the old file or the
        complete new one.
        """
        self._root.mkdir(parents=True, exist_ok=True)
        payload = {tid: record.to_dict() for tid, record in records.items()}
        fd, tmp_path = tempfile.mkstemp(dir=self._root, prefix=".metadata-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self._root / METADATA_FILE)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def save(self, name: str, css: str) -> ThemeRecord:
        """Store a new theme and return its record.

        Raises InvalidThemeError if *css* contains no usable rules.
        """
        if not parse_stylesheet(css).rules:
            raise InvalidThemeError("Theme contains no CSS rules")
        now = datetime.now(timezone.utc).isoformat()
        record = ThemeRecord(id=generate_theme_id(), name=name, created_at=now, updated_at=now)
        with self._lock:
            self._root.mkdir(parents=True, exist_ok=True)
            self._css_path(record.id).write_text(css, encoding="utf-8")
            records = self._load_metadata()
            records[record.id] = record
            self._save_metadata(records)
        logger.info("Saved theme %s (%s)", record.id, name)
        return record

    def list_all(self) -> tuple[ThemeRecord, ...]:
        """List theme records, newest first."""
        records = self._load_metadata().values()
        return tuple(sorted(records, key=lambda r: r.created_at, reverse=True))

    def get(self, theme_id: str) -> Theme | None:
        """Retrieve a theme by ID, or None if not found."""
        record = self._load_metadata().get(theme_id)
        if record is None:
            return None
        try:
            css = self._css_path(theme_id).read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to read CSS for theme %s: %s", theme_id, exc)
            return None
        return Theme(record=record, css=css)

    def exists(self, theme_id: str) -> bool:
        return theme_id in self._load_metadata()

    def delete(self, theme_id: str) -> bool:
        """Delete a theme. Returns False if it did not exist."""
        with self._lock:
            records = self._load_metadata()
            if theme_id not in records:
                return False
            del records[theme_id]
            self._save_metadata(records)
            self._css_path(theme_id).unlink(missing_ok=True)
        logger.info("Deleted theme %s", theme_id)
        return True
