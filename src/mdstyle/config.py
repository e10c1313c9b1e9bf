from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path

from mdstyle.errors import ConfigurationError

logger = logging.getLogger(__name__)

PLACEHOLDER_API_KEY = "your-api-key-here"

API_KEY_HEADER = "X-API-Key"


@dataclass(frozen=True)
class MdStyleConfig:
    themes_dir: str = "themes"
    config_path: str = "config.json"  # JSON file holding {"apiKeys": [...]}
    host: str = "127.0.0.1"
    port: int = 3000
    api_key_refresh_seconds: float = 60.0
    max_theme_bytes: int = 1024 * 1024
    max_request_bytes: int = 10 * 1024 * 1024

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> MdStyleConfig:
        """Build a config from ``MDSTYLE_*`` environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()
        try:
            return cls(
                themes_dir=env.get("MDSTYLE_THEMES_DIR", defaults.themes_dir),
                config_path=env.get("MDSTYLE_CONFIG", defaults.config_path),
                host=env.get("MDSTYLE_HOST", defaults.host),
                port=int(env.get("MDSTYLE_PORT", defaults.port)),
                api_key_refresh_seconds=float(
                    env.get("MDSTYLE_API_KEY_REFRESH", defaults.api_key_refresh_seconds)
                ),
            )
        except ValueError as exc:
            raise ConfigurationError(f"Invalid environment setting: {exc}", cause=exc) from exc


class ApiKeyCache:
    """Set of accepted API keys, reloaded from a JSON config file.

    An empty key set means development mode: any key is accepted.
    The set is replaced atomically under a lock so request threads always
    see a complete snapshot.
    """

    def __init__(self, config_path: str | Path | None = None, keys: set[str] | None = None) -> None:
        self._path = Path(config_path) if config_path is not None else None
        self._lock = threading.Lock()
        self._keys: frozenset[str] = frozenset(keys or ())
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def keys(self) -> frozenset[str]:
        with self._lock:
            return self._keys

    @property
    def is_open(self) -> bool:
        """True when no keys are configured."""
        return not self.keys

    def is_allowed(self, key: str | None) -> bool:
        """Check a presented key. A missing key is never allowed."""
        if not key:
            return False
        keys = self.keys
        return not keys or key in keys

    def refresh(self) -> frozenset[str]:
        """Reload keys from the config file and return the new set."""
        keys = _load_api_keys(self._path) if self._path is not None else frozenset()
        with self._lock:
            self._keys = keys
        return keys

    # --- scheduling -----------------------------------------------------------

    def start(self, interval: float) -> None:
        """Refresh now, then every *interval* seconds on a daemon thread."""
        self.refresh()
        if self._thread is not None:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run, args=(interval,), name="api-key-refresh", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop the background refresh thread, if running."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=1.0)
            self._thread = None

    def _run(self, interval: float) -> None:
        while not self._stop.wait(interval):
            self.refresh()


def _load_api_keys(path: Path) -> frozenset[str]:
    if not path.exists():
        logger.warning("API key config not found: %s", path)
        return frozenset()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Failed to load API key config %s: %s", path, exc)
        return frozenset()
    raw = data.get("apiKeys", []) if isinstance(data, dict) else []
    keys = frozenset(
        k for k in raw if isinstance(k, str) and k and k != PLACEHOLDER_API_KEY
    )
    logger.info("Loaded %d valid API key(s) from %s", len(keys), path)
    return keys
