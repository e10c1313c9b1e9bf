from __future__ import annotations

import pytest

from mdstyle.config import ApiKeyCache, MdStyleConfig
from mdstyle.store.themes import ThemeStore
from mdstyle.web.app import create_app

API_KEY = "test-key"


@pytest.fixture
def store(tmp_path):
    """Theme store rooted in a fresh temporary directory."""
    return ThemeStore(tmp_path / "themes")


@pytest.fixture
def config(tmp_path):
    return MdStyleConfig(
        themes_dir=str(tmp_path / "themes"),
        config_path=str(tmp_path / "config.json"),
    )


@pytest.fixture
def app(config, store):
    """Create a Flask app that accepts only ``API_KEY``."""
    application = create_app(config=config, store=store, api_keys=ApiKeyCache(keys={API_KEY}))
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def open_client(config, store):
    """Test client for an app with no API keys configured (development mode)."""
    application = create_app(config=config, store=store, api_keys=ApiKeyCache())
    application.config["TESTING"] = True
    return application.test_client()


@pytest.fixture
def auth_headers():
    return {"X-API-Key": API_KEY}
