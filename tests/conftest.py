# Add project root to sys.path for module imports
import os, sys
import pytest
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from core.navigation import Navigation


@pytest.fixture
def navigation():
    """Fresh Navigation registry that loads nothing; current URL is the site root."""
    return Navigation(current_url=lambda: "http://localhost/")


@pytest.fixture
def settings_file(monkeypatch, tmp_path):
    """Point core.settings_loader at a temporary settings.yaml written by the test."""
    import core.settings_loader as settings_loader

    path = tmp_path / "settings.yaml"

    def write(content: str) -> Path:
        path.write_text(content)
        settings_loader.reload_settings()
        return path

    monkeypatch.setattr(settings_loader, "SETTINGS_FILE", path)
    settings_loader.reload_settings()
    yield write
    settings_loader.reload_settings()


@pytest.fixture
def app():
    """Flask app built by the factory, in testing mode."""
    from app import create_app

    test_app = create_app({"TESTING": True, "SECRET_KEY": "test_secret_key"})
    return test_app


@pytest.fixture
def client(app):
    """Flask test client fixture."""
    with app.test_client() as client:
        yield client
