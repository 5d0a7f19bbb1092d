import pytest

from discflight.utils.config import Config


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the Config singleton at a temporary directory."""
    app_dir = tmp_path / ".discflight"
    monkeypatch.setattr(Config, "_APP_DIR", app_dir)
    monkeypatch.setattr(Config, "_CONFIG_FILE", app_dir / "config.json")
    monkeypatch.setattr(Config, "_instance", None)
    return app_dir / "config.json"
