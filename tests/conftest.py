import pytest


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    """Point the per-user config directory at an empty temp dir."""
    home = tmp_path / "xdg"
    home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    monkeypatch.setenv("APPDATA", str(home))
    return home
