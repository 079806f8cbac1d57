import os

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5 import QtWidgets

from db_notes import open_database


@pytest.fixture(scope="session")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the settings directory at a temp folder and clear env overrides."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("HAVETODO_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("HAVETODO_DB", raising=False)
    monkeypatch.delenv("HAVETODO_LOG_LEVEL", raising=False)
    return config_dir


@pytest.fixture
def conn():
    c = open_database(":memory:")
    yield c
    c.close()
