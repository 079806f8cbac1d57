import sqlite3
import sys

import pytest

import main


class _FakeApp:
    def __init__(self):
        self.exit_codes = []

    def exit(self, code=0):
        self.exit_codes.append(code)


def _raise_and_hook(exc):
    try:
        raise exc
    except Exception:
        sys.excepthook(*sys.exc_info())


@pytest.fixture
def hook(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    dialogs = []
    monkeypatch.setattr(main, "_show_crash_dialog", dialogs.append)
    main._install_global_excepthook(str(tmp_path))
    return dialogs


def test_store_failure_ends_event_loop(hook, monkeypatch, tmp_path):
    app = _FakeApp()
    monkeypatch.setattr(main, "_running_app", lambda: app)

    _raise_and_hook(sqlite3.DatabaseError("database disk image is malformed"))

    assert app.exit_codes == [1]
    assert len(hook) == 1
    assert "database disk image is malformed" in (tmp_path / "crash.log").read_text(encoding="utf-8")


def test_store_failure_without_app_exits_process(hook, monkeypatch):
    monkeypatch.setattr(main, "_running_app", lambda: None)

    with pytest.raises(SystemExit) as excinfo:
        _raise_and_hook(sqlite3.OperationalError("unable to open database file"))

    assert excinfo.value.code == 1
    assert hook == []


def test_other_errors_keep_running(hook, monkeypatch):
    app = _FakeApp()
    monkeypatch.setattr(main, "_running_app", lambda: app)

    _raise_and_hook(ValueError("bad value"))

    assert app.exit_codes == []
    assert len(hook) == 1


def test_configure_logging_returns_log_path(tmp_path, monkeypatch):
    import logging

    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    log_path = main.configure_logging(str(tmp_path), "DEBUG")

    assert log_path == str(tmp_path / "havetodo.log")
    for handler in root.handlers:
        handler.close()
