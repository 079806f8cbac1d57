"""
main.py
Entry point for the Have to do application. Sets up logging and crash
diagnostics, opens the notes database, seeds it on first run and shows the main
window.
"""
import argparse
import logging
import os
import sqlite3
import sys
import warnings
from logging.handlers import RotatingFileHandler
from typing import Optional

from PyQt5 import QtWidgets

from services.notes import NoteController
from settings_manager import get_db_path, get_log_level, get_settings_dir
from ui_main_window import MainWindow

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(log_dir: str, level: str = "INFO") -> Optional[str]:
    """Send log records to a rotating havetodo.log in log_dir and to stderr."""
    log_path = os.path.join(log_dir, "havetodo.log")
    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT)
    try:
        file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    except OSError:
        log_path = None
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)
    return log_path


def _running_app():
    return QtWidgets.QApplication.instance()


def _show_crash_dialog(msg: str):
    QtWidgets.QMessageBox.critical(None, "Unexpected Error", msg)


def _install_global_excepthook(log_dir: str):
    """Install a sys.excepthook that logs the traceback, appends it to crash.log and shows a dialog.

    Database failures (store unavailable or corrupt) end up here and are fatal.
    """
    import traceback as _traceback

    def _handler(exctype, value, tb):
        msg = "".join(_traceback.format_exception(exctype, value, tb))
        logger.critical("Unhandled exception\n%s", msg)
        try:
            with open(os.path.join(log_dir, "crash.log"), "a", encoding="utf-8") as _f:
                _f.write("\n=== Unhandled exception ===\n")
                _f.write(msg)
        except OSError:
            pass
        app = _running_app()
        if app is not None:
            _show_crash_dialog(msg)
        if issubclass(exctype, sqlite3.Error):
            # Store unavailable or corrupt: no recovery path
            if app is not None:
                app.exit(1)
            else:
                sys.exit(1)

    sys.excepthook = _handler


def _enable_faulthandler(log_path: str):
    """Dump native crash backtraces for all threads to log_path."""
    import faulthandler as _faulthandler

    try:
        f = open(log_path, "a", encoding="utf-8")
    except OSError:
        return
    # Keep a global reference so the file handle stays open for the lifetime of the app
    globals()["_native_crash_log_file"] = f
    _faulthandler.enable(all_threads=True, file=f)


def _install_qt_message_handler():
    """Route Qt warnings/errors into the application log."""
    from PyQt5.QtCore import QtMsgType, qInstallMessageHandler

    qt_logger = logging.getLogger("qt")
    level_map = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }

    def _qt_handler(msg_type, context, message):
        file = getattr(context, "file", None)
        line = getattr(context, "line", None)
        if file:
            qt_logger.log(level_map.get(msg_type, logging.WARNING), "%s (at %s:%s)", message, file, line)
        else:
            qt_logger.log(level_map.get(msg_type, logging.WARNING), "%s", message)

    qInstallMessageHandler(_qt_handler)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="have-to-do", description="A small to-do note list.")
    parser.add_argument("--db", help="Path to the notes database (default: from settings)")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Logging level (default: from settings)",
    )
    return parser.parse_known_args(argv)


def main(argv=None):
    args, qt_args = parse_args(argv)
    # Suppress noisy SIP deprecation warning from PyQt5 about sipPyTypeDict
    warnings.filterwarnings("ignore", category=DeprecationWarning, message=".*sipPyTypeDict.*")

    log_dir = get_settings_dir()
    log_path = configure_logging(log_dir, args.log_level or get_log_level())
    _install_global_excepthook(log_dir)
    _enable_faulthandler(os.path.join(log_dir, "native_crash.log"))

    app = QtWidgets.QApplication([sys.argv[0]] + qt_args)
    _install_qt_message_handler()
    logger.info("Starting Have to do (log file: %s)", log_path)

    db_path = args.db or get_db_path()
    controller = NoteController.from_path(db_path)
    controller.start()
    app.aboutToQuit.connect(controller.close)

    window = MainWindow(controller)
    window.restore_geometry_from_settings()
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
