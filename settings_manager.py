"""
settings_manager.py
Manages loading and saving application settings (database location, window
geometry, list preview length, log level) in a JSON file.
"""

import json
import os
import sys

# --- Settings file location strategy ---
# Settings live in a per-user configuration directory:
#
# Windows: %LOCALAPPDATA%/HaveToDo/settings.json
# Other platforms:
#   - macOS: ~/Library/Application Support/HaveToDo/settings.json
#   - Linux/other: ~/.config/HaveToDo/settings.json
#
# HAVETODO_CONFIG_DIR replaces the directory entirely (portable installs, tests).

APP_DIR_NAME = "HaveToDo"
_SETTINGS_BASENAME = "settings.json"
_DB_BASENAME = "Note.db"

DEFAULT_PREVIEW_LINES = 3
DEFAULT_LOG_LEVEL = "INFO"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _default_settings_dir() -> str:
    """Return the platform-specific default settings directory."""
    override = os.environ.get("HAVETODO_CONFIG_DIR")
    if override:
        return os.path.abspath(override)
    if os.name == "nt":  # Windows
        base = os.environ.get("LOCALAPPDATA") or os.path.expanduser("~")
        return os.path.join(base, APP_DIR_NAME)
    elif sys.platform == "darwin":  # macOS
        return os.path.join(os.path.expanduser("~"), "Library", "Application Support", APP_DIR_NAME)
    else:  # Linux / other Unix
        return os.path.join(os.path.expanduser("~"), ".config", APP_DIR_NAME)


def get_settings_dir() -> str:
    """Return the settings directory, creating it if needed."""
    d = _default_settings_dir()
    try:
        os.makedirs(d, exist_ok=True)
    except OSError:
        pass
    return d


def get_settings_file_path() -> str:
    return os.path.join(get_settings_dir(), _SETTINGS_BASENAME)


def load_settings():
    path = get_settings_file_path()
    try:
        if os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
                if isinstance(data, dict):
                    return data
    except (OSError, ValueError):
        pass
    return {}


def save_settings(settings):
    path = get_settings_file_path()
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(settings, f, indent=2)
    except OSError:
        pass


# --- Database location ---
def get_db_path() -> str:
    """Database file: HAVETODO_DB, then the saved setting, then Note.db in the settings dir."""
    env_path = os.environ.get("HAVETODO_DB")
    if env_path:
        return env_path
    val = load_settings().get("db_path")
    if val and isinstance(val, str):
        return val
    return os.path.join(get_settings_dir(), _DB_BASENAME)


def set_db_path(db_path: str):
    if not isinstance(db_path, str) or not db_path:
        return
    s = load_settings()
    s["db_path"] = db_path
    save_settings(s)


# --- Window state ---
def get_window_geometry():
    s = load_settings()
    geom = s.get("window_geometry")  # dict with x, y, w, h
    if isinstance(geom, dict) and all(k in geom for k in ("x", "y", "w", "h")):
        return geom
    return None


def set_window_geometry(x, y, w, h):
    s = load_settings()
    s["window_geometry"] = {"x": int(x), "y": int(y), "w": int(w), "h": int(h)}
    save_settings(s)


def get_window_maximized():
    s = load_settings()
    return bool(s.get("window_maximized", False))


def set_window_maximized(is_maximized: bool):
    s = load_settings()
    s["window_maximized"] = bool(is_maximized)
    save_settings(s)


# --- List screen ---
def get_preview_lines() -> int:
    """Number of content lines shown on a note card (1..20)."""
    s = load_settings()
    try:
        val = int(s.get("preview_lines", DEFAULT_PREVIEW_LINES))
    except (TypeError, ValueError):
        return DEFAULT_PREVIEW_LINES
    return max(1, min(20, val))


def set_preview_lines(lines: int):
    s = load_settings()
    s["preview_lines"] = max(1, min(20, int(lines)))
    save_settings(s)


# --- Logging ---
def get_log_level() -> str:
    val = os.environ.get("HAVETODO_LOG_LEVEL") or load_settings().get("log_level") or DEFAULT_LOG_LEVEL
    val = str(val).upper()
    return val if val in _LOG_LEVELS else DEFAULT_LOG_LEVEL
