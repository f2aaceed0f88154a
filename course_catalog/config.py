"""Configuration helpers."""

import json
import os
import platform
from pathlib import Path

from .settings import *

KNOWN_KEYS = [
    "DEFAULT_COURSES_FILE",
    "DELIMITER",
    "HEADER_POLICY",
    "UPPERCASE_QUERIES",
    "CLEAR_SCREEN",
    "DRY_RUN",
    "LOG_DIR",
    "LOG_LEVEL",
    "LOG_MAX_BYTES",
    "LOG_BACKUP_COUNT",
]


def get_default_config_dir():
    """
    Get the default config directory for the current operating system.
    - Windows: %APPDATA%\\course_catalog
    - macOS: ~/Library/Application Support/course_catalog
    - Linux: ~/.config/course_catalog
    """
    system = platform.system().lower()
    if system == "windows":
        appdata = os.environ.get("APPDATA", str(Path.home()))
        return os.path.join(appdata, "course_catalog")
    if system == "darwin":  # macOS
        return os.path.join(str(Path.home()), "Library", "Application Support", "course_catalog")
    return os.path.join(str(Path.home()), ".config", "course_catalog")


def get_default_config_path(verbose=False):
    """
    Get the default config file path. The file itself is optional.
    If verbose is True, print details about the chosen path.
    """
    config_path = os.path.join(get_default_config_dir(), "config.json")
    if verbose:
        print(f"[Config] OS detected: {platform.system().lower()}")
        print(f"[Config] Config file path: {config_path}")
        if not os.path.exists(config_path):
            print("[Config] Notice: Config file does not exist. Using defaults.")
    return config_path


def load_config(config_path=None, verbose=False):
    """
    Load configuration from a JSON file and return the known values as a dict.
    If config_path is not provided, loads from the OS-specific default location.
    A missing file is not an error: an empty dict is returned.
    Unreadable or invalid files print a notice and also return an empty dict.
    Unknown keys are ignored.
    """
    if config_path is None:
        config_path = get_default_config_path(verbose=verbose)
    if not os.path.exists(config_path):
        if verbose:
            print(f"[Config] Config file not found at {config_path}. Using defaults.")
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Failed to read config file {config_path}: {e}. Using defaults.")
        return {}
    if not isinstance(config, dict):
        print(f"Notice: Config file {config_path} does not contain a JSON object. Using defaults.")
        return {}

    result = {key: config[key] for key in KNOWN_KEYS if key in config}
    if "HEADER_POLICY" in result and result["HEADER_POLICY"] not in HEADER_POLICIES:
        print(f"Notice: Ignoring unknown HEADER_POLICY {result['HEADER_POLICY']!r} in {config_path}.")
        del result["HEADER_POLICY"]
    if "DELIMITER" in result and not (isinstance(result["DELIMITER"], str) and result["DELIMITER"]):
        print(f"Notice: Ignoring invalid DELIMITER {result['DELIMITER']!r} in {config_path}.")
        del result["DELIMITER"]
    if verbose:
        print(f"[Config] Configuration loaded from {config_path}")
        for k, v in result.items():
            print(f"[Config] {k}: {v}")
    return result


def resolve_settings(config=None, **overrides):
    """
    Merge settings defaults, config values and command-line overrides.
    Overrides set to None are ignored, so unset flags fall through.
    """
    resolved = {
        "DEFAULT_COURSES_FILE": DEFAULT_COURSES_FILE,
        "DELIMITER": DELIMITER,
        "HEADER_POLICY": HEADER_POLICY,
        "UPPERCASE_QUERIES": UPPERCASE_QUERIES,
        "CLEAR_SCREEN": CLEAR_SCREEN,
        "DRY_RUN": DRY_RUN,
        "LOG_DIR": LOG_DIR,
        "LOG_LEVEL": LOG_LEVEL,
        "LOG_MAX_BYTES": LOG_MAX_BYTES,
        "LOG_BACKUP_COUNT": LOG_BACKUP_COUNT,
    }
    resolved.update(config or {})
    resolved.update({k: v for k, v in overrides.items() if v is not None})
    return resolved
