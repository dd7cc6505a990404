"""Centralized path definitions for rusend.

The configuration directory follows the platform convention for vendor
"resend" and application "rusend". ``RUSEND_CONFIG_DIR`` overrides it.
"""

import os
import sys
from pathlib import Path

CONFIG_DIR_ENV = "RUSEND_CONFIG_DIR"

VENDOR = "resend"
APPLICATION = "rusend"
CREDENTIALS_FILENAME = "credentials"


def get_config_dir() -> Path:
    """Return the user-specific configuration directory (not created)."""

    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()

    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        return base / VENDOR / APPLICATION / "config"

    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / f"com.{VENDOR}.{APPLICATION}"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / APPLICATION


def get_credentials_path() -> Path:
    return get_config_dir() / CREDENTIALS_FILENAME


def get_logs_dir() -> Path:
    return get_config_dir() / "logs"
