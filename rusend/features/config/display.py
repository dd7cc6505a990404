"""Config display coordinator (uses shared UI components)."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from rusend.ui.components import ConfigPanel, StatusMessage
from rusend.utils.config_manager import AppConfig


class ConfigDisplay:
    """Coordinates display for the config feature."""

    def __init__(self, console: Optional[Console] = None, error_console: Optional[Console] = None):
        self.panel = ConfigPanel(console)
        self.message = StatusMessage(console, error_console)

    def show_saved(self, config: AppConfig, path: Path) -> None:
        self.message.success("Configuration saved.")
        self.panel.display([
            ("API key:", config.masked_api_key()),
            ("Default from:", config.default_from or "(not set)"),
            ("Default to:", config.default_to or "(not set)"),
            ("File:", str(path)),
        ])

    def show_reset_warning(self, reason: str) -> None:
        self.message.warning(f"{reason}; starting from an empty configuration")
