"""Centralised console management module"""

from io import StringIO
from typing import Optional

from rich.console import Console

_console: Optional[Console] = None
_error_console: Optional[Console] = None


def get_console() -> Console:
    """Get the shared stdout Console instance"""
    global _console

    if _console is None:
        _console = Console()

    return _console


def get_error_console() -> Console:
    """Get the shared stderr Console instance"""
    global _error_console

    if _error_console is None:
        _error_console = Console(stderr=True)

    return _error_console


def get_buffer_console(width: int = 200) -> tuple[Console, StringIO]:
    """Get a Console that writes plain text into a buffer"""
    buffer = StringIO()

    console = Console(
        file=buffer,
        force_terminal=False,
        color_system=None,
        width=width,
        legacy_windows=False,
    )

    return console, buffer
