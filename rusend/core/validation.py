"""Minimal input validation helpers."""

import argparse
from typing import List, Optional


def parse_addresses(value: Optional[str]) -> List[str]:
    """Split a comma separated address string.

    Segments are trimmed and empty segments dropped, so
    ``"a@x.com, b@y.com ,,c@z.com"`` gives three addresses.
    """
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def positive_int(value: str) -> int:
    """argparse ``type=`` for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}")

    if number < 1:
        raise argparse.ArgumentTypeError(f"count must be at least 1, got {number}")

    return number
