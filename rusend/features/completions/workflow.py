"""Completion output."""

import argparse
import sys
from typing import Optional, TextIO

from rusend.utils.logging import get_logger

from .generator import generate_completion

logger = get_logger(__name__)


async def print_completions(
    shell: str,
    parser: Optional[argparse.ArgumentParser] = None,
    stream: Optional[TextIO] = None,
) -> bool:
    """Write the completion script for ``shell``.

    Written straight to the stream; a rich console would wrap long lines.
    """
    if parser is None:
        from rusend.cli.cli_parser import setup_argument_parser

        parser = setup_argument_parser()

    script = generate_completion(parser, shell)
    out = stream if stream is not None else sys.stdout
    out.write(script)
    out.flush()
    logger.debug(f"Wrote {shell} completion script ({len(script)} characters)")
    return True
