"""Main CLI entry point - simplified to use router."""

import asyncio
import sys
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape

from rusend.utils.console import get_console, get_error_console
from rusend.utils.errors import RusendError
from rusend.utils.logging import async_log_call, get_logger, set_log_level

from .cli_parser import setup_argument_parser
from .router import CommandRouter

logger = get_logger(__name__)


def _args_to_dict(args) -> Dict[str, Any]:
    """Convert argparse Namespace to dictionary."""
    result = {}
    for key, value in vars(args).items():
        if key not in ("command", "verbose") and value is not None:
            result[key] = value
    return result


@async_log_call
async def dispatch_command(
    args,
    console: Optional[Console] = None,
    router: Optional[CommandRouter] = None,
    error_console: Optional[Console] = None,
) -> int:
    """Dispatch command via router.

    Args:
        args: Parsed arguments
        console: Rich console for normal output
        router: Router to use (built from the consoles when omitted)
        error_console: Rich console for failures

    Returns:
        Exit code (0 = success, 1 = error)
    """
    error_console = error_console or get_error_console()
    command = args.command

    try:
        router = router or CommandRouter(console, error_console=error_console)
        success = await router.route(command, _args_to_dict(args))

        return 0 if success else 1

    except RusendError as e:
        logger.info(f"Command '{command}' failed: {e.message}", extra={"context": e.to_dict()})
        error_console.print(f"[red]Error:[/red] {escape(e.message)}", highlight=False)
        return 1

    except ValueError as e:
        logger.info(f"Invalid command: {e}")
        error_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        return 1

    except Exception as e:
        logger.exception(f"Command '{command}' failed unexpectedly: {e}")
        error_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}", highlight=False)
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code
    """
    console = get_console()
    error_console = get_error_console()

    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level("DEBUG")

    try:
        return asyncio.run(dispatch_command(args, console, error_console=error_console))

    except KeyboardInterrupt:
        error_console.print("\n[yellow]Interrupted by user[/yellow]")
        return 130  # Standard SIGINT exit code


if __name__ == "__main__":
    sys.exit(main())
