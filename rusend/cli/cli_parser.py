"""Argument parser configuration for rusend"""

import argparse

from rusend import __version__
from rusend.core.validation import positive_int
from rusend.features.completions.generator import SUPPORTED_SHELLS
from rusend.features.view import DEFAULT_LIST_COUNT


## Argument Adding Utilities

def add_count_argument(parser: argparse.ArgumentParser) -> None:
    """Add the optional positional count for list commands."""

    parser.add_argument(
        "count",
        nargs="?",
        type=positive_int,
        default=DEFAULT_LIST_COUNT,
        metavar="COUNT",
        help=f"Number of emails to display (default: {DEFAULT_LIST_COUNT})"
    )

def add_optional_id_argument(parser: argparse.ArgumentParser) -> None:
    """Add an optional email id; the newest email is used when omitted."""

    parser.add_argument(
        "id",
        nargs="?",
        help="Email ID (default: the most recent email)"
    )


## Command Setup Functions

def setup_config_command(subparsers) -> None:
    """Setup the config command."""

    config_parser = subparsers.add_parser(
        "config",
        help="Save your API key and default addresses",
        description="Save your API key (prompted for if not given and not stored) "
                    "and default from/to addresses"
    )
    config_parser.add_argument(
        "-k", "--key",
        help="Set the API key (if omitted and none is stored, you will be prompted)"
    )
    config_parser.add_argument(
        "--default-from",
        help="Default From header used when send has no --from"
    )
    config_parser.add_argument(
        "--default-to",
        help="Default recipients (comma separated) used when send has no --to"
    )

def setup_send_commands(subparsers) -> None:
    """Setup send and batch commands."""

    send_parser = subparsers.add_parser(
        "send",
        help="Send one email (body from --html, --text, stdin, or a forwarded email)",
        description="Send one email. Body comes from --id (forward), --from-stdin, "
                    "--html or --text, in that order"
    )
    send_parser.add_argument(
        "-f", "--from",
        dest="sender",
        help='From header, e.g. "Acme <no-reply@acme.com>" (default: configured default)'
    )
    send_parser.add_argument(
        "-t", "--to",
        help="Recipients, comma separated (default: configured default)"
    )
    send_parser.add_argument(
        "-s", "--subject",
        help="Subject (required unless forwarding with --id)"
    )
    send_parser.add_argument(
        "--html",
        help="Provide HTML body inline"
    )
    send_parser.add_argument(
        "--text",
        help="Provide plain text body inline"
    )
    send_parser.add_argument(
        "--from-stdin",
        action="store_true",
        help="Read the (HTML) body from standard input"
    )
    send_parser.add_argument(
        "--id",
        dest="forward_id",
        help="Forward the received email with this ID"
    )
    send_parser.add_argument(
        "--cc",
        help="Cc recipients, comma separated"
    )
    send_parser.add_argument(
        "--bcc",
        help="Bcc recipients, comma separated"
    )
    send_parser.add_argument(
        "--reply-to",
        help="Reply-To addresses, comma separated"
    )
    send_parser.add_argument(
        "--scheduled-at",
        help='Schedule delivery, e.g. "in 1 hour" or an ISO 8601 timestamp'
    )

    batch_parser = subparsers.add_parser(
        "batch",
        help="Send a batch using a JSON file with an array of messages",
        description="Send every message in a JSON array file as one batch request"
    )
    batch_parser.add_argument(
        "file",
        metavar="FILE",
        help="JSON file: [{\"from\", \"to\": [...], \"subject\", \"html\"?, \"text\"?}, ...]"
    )

def setup_sent_commands(subparsers) -> None:
    """Setup list, get, update and cancel for sent emails."""

    list_parser = subparsers.add_parser(
        "list",
        help="List sent emails",
    )
    add_count_argument(list_parser)

    get_parser = subparsers.add_parser(
        "get",
        help="Get a single sent email (the most recent if no id is given)",
    )
    add_optional_id_argument(get_parser)

    update_parser = subparsers.add_parser(
        "update",
        help="Update a scheduled email",
    )
    update_parser.add_argument("id", help="Email ID")
    update_parser.add_argument(
        "-s", "--scheduled-at",
        help="New delivery time"
    )

    cancel_parser = subparsers.add_parser(
        "cancel",
        help="Cancel a scheduled email",
    )
    cancel_parser.add_argument("id", help="Email ID")

def setup_received_commands(subparsers) -> None:
    """Setup inbox commands."""

    received_list_parser = subparsers.add_parser(
        "received-list",
        help="List received emails (inbox)",
    )
    add_count_argument(received_list_parser)

    received_get_parser = subparsers.add_parser(
        "received-get",
        help="Get a received email (the most recent if no id is given)",
    )
    add_optional_id_argument(received_get_parser)

def setup_completions_command(subparsers) -> None:
    """Setup the completions command."""

    completions_parser = subparsers.add_parser(
        "completions",
        help="Print a shell completion script",
    )
    completions_parser.add_argument(
        "shell",
        choices=SUPPORTED_SHELLS,
        help="Target shell"
    )


## Main Parser Setup

def setup_argument_parser() -> argparse.ArgumentParser:
    """Setup the main argument parser for the rusend CLI."""

    parser = argparse.ArgumentParser(
        prog="rusend",
        description="A small user-friendly CLI for resend.com",
        epilog="Use 'rusend <command> --help' for command-specific help."
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"rusend {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging on stderr"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        help="Command to execute"
    )

    setup_config_command(subparsers)
    setup_send_commands(subparsers)
    setup_sent_commands(subparsers)
    setup_received_commands(subparsers)
    setup_completions_command(subparsers)

    return parser
