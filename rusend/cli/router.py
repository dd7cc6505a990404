"""Routes CLI commands to feature modules."""

from pathlib import Path
from typing import Any, Callable, Dict, Optional, TextIO

from rich.console import Console

from rusend.core.client import ResendClient
from rusend.core.models import EmailKind
from rusend.features.completions import print_completions
from rusend.features.config import configure
from rusend.features.manage import cancel_email, update_email
from rusend.features.send import SendOptions, send_batch, send_email
from rusend.features.view import DEFAULT_LIST_COUNT, list_emails, view_email
from rusend.utils.config_manager import AppConfig, ConfigStore
from rusend.utils.errors import MissingCredentialsError, error_context
from rusend.utils.logging import async_log_call, get_logger

logger = get_logger(__name__)

ClientFactory = Callable[[str], ResendClient]


class CommandRouter:
    """Routes commands to appropriate feature workflows.

    Everything a handler touches (config store, client factory, prompt,
    stdin, consoles) is injected so commands can run against fakes.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        store: Optional[ConfigStore] = None,
        client_factory: Optional[ClientFactory] = None,
        error_console: Optional[Console] = None,
        prompt: Optional[Callable[[str], Optional[str]]] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.console = console
        self.error_console = error_console
        self.store = store or ConfigStore()
        self.client_factory = client_factory or ResendClient
        self.prompt = prompt
        self.stdin = stdin
        self.stdout = stdout

    @async_log_call
    async def route(self, command: str, args: Optional[Dict[str, Any]] = None) -> bool:
        """Route command to feature.

        Args:
            command: Command name
            args: Parsed arguments dictionary

        Returns:
            True if command executed successfully

        Raises:
            ValueError: If command is unknown
        """
        if args is None:
            args = {}

        handler = self._get_handler(command)
        if not handler:
            raise ValueError(f"Unknown command: {command}")

        return await handler(args)

    def _get_handler(self, command: str) -> Optional[Callable]:
        handlers = {
            'config': self._handle_config,
            'send': self._handle_send,
            'batch': self._handle_batch,
            'list': self._handle_list,
            'get': self._handle_get,
            'update': self._handle_update,
            'cancel': self._handle_cancel,
            'received-list': self._handle_received_list,
            'received-get': self._handle_received_get,
            'completions': self._handle_completions,
        }
        return handlers.get(command)


    # Authenticated command setup

    def _load_config(self) -> AppConfig:
        """Load config once; an API key is required from here on."""
        with error_context("load configuration"):
            config = self.store.load()

        if not config.has_api_key():
            raise MissingCredentialsError(
                "API key not configured (have you run `rusend config`?)"
            )

        return config

    def _client(self, config: AppConfig) -> ResendClient:
        return self.client_factory(config.api_key)


    # Config command

    async def _handle_config(self, args: Dict[str, Any]) -> bool:
        return await configure(
            self.store,
            key=args.get('key'),
            default_from=args.get('default_from'),
            default_to=args.get('default_to'),
            prompt=self.prompt,
            console=self.console,
            error_console=self.error_console,
        )


    # Send commands

    async def _handle_send(self, args: Dict[str, Any]) -> bool:
        config = self._load_config()
        return await send_email(
            config,
            self._client(config),
            SendOptions.from_args(args),
            console=self.console,
            error_console=self.error_console,
            stdin=self.stdin,
        )

    async def _handle_batch(self, args: Dict[str, Any]) -> bool:
        file = args.get('file')
        if not file:
            raise ValueError("Batch file is required")

        config = self._load_config()
        return await send_batch(
            self._client(config),
            Path(file),
            console=self.console,
            error_console=self.error_console,
        )


    # Viewing commands

    async def _handle_list(self, args: Dict[str, Any]) -> bool:
        return await self._handle_listing(EmailKind.SENT, args)

    async def _handle_received_list(self, args: Dict[str, Any]) -> bool:
        return await self._handle_listing(EmailKind.RECEIVED, args)

    async def _handle_listing(self, kind: EmailKind, args: Dict[str, Any]) -> bool:
        config = self._load_config()
        return await list_emails(
            self._client(config),
            kind,
            count=args.get('count', DEFAULT_LIST_COUNT),
            console=self.console,
        )

    async def _handle_get(self, args: Dict[str, Any]) -> bool:
        return await self._handle_single(EmailKind.SENT, args)

    async def _handle_received_get(self, args: Dict[str, Any]) -> bool:
        return await self._handle_single(EmailKind.RECEIVED, args)

    async def _handle_single(self, kind: EmailKind, args: Dict[str, Any]) -> bool:
        config = self._load_config()
        return await view_email(
            self._client(config),
            kind,
            email_id=args.get('id'),
            console=self.console,
        )


    # Scheduled email commands

    async def _handle_update(self, args: Dict[str, Any]) -> bool:
        email_id = args.get('id')
        if not email_id:
            raise ValueError("Email ID is required")

        config = self._load_config()
        return await update_email(
            self._client(config),
            email_id,
            scheduled_at=args.get('scheduled_at'),
            console=self.console,
            error_console=self.error_console,
        )

    async def _handle_cancel(self, args: Dict[str, Any]) -> bool:
        email_id = args.get('id')
        if not email_id:
            raise ValueError("Email ID is required")

        config = self._load_config()
        return await cancel_email(
            self._client(config),
            email_id,
            console=self.console,
            error_console=self.error_console,
        )


    # Completions

    async def _handle_completions(self, args: Dict[str, Any]) -> bool:
        shell = args.get('shell')
        if not shell:
            raise ValueError("Shell name is required")

        return await print_completions(shell, stream=self.stdout)
