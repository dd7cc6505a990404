"""Config workflow orchestration."""

from typing import Callable, Optional

from rich.console import Console

from rusend.ui.components import InputPrompt
from rusend.utils.config_manager import AppConfig, ConfigStore
from rusend.utils.errors import InvalidConfigError, MissingCredentialsError
from rusend.utils.logging import async_log_call, get_logger

from .display import ConfigDisplay

logger = get_logger(__name__)

KEY_PROMPT = "Enter your resend API key (starts with re_)"

PromptFunc = Callable[[str], Optional[str]]


class ConfigWorkflow:
    """Merges command-line values into the stored config and saves it."""

    def __init__(
        self,
        store: ConfigStore,
        prompt: Optional[PromptFunc] = None,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ):
        self.store = store
        self.prompt = prompt or InputPrompt(console)
        self.display = ConfigDisplay(console, error_console)

    def _load_existing(self) -> AppConfig:
        # A damaged file must not block the command that rewrites it.
        try:
            return self.store.load()
        except InvalidConfigError as e:
            logger.warning(f"Ignoring unreadable config: {e.message}")
            self.display.show_reset_warning(e.message)
            return AppConfig()

    @async_log_call
    async def configure(
        self,
        key: Optional[str] = None,
        default_from: Optional[str] = None,
        default_to: Optional[str] = None,
    ) -> AppConfig:
        """Overlay provided fields on the stored config and save.

        Prompts for the API key only when none is given and none is stored.

        Raises:
            MissingCredentialsError: no key given, stored or entered
        """
        config = self._load_existing()
        updates = {}

        if key is not None and key.strip():
            updates["api_key"] = key.strip()
        elif not config.has_api_key():
            entered = self.prompt(KEY_PROMPT)
            if not entered or not entered.strip():
                raise MissingCredentialsError("No API key entered")
            updates["api_key"] = entered.strip()

        if default_from is not None:
            updates["default_from"] = default_from.strip() or None
        if default_to is not None:
            updates["default_to"] = default_to.strip() or None

        merged = config.model_copy(update=updates)
        self.store.save(merged)
        self.display.show_saved(merged, self.store.path)
        return merged


## Factory functions

async def configure(
    store: ConfigStore,
    key: Optional[str] = None,
    default_from: Optional[str] = None,
    default_to: Optional[str] = None,
    prompt: Optional[PromptFunc] = None,
    console: Optional[Console] = None,
    error_console: Optional[Console] = None,
) -> bool:
    """Run the config command."""
    workflow = ConfigWorkflow(store, prompt, console, error_console)
    await workflow.configure(key, default_from, default_to)
    return True
