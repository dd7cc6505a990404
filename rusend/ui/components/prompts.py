"""User prompt components."""

from typing import Optional

from rich.console import Console
from rich.prompt import Prompt

from rusend.utils.console import get_console


class InputPrompt:
    """Text input prompt component.

    Instances are callable so they can be passed wherever a plain
    ``prompt(message) -> str | None`` function is expected.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_console()

    def ask(self, message: str, password: bool = False) -> Optional[str]:
        """Ask for one line of input.

        Returns:
            The stripped input, or None if cancelled (Ctrl-C / EOF)
        """
        try:
            answer = Prompt.ask(message, password=password, console=self.console)
        except (KeyboardInterrupt, EOFError):
            return None
        return answer.strip() if answer is not None else None

    def __call__(self, message: str) -> Optional[str]:
        return self.ask(message)
