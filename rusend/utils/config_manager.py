"""Credentials store for the API key and default addresses.

The file is pretty-printed JSON. Older installs wrote the bare API key with
no JSON wrapper; that format is still read and is rewritten as JSON on the
next ``rusend config``.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .errors import FileSystemError, InvalidConfigError
from .logging import get_logger, log_call
from .paths import get_credentials_path

logger = get_logger(__name__)


class AppConfig(BaseModel):
    """Pydantic model for the persisted configuration."""

    model_config = ConfigDict(extra="ignore")

    api_key: str = ""
    default_from: Optional[str] = None
    default_to: Optional[str] = None

    def has_api_key(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    def masked_api_key(self) -> str:
        """API key with at most 5 leading and 3 trailing characters shown."""
        key = self.api_key
        if not key:
            return ""
        if len(key) <= 12:
            prefix = "re_" if key.startswith("re_") else ""
            return prefix + "*" * (len(key) - len(prefix))
        return f"{key[:5]}{'*' * (len(key) - 8)}{key[-3:]}"


## Parse results


@dataclass(frozen=True)
class StructuredConfig:
    config: AppConfig


@dataclass(frozen=True)
class LegacyKey:
    api_key: str


@dataclass(frozen=True)
class EmptyConfig:
    pass


ParsedConfig = Union[StructuredConfig, LegacyKey, EmptyConfig]


def parse_config(content: str) -> ParsedConfig:
    """Classify credentials file content.

    Raises:
        InvalidConfigError: content looks like JSON but is unreadable, or is
            JSON that does not describe a config object.
    """
    text = content.strip()
    if not text:
        return EmptyConfig()

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        if text[0] in "{[":
            raise InvalidConfigError(
                f"Configuration file is not valid JSON: {e}",
                details={"line": e.lineno, "column": e.colno},
            ) from e
        return LegacyKey(text)

    if isinstance(data, str):
        return LegacyKey(data.strip()) if data.strip() else EmptyConfig()

    if not isinstance(data, dict):
        if text[0] not in "{[":
            return LegacyKey(text)
        raise InvalidConfigError(
            f"Configuration file must hold a JSON object, found {type(data).__name__}"
        )

    try:
        return StructuredConfig(AppConfig.model_validate(data))
    except PydanticValidationError as e:
        raise InvalidConfigError(
            f"Configuration data does not match expected schema: {e}"
        ) from e


class ConfigStore:
    """Reads and writes the credentials file."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else get_credentials_path()

    @log_call
    def load(self) -> AppConfig:
        """Load the stored config, or an empty default when there is none."""

        if not self.path.exists():
            logger.debug(f"No credentials file at {self.path}, using defaults")
            return AppConfig()

        try:
            content = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise InvalidConfigError(
                "Configuration file is not valid UTF-8",
                details={"path": str(self.path), "position": e.start},
            ) from e
        except OSError as e:
            raise FileSystemError(
                f"Failed to read configuration file {self.path}: {e}"
            ) from e

        parsed = parse_config(content)

        if isinstance(parsed, StructuredConfig):
            return parsed.config

        if isinstance(parsed, LegacyKey):
            logger.info("Loaded legacy plain-text credentials file")
            return AppConfig(api_key=parsed.api_key)

        return AppConfig()

    @log_call
    def save(self, config: AppConfig) -> None:
        """Overwrite the credentials file with ``config``."""

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)
                f.write("\n")
        except OSError as e:
            raise FileSystemError(
                f"Failed to write configuration file {self.path}: {e}"
            ) from e

        logger.info(f"Configuration saved to {self.path}")
