"""Batch input file loading."""

import json
from pathlib import Path
from typing import List

from pydantic import ValidationError as PydanticValidationError

from rusend.core.models import BatchEmailInput, EmailMessage
from rusend.utils.errors import FileSystemError, InvalidBatchFileError
from rusend.utils.logging import get_logger, log_call

logger = get_logger(__name__)


@log_call
def load_batch_file(path: Path) -> List[EmailMessage]:
    """Read and validate every message in a batch file.

    Nothing is returned unless every element is valid.

    Raises:
        FileSystemError: the file cannot be read
        InvalidBatchFileError: bad JSON, not an array, or an invalid element
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileSystemError(f"read batch file {path}: {e}") from e

    try:
        records = json.loads(content)
    except json.JSONDecodeError as e:
        raise InvalidBatchFileError(f"parse json: {e}") from e

    if not isinstance(records, list):
        raise InvalidBatchFileError(
            f"parse json: expected an array of messages, found {type(records).__name__}"
        )

    messages = []
    for index, record in enumerate(records):
        try:
            item = BatchEmailInput.model_validate(record)
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'message'}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidBatchFileError(
                f"parse json: message {index + 1} of {len(records)} is invalid ({problems})",
                details={"index": index},
            ) from e
        messages.append(item.to_message())

    logger.info(f"Loaded {len(messages)} messages from {path}")
    return messages
