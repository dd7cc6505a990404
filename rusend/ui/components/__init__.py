"""Reusable UI components for email display."""

from .messages import StatusMessage
from .panels import ConfigPanel, EmailPanel, describe_body
from .prompts import InputPrompt
from .tables import EmailTable

__all__ = [
    "ConfigPanel",
    "EmailPanel",
    "EmailTable",
    "InputPrompt",
    "StatusMessage",
    "describe_body",
]
