"""Sending feature: single send, forward and batch.

Public API:
    send_email(config, client, options) -> Send or forward one email
    send_batch(client, path) -> Send every message in a batch file
"""

from .batch import load_batch_file
from .workflow import SendOptions, SendWorkflow, send_batch, send_email

__all__ = [
    "SendOptions",
    "SendWorkflow",
    "load_batch_file",
    "send_batch",
    "send_email",
]
