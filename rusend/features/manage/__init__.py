"""Scheduled email management.

Public API:
    update_email(client, email_id, scheduled_at) -> Reschedule an email
    cancel_email(client, email_id) -> Cancel a scheduled email
"""

from .workflow import ManageWorkflow, cancel_email, update_email

__all__ = [
    "ManageWorkflow",
    "cancel_email",
    "update_email",
]
