"""Email viewing feature.

Public API:
    list_emails(client, kind, count) -> Display the newest emails
    view_email(client, kind, email_id) -> Display one email (newest if no id)
"""

from .workflow import DEFAULT_LIST_COUNT, ViewWorkflow, list_emails, view_email

__all__ = [
    "DEFAULT_LIST_COUNT",
    "ViewWorkflow",
    "list_emails",
    "view_email",
]
