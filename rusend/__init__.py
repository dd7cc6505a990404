"""rusend - a small command-line client for the Resend email API."""

__version__ = "0.1.0"
