"""Command-line interface for rusend."""
