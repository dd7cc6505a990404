"""Configuration feature.

Public API:
    configure(store, key, default_from, default_to) -> Save merged config
"""

from .workflow import ConfigWorkflow, configure

__all__ = [
    "ConfigWorkflow",
    "configure",
]
