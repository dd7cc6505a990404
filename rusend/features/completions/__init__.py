"""Shell completion feature.

Public API:
    print_completions(shell) -> Write a completion script to stdout
"""

from .generator import SUPPORTED_SHELLS, generate_completion
from .workflow import print_completions

__all__ = [
    "SUPPORTED_SHELLS",
    "generate_completion",
    "print_completions",
]
