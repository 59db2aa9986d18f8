"""Result data structures returned by the special-function engines."""

from .evaluation import IncompleteGammaResult

__all__ = [
    "IncompleteGammaResult",
]
