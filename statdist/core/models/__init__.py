"""
Configuration models for statdist.

- EvaluationOptions: iteration budgets and regime switches
"""

from .options import EvaluationOptions, DEFAULT_OPTIONS

__all__ = [
    "EvaluationOptions",
    "DEFAULT_OPTIONS",
]
