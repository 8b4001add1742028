"""Shared character utilities for scoring."""

from .chars import SEPARATORS, has_case, is_lower, is_separator, is_upper, to_lower, to_upper

__all__ = [
    "SEPARATORS",
    "has_case",
    "is_lower",
    "is_separator",
    "is_upper",
    "to_lower",
    "to_upper",
]
