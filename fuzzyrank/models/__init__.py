"""Data models for the fuzzy ranking engine."""

from .config import DEFAULT_OPTIONS, SortOptions, resolve_options
from .result import MatchResult
from .sortable import KeyedList, Sortable, StringList

__all__ = [
    "DEFAULT_OPTIONS",
    "KeyedList",
    "MatchResult",
    "SortOptions",
    "Sortable",
    "StringList",
    "resolve_options",
]
