"""
fuzzyrank: fuzzy string matching and ranking

Single entry point for the package:
- models/: SortOptions, MatchResult, Sortable and list adapters
- scoring/: score (one candidate against one query)
- ranking/: Sorter, sort, sort_strings, sort_items, filter_items
- settings: load SortOptions from env/.env or JSON
"""

from .errors import ConfigError
from .models.config import (
    DEFAULT_ADJACENCY_BONUS,
    DEFAULT_CAMEL_BONUS,
    DEFAULT_LEADING_LETTER_PENALTY,
    DEFAULT_MAX_LEADING_LETTER_PENALTY,
    DEFAULT_OPTIONS,
    DEFAULT_SEPARATOR_BONUS,
    DEFAULT_UNMATCHED_LETTER_PENALTY,
    SortOptions,
    resolve_options,
)
from .models.result import MatchResult
from .models.sortable import KeyedList, Sortable, StringList
from .ranking import Sorter, filter_items, sort, sort_items, sort_strings
from .scoring import score
from .settings import load_options, options_from_env

__version__ = "1.0.0"

__all__ = [
    "ConfigError",
    "DEFAULT_ADJACENCY_BONUS",
    "DEFAULT_CAMEL_BONUS",
    "DEFAULT_LEADING_LETTER_PENALTY",
    "DEFAULT_MAX_LEADING_LETTER_PENALTY",
    "DEFAULT_OPTIONS",
    "DEFAULT_SEPARATOR_BONUS",
    "DEFAULT_UNMATCHED_LETTER_PENALTY",
    "KeyedList",
    "MatchResult",
    "SortOptions",
    "Sortable",
    "Sorter",
    "StringList",
    "filter_items",
    "load_options",
    "options_from_env",
    "resolve_options",
    "score",
    "sort",
    "sort_items",
    "sort_strings",
]
