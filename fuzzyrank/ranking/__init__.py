"""
Ranking: score a whole collection against one query and reorder it.

Public API: Sorter, sort, sort_strings, sort_items, filter_items.
- core: Sorter (results buffer, comparator, swap-only reordering).
- api: convenience wrappers for plain lists.
"""

from .api import filter_items, sort, sort_items, sort_strings
from .core import Sorter

__all__ = [
    "Sorter",
    "filter_items",
    "sort",
    "sort_items",
    "sort_strings",
]
