"""
Convenience entry points over Sorter for the common cases.
"""

from typing import Callable, List, Optional, Tuple, TypeVar

from ..models.config import SortOptions
from ..models.result import MatchResult
from ..models.sortable import KeyedList, Sortable, StringList, identity_key
from .core import Sorter

T = TypeVar("T")


def sort(
    data: Sortable,
    query: str,
    options: Optional[SortOptions] = None,
) -> List[MatchResult]:
    """Sort data against query with a one-off Sorter."""
    return Sorter(data, options).sort(query)


def sort_strings(
    strings: List[str],
    query: str,
    options: Optional[SortOptions] = None,
) -> List[MatchResult]:
    """Sort a list of strings in place against query."""
    return sort(StringList(strings), query, options)


def sort_items(
    items: List[T],
    query: str,
    key: Callable[[T], str],
    options: Optional[SortOptions] = None,
) -> List[MatchResult]:
    """Sort a list of arbitrary items in place, matching query against key(item)."""
    return sort(KeyedList(items, key), query, options)


def filter_items(
    items: List[T],
    query: str,
    key: Optional[Callable[[T], str]] = None,
    options: Optional[SortOptions] = None,
    min_score: Optional[float] = None,
    max_results: int = 0,
) -> List[Tuple[T, MatchResult]]:
    """
    Rank items against query and drop the ones that don't match.

    Args:
        items: Candidates. Not mutated.
        query: Search string.
        key: Derives the sort key from an item. Defaults to str(item).
        options: Bonuses and penalties; defaults when None.
        min_score: If set, matches scoring below this are dropped too.
        max_results: If positive, keep at most this many.

    Returns:
        (item, result) pairs, best first.
    """
    ranked = list(items)
    results = sort_items(ranked, query, key or identity_key, options)
    kept = [
        (item, res)
        for item, res in zip(ranked, results)
        if res.match and (min_score is None or res.score >= min_score)
    ]
    if max_results > 0:
        kept = kept[:max_results]
    return kept
