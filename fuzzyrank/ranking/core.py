"""
Main ranking orchestration: score every element, then reorder by score.

The Sorter holds a results buffer parallel to the collection. Every swap it
performs touches both, so results[i] always describes data[i].
"""

import functools
import logging
from typing import List, Optional

from ..models.config import SortOptions, resolve_options
from ..models.result import MatchResult
from ..models.sortable import Sortable
from ..scoring import score as score_candidate

logger = logging.getLogger(__name__)


class Sorter:
    """
    Sorts a Sortable collection against the query passed to sort().

    Ordering is by descending score; equal scores fall back to the
    collection's own less(), so e.g. alphabetical order survives ties.
    """

    def __init__(self, data: Sortable, options: Optional[SortOptions] = None):
        self.data = data
        self.options = resolve_options(options)
        self._results: Optional[List[MatchResult]] = None

    # -------------------------------------------------------------------------
    # Comparator view (mirrors the Sortable interface)
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.data)

    def less(self, i: int, j: int) -> bool:
        results = self._require_results()
        a, b = results[i].score, results[j].score
        if a == b:
            return self.data.less(i, j)
        # Higher score is better
        return a > b

    def swap(self, i: int, j: int) -> None:
        results = self._require_results()
        results[i], results[j] = results[j], results[i]
        self.data.swap(i, j)

    # -------------------------------------------------------------------------
    # Results (only valid after sort())
    # -------------------------------------------------------------------------

    @property
    def results(self) -> List[MatchResult]:
        return list(self._require_results())

    def result(self, i: int) -> MatchResult:
        return self._require_results()[i]

    def match(self, i: int) -> bool:
        return self._require_results()[i].match

    def score(self, i: int) -> float:
        return self._require_results()[i].score

    def _require_results(self) -> List[MatchResult]:
        if self._results is None:
            raise RuntimeError("Sorter.sort() must be called before reading results")
        return self._results

    # -------------------------------------------------------------------------
    # Sorting
    # -------------------------------------------------------------------------

    def sort(self, query: str) -> List[MatchResult]:
        """Score all elements against query and reorder them. Returns the results."""
        n = len(self.data)
        self._results = [score_candidate(self.data.sort_key(i), query, self.options) for i in range(n)]

        def compare(i: int, j: int) -> int:
            if self.less(i, j):
                return -1
            if self.less(j, i):
                return 1
            return 0

        # Order is decided on the untouched collection, then applied via swap().
        order = sorted(range(n), key=functools.cmp_to_key(compare))
        self._apply_order(order)

        matches = sum(1 for r in self._results if r.match)
        logger.debug("[fuzzy_sort] query=%r items=%d matches=%d", query, n, matches)
        return self.results

    def _apply_order(self, order: List[int]) -> None:
        """Move element order[p] to position p for every p, using swaps only."""
        # position_of[k]: where original element k currently sits
        # original_at[p]: which original element currently sits at p
        position_of = list(range(len(order)))
        original_at = list(range(len(order)))
        for target, wanted in enumerate(order):
            current = position_of[wanted]
            if current == target:
                continue
            displaced = original_at[target]
            self.swap(target, current)
            original_at[target], original_at[current] = wanted, displaced
            position_of[wanted], position_of[displaced] = target, current
