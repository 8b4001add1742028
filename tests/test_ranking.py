#!/usr/bin/env python3
"""
Ranking Tests

Tests that Sorter scores a whole collection, reorders it in place through
swap(), keeps the results buffer aligned with the data, and breaks score ties
with the collection's natural order.

Run:
----
    pytest tests/test_ranking.py -v
"""

from typing import Dict, List

import pytest

from fuzzyrank import (
    KeyedList,
    SortOptions,
    Sorter,
    StringList,
    filter_items,
    sort,
    sort_items,
    sort_strings,
)

HOME_DIRS = ["Documents", "Downloads", "dotfiles", "Desktop"]


class Records:
    """A caller-defined Sortable: records ranked by title, tie-broken by id."""

    def __init__(self, records: List[Dict]):
        self.records = records
        self.swaps = 0

    def __len__(self) -> int:
        return len(self.records)

    def less(self, i: int, j: int) -> bool:
        return self.records[i]["id"] < self.records[j]["id"]

    def swap(self, i: int, j: int) -> None:
        self.swaps += 1
        self.records[i], self.records[j] = self.records[j], self.records[i]

    def sort_key(self, i: int) -> str:
        return self.records[i]["title"]


class TestSortStrings:
    """Plain string lists are reordered in place."""

    def test_matches_ranked_before_non_matches(self):
        data = ["bob", "alice", "abel"]
        results = sort_strings(data, "a")
        assert data == ["abel", "alice", "bob"]
        assert [r.match for r in results] == [True, True, False]
        assert [r.score for r in results] == [7.0, 6.0, -3.0]

    def test_home_directories(self):
        data = list(HOME_DIRS)
        results = sort_strings(data, "do")
        assert all(r.match for r in results)
        assert data == ["Downloads", "dotfiles", "Documents", "Desktop"]
        # "do" at the very start beats "o" buried in Desktop
        assert results[-1].sort_key == "Desktop"
        assert results[-1].score < min(r.score for r in results[:-1])

    def test_ties_fall_back_to_natural_order(self):
        # Empty query: score is -len(s), so pear and plum tie
        for data in (["pear", "apple", "plum"], ["plum", "pear", "apple"]):
            sort_strings(data, "")
            assert data == ["pear", "plum", "apple"]

    def test_results_aligned_with_data(self):
        data = ["zeta_alpha", "Alphabet", "beta", "ALPHA", "gamma_a"]
        results = sort_strings(data, "al")
        assert [r.sort_key for r in results] == data
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)

    def test_empty_collection(self):
        data: List[str] = []
        assert sort_strings(data, "x") == []
        assert data == []


class TestSorter:
    """Sorter as the comparator over a Sortable."""

    def test_results_before_sort_raise(self):
        sorter = Sorter(StringList(["a"]))
        with pytest.raises(RuntimeError):
            sorter.results
        with pytest.raises(RuntimeError):
            sorter.score(0)

    def test_accessors_after_sort(self):
        data = ["bob", "alice", "abel"]
        sorter = Sorter(StringList(data))
        sorter.sort("a")
        assert len(sorter) == 3
        assert sorter.match(0) and not sorter.match(2)
        assert sorter.score(0) == 7.0
        assert sorter.result(1).sort_key == "alice"
        assert sorter.less(0, 1)
        assert not sorter.less(2, 0)

    def test_resort_recomputes(self):
        data = ["bob", "alice", "abel"]
        sorter = Sorter(StringList(data))
        sorter.sort("a")
        results = sorter.sort("b")
        assert data[0] == "bob"
        assert all(r.query == "b" for r in results)
        assert [r.sort_key for r in results] == data

    def test_custom_options_used(self):
        data = ["github", "GitHub"]
        sorter = Sorter(StringList(data), SortOptions(camel_bonus=0.0))
        results = sorter.sort("gh")
        assert results[0].score == results[1].score
        # tie, so natural order: uppercase sorts first
        assert data == ["GitHub", "github"]

    def test_custom_sortable(self):
        records = Records([
            {"id": 3, "title": "Downloads"},
            {"id": 1, "title": "Desktop"},
            {"id": 2, "title": "dotfiles"},
        ])
        results = sort(records, "do")
        # Downloads and dotfiles tie; the records order them by id
        assert [r["title"] for r in records.records] == ["dotfiles", "Downloads", "Desktop"]
        assert [r.sort_key for r in results] == ["dotfiles", "Downloads", "Desktop"]
        assert records.swaps > 0

    def test_custom_sortable_tie_break(self):
        records = Records([
            {"id": 2, "title": "same"},
            {"id": 1, "title": "same"},
        ])
        sort(records, "s")
        assert [r["id"] for r in records.records] == [1, 2]

    def test_already_sorted_needs_no_swaps(self):
        records = Records([
            {"id": 1, "title": "abc"},
            {"id": 2, "title": "xabc"},
        ])
        sort(records, "abc")
        assert records.swaps == 0


class TestSortItems:
    """Arbitrary objects ranked through a key function."""

    def test_sort_by_key(self):
        paths = ["/home/u/github", "/home/u/GitHub", "/home/u/gopher"]
        results = sort_items(paths, "gh", key=lambda p: p.rsplit("/", 1)[-1])
        assert paths[0] == "/home/u/GitHub"
        assert results[0].sort_key == "GitHub"

    def test_keyed_list_custom_less(self):
        items = [("b", 1), ("a", 2)]
        kl = KeyedList(items, key=lambda t: "x", less=lambda a, b: a[1] > b[1])
        sort(kl, "x")
        assert items == [("a", 2), ("b", 1)]


class TestFilterItems:
    """filter_items drops non-matches and honours the score/length limits."""

    def test_drops_non_matches(self):
        names = ["bob", "alice", "abel"]
        kept = filter_items(names, "a")
        assert [item for item, _ in kept] == ["abel", "alice"]
        assert names == ["bob", "alice", "abel"]

    def test_min_score(self):
        kept = filter_items(["bob", "alice", "abel"], "a", min_score=6.5)
        assert [item for item, _ in kept] == ["abel"]

    def test_max_results(self):
        kept = filter_items(HOME_DIRS, "do", max_results=2)
        assert [item for item, _ in kept] == ["Downloads", "dotfiles"]

    def test_key_and_result_pairs(self):
        items = [{"name": "Desktop"}, {"name": "Music"}]
        kept = filter_items(items, "dk", key=lambda d: d["name"])
        assert len(kept) == 1
        item, res = kept[0]
        assert item == {"name": "Desktop"}
        assert res.match and res.sort_key == "Desktop"
