"""
Sortable collections: the capability the ranking stage operates through.

Anything with a length, a natural-order comparison, an in-place swap and a
per-index sort key can be ranked. StringList and KeyedList adapt plain lists.
"""

from typing import Any, Callable, Generic, List, Optional, Protocol, TypeVar

T = TypeVar("T")


class Sortable(Protocol):
    """Protocol for fuzzy-sortable collections. Implement for any domain type."""

    def __len__(self) -> int:
        ...

    def less(self, i: int, j: int) -> bool:
        """Natural order: True if element i sorts before element j."""
        ...

    def swap(self, i: int, j: int) -> None:
        """Swap elements i and j in place."""
        ...

    def sort_key(self, i: int) -> str:
        """String that element i is compared to the query with."""
        ...


class StringList:
    """Sortable view over a list of strings. Sorting reorders the wrapped list."""

    def __init__(self, data: List[str]):
        self.data = data

    def __len__(self) -> int:
        return len(self.data)

    def less(self, i: int, j: int) -> bool:
        return self.data[i] < self.data[j]

    def swap(self, i: int, j: int) -> None:
        self.data[i], self.data[j] = self.data[j], self.data[i]

    def sort_key(self, i: int) -> str:
        return self.data[i]


class KeyedList(Generic[T]):
    """
    Sortable view over a list of arbitrary items.

    Args:
        items: List to reorder in place.
        key: Derives the sort key (the string matched against the query) from an item.
        less: Optional natural-order comparison for score ties. Defaults to
            comparing the derived keys.
    """

    def __init__(
        self,
        items: List[T],
        key: Callable[[T], str],
        less: Optional[Callable[[T, T], bool]] = None,
    ):
        self.items = items
        self.key = key
        self._less = less

    def __len__(self) -> int:
        return len(self.items)

    def less(self, i: int, j: int) -> bool:
        a, b = self.items[i], self.items[j]
        if self._less is not None:
            return self._less(a, b)
        return self.key(a) < self.key(b)

    def swap(self, i: int, j: int) -> None:
        self.items[i], self.items[j] = self.items[j], self.items[i]

    def sort_key(self, i: int) -> str:
        return self.key(self.items[i])


def identity_key(item: Any) -> str:
    """Default key for filter_items: the item's string form."""
    return item if isinstance(item, str) else str(item)
