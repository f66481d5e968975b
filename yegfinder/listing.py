"""Sorting of the nearby-restaurant list and paging through it."""

import time
from typing import Dict, List, Sequence

from .restaurants import RestDist
from .sorting import insertion_sort, quick_sort
from .viewport import SortMethod

PAGE_SIZE = 21


def _timed(sort, items: List[RestDist]) -> float:
    start = time.perf_counter()
    sort(items)
    return (time.perf_counter() - start) * 1000.0


def sort_distances(items: List[RestDist], method: SortMethod) -> Dict[str, float]:
    """Sort ``items`` in place by distance and return each algorithm's running time in ms.

    With BOTH, quicksort runs on a copy and the insertion sort result is kept.
    """
    method = SortMethod(method)
    timings: Dict[str, float] = {}
    if method is SortMethod.ISORT:
        timings["Insertion sort"] = _timed(insertion_sort, items)
    elif method is SortMethod.QSORT:
        timings["Quick sort"] = _timed(quick_sort, items)
    else:
        timings["Quick sort"] = _timed(quick_sort, list(items))
        timings["Insertion sort"] = _timed(insertion_sort, items)
    return timings


class RestaurantMenu:
    """A selection moving through a sorted restaurant list shown in pages of 21 rows."""

    def __init__(self, entries: Sequence[RestDist], page_size: int = PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError("page size must be positive")
        self._entries = list(entries)
        self._page_size = page_size
        self._position = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def page(self) -> int:
        return self._position // self._page_size

    @property
    def selected(self) -> int:
        """Row of the selection within the current page."""
        return self._position % self._page_size

    def up(self) -> bool:
        """Move the selection up one row; return whether it moved."""
        if self._position == 0:
            return False
        self._position -= 1
        return True

    def down(self) -> bool:
        """Move the selection down one row; return whether it moved."""
        if self._position >= len(self._entries) - 1:
            return False
        self._position += 1
        return True

    def visible(self) -> List[RestDist]:
        """The entries on the current page."""
        start = self.page * self._page_size
        return self._entries[start : start + self._page_size]

    def selected_index(self) -> int:
        """The restaurant index of the selected entry."""
        if not self._entries:
            raise IndexError("the menu is empty")
        return self._entries[self._position].index