"""Sorting of restaurant distance entries by their ``dist`` field."""

from typing import List


def partition(items: List, low: int, high: int) -> int:
    """Lomuto partition of ``items[low:high + 1]`` around the last element; return its final index."""
    pivot = items[high].dist
    i = low - 1
    for j in range(low, high):
        if items[j].dist < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def quick_sort(items: List) -> None:
    """Sort ``items`` in place by ascending ``dist`` using quicksort."""
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            part = partition(items, low, high)
            pending.append((low, part - 1))
            pending.append((part + 1, high))


def insertion_sort(items: List) -> None:
    """Sort ``items`` in place by ascending ``dist`` using a stable insertion sort."""
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j - 1].dist > items[j].dist:
            items[j - 1], items[j] = items[j], items[j - 1]
            j -= 1