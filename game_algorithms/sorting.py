"""Classic comparison sorts: bubble, selection, insertion, quick and merge sort."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any, Callable

__all__ = [
    "sorted_copy",
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "quick_sort",
    "merge_sort",
    "main",
]


def sorted_copy(nums: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using the built-in sort."""
    return sorted(nums)


def bubble_sort(nums: Iterable[Any]) -> list[Any]:
    """Return a new ascending list built by repeatedly swapping adjacent pairs.

    Stops early when a pass makes no swap, so sorted input costs one pass.
    """
    items = list(nums)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def selection_sort(nums: Iterable[Any]) -> list[Any]:
    """Return a new ascending list, moving the smallest remaining value forward each pass."""
    items = list(nums)
    for i in range(len(items) - 1):
        min_idx = min(range(i, len(items)), key=items.__getitem__)
        if min_idx != i:
            items[i], items[min_idx] = items[min_idx], items[i]
    return items


def insertion_sort(nums: Iterable[Any]) -> list[Any]:
    """Return a new ascending list, inserting each value into the sorted prefix."""
    items = list(nums)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _check_bounds(nums: Sequence[Any], low: int, high: int) -> None:
    if low < high and (low < 0 or high >= len(nums)):
        raise IndexError(
            f"range [{low}, {high}] is outside a sequence of length {len(nums)}"
        )


def _partition(nums: MutableSequence[Any], start: int, end: int) -> int:
    """Partition around the leftmost value and return the pivot's final index."""
    pivot = nums[start]
    i, j = start + 1, end
    while i <= j:
        while i <= end and nums[i] <= pivot:
            i += 1
        while j > start and nums[j] >= pivot:
            j -= 1
        if i > j:
            nums[j], nums[start] = nums[start], nums[j]
        else:
            nums[i], nums[j] = nums[j], nums[i]
    return j


def quick_sort(nums: MutableSequence[Any], start: int = 0, end: int | None = None) -> None:
    """Sort ``nums[start:end + 1]`` in place with a leftmost-pivot quicksort.

    ``end`` is inclusive and defaults to the last index. The smaller side is
    handled by recursion and the larger by looping, so depth stays logarithmic.
    """
    if end is None:
        end = len(nums) - 1
    _check_bounds(nums, start, end)
    while start < end:
        j = _partition(nums, start, end)
        if j - start < end - j:
            quick_sort(nums, start, j - 1)
            start = j + 1
        else:
            quick_sort(nums, j + 1, end)
            end = j - 1


def _merge(nums: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    merged: list[Any] = []
    i, j = left, mid + 1
    while i <= mid and j <= right:
        if nums[i] <= nums[j]:
            merged.append(nums[i])
            i += 1
        else:
            merged.append(nums[j])
            j += 1
    merged.extend(nums[i:mid + 1])
    merged.extend(nums[j:right + 1])
    nums[left:right + 1] = merged


def merge_sort(nums: MutableSequence[Any], left: int = 0, right: int | None = None) -> None:
    """Sort ``nums[left:right + 1]`` in place with a stable top-down merge sort.

    ``right`` is inclusive and defaults to the last index.
    """
    if right is None:
        right = len(nums) - 1
    _check_bounds(nums, left, right)
    if left < right:
        mid = (left + right) // 2
        merge_sort(nums, left, mid)
        merge_sort(nums, mid + 1, right)
        _merge(nums, left, mid, right)


def _quick_sorted(nums: Iterable[Any]) -> list[Any]:
    items = list(nums)
    quick_sort(items)
    return items


def _merge_sorted(nums: Iterable[Any]) -> list[Any]:
    items = list(nums)
    merge_sort(items)
    return items


_ALGORITHMS: dict[str, Callable[[Iterable[Any]], list[Any]]] = {
    "builtin": sorted_copy,
    "bubble": bubble_sort,
    "selection": selection_sort,
    "insertion": insertion_sort,
    "quick": _quick_sorted,
    "merge": _merge_sorted,
}

_DEMOS: list[tuple[str, list[int]]] = [
    ("bubble", [3, 1, 2, 9, 4]),
    ("bubble", [9, 2, 5, 4]),
    ("selection", [3, 1, 2, 9, 4]),
    ("insertion", [1, 5, 9, 1, 2, 4, 6, 8, 7, 0]),
    ("quick", [1, 5, 9, 3, 2, 4, 6, 8, 7, 0]),
    ("merge", [3, 2, 5, 1, 4, 0]),
]


def _format(values: Iterable[Any]) -> str:
    return " ".join(str(v) for v in values)


def main(argv: list[str] | None = None) -> int:
    """Sort integers given on the command line, or show each algorithm on sample data."""
    parser = argparse.ArgumentParser(description="Sort integers with a chosen algorithm.")
    parser.add_argument(
        "-a", "--algorithm", choices=sorted(_ALGORITHMS), default="builtin",
        help="sorting algorithm to use",
    )
    parser.add_argument("numbers", nargs="*", type=int, help="integers to sort")
    args = parser.parse_args(argv)

    if args.numbers:
        print(_format(_ALGORITHMS[args.algorithm](args.numbers)))
        return 0

    for name, data in _DEMOS:
        print(f"{name} sort of {_format(data)}:")
        print(_format(_ALGORITHMS[name](data)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())