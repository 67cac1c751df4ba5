"""Linear and binary search, and looking up a user's nickname by id."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "linear_search",
    "binary_search",
    "binary_search_recursive",
    "find_nickname",
    "main",
]


def linear_search(items: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first item equal to ``target``, or None."""
    return next((i for i, item in enumerate(items) if item == target), None)


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the ascending sequence ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] == target:
            return mid
        if items[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def binary_search_recursive(
    items: Sequence[Any], target: Any, left: int = 0, right: int | None = None
) -> int | None:
    """Recursively search ``items[left:right + 1]`` (ascending) for ``target``.

    ``right`` is inclusive and defaults to the last index. Returns the index
    found, or None.
    """
    if right is None:
        right = len(items) - 1
    if left <= right and (left < 0 or right >= len(items)):
        raise IndexError(
            f"range [{left}, {right}] is outside a sequence of length {len(items)}"
        )
    if left > right:
        return None
    mid = left + (right - left) // 2
    if items[mid] == target:
        return mid
    if items[mid] > target:
        return binary_search_recursive(items, target, left, mid - 1)
    return binary_search_recursive(items, target, mid + 1, right)


def find_nickname(users: Iterable[tuple[int, str]], user_id: int) -> str | None:
    """Return the nickname paired with ``user_id`` in ``(id, nickname)`` pairs, or None."""
    return next((name for uid, name in users if uid == user_id), None)


def _report(target: Any, index: int | None) -> str:
    if index is None:
        return "Data not found."
    return f"Found data: {target}."


def main(argv: list[str] | None = None) -> int:
    """Search for a value among integers given on the command line, or run the demos."""
    parser = argparse.ArgumentParser(description="Search a list of integers.")
    parser.add_argument("target", nargs="?", type=int, help="value to look for")
    parser.add_argument("numbers", nargs="*", type=int, help="integers to search")
    parser.add_argument(
        "--binary", action="store_true",
        help="sort the numbers and use binary search",
    )
    args = parser.parse_args(argv)

    if args.target is not None:
        if args.binary:
            index = binary_search(sorted(args.numbers), args.target)
        else:
            index = linear_search(args.numbers, args.target)
        print(_report(args.target, index))
        return 0 if index is not None else 1

    print("Linear search")
    print(_report(2, linear_search([0, 5, 2, 4, 9], 2)))
    print(_report(4, linear_search([0, 5, 2, 4, 9], 4)))

    ordered = [0, 2, 4, 5, 9]
    print("Binary search")
    print(_report(9, binary_search(ordered, 9)))
    print("Recursive binary search")
    print(_report(4, binary_search_recursive(ordered, 4)))
    print(_report(5, binary_search_recursive(ordered, 5)))

    users = [(0, "AAA"), (1, "BBB"), (2, "CCC"), (3, "DDD"), (4, "EEE")]
    print("Nickname lookup by user id")
    nickname = find_nickname(users, 3)
    if nickname is None:
        print("No user with that id.")
    else:
        print(f"Nickname: {nickname}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())