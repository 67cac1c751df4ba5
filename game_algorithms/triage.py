"""Ranking patients for treatment: the highest severity is seen first."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

__all__ = ["emergency_order", "main"]

_SAMPLE = [10, 5, 7, 25, 4, 27, 9]


def emergency_order(people: Sequence[Any]) -> list[int]:
    """Return each patient's 1-based treatment rank, largest value first.

    Patients with equal values keep their original relative order.
    """
    by_severity = sorted(range(len(people)), key=lambda i: people[i], reverse=True)
    # sorted(reverse=True) keeps ties stable, so earlier patients rank first.
    ranks = [0] * len(people)
    for rank, index in enumerate(by_severity, start=1):
        ranks[index] = rank
    return ranks


def main(argv: list[str] | None = None) -> int:
    """Print the treatment order of the given severities, or of a sample list."""
    parser = argparse.ArgumentParser(description="Rank patients by severity.")
    parser.add_argument("severities", nargs="*", type=int, help="severity of each patient")
    args = parser.parse_args(argv)
    people = args.severities or _SAMPLE
    print("[" + ", ".join(str(rank) for rank in emergency_order(people)) + "]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())