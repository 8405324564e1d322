"""Selection sort."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")

SAMPLE = (64, 25, 12, 22, 11)


def selection_sort(items: Iterable[T]) -> list[T]:
    """A new list of items in ascending order, built by selection sort."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def main(argv: list[str] | None = None) -> int:
    """Sort the given integers, or a built-in sample, and print them."""
    parser = argparse.ArgumentParser(description="Sort integers with selection sort.")
    parser.add_argument("numbers", nargs="*", type=int)
    args = parser.parse_args(argv)
    print("".join(f"{x} " for x in selection_sort(args.numbers or SAMPLE)))
    return 0