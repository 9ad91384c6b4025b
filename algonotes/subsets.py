"""Generation of every subset of a sequence, by backtracking and by bitmasks."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def subsets_recursive(nums: Iterable[T]) -> list[list[T]]:
    """All subsets of ``nums``, built by backtracking.

    At each position the branch that leaves the element out is explored
    before the branch that takes it, so the empty subset comes first and
    the full sequence comes last.
    """
    items = list(nums)
    result: list[list[T]] = []
    chosen: list[T] = []

    def generate(i: int) -> None:
        if i == len(items):
            result.append(list(chosen))
            return
        generate(i + 1)
        chosen.append(items[i])
        generate(i + 1)
        chosen.pop()

    generate(0)
    return result


def subsets_bitmask(nums: Iterable[T]) -> list[list[T]]:
    """All subsets of ``nums``; subset ``mask`` holds element ``i`` when bit ``i`` is set."""
    items = list(nums)
    return [
        [item for bit, item in enumerate(items) if mask >> bit & 1]
        for mask in range(1 << len(items))
    ]