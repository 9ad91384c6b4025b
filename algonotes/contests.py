"""Solutions to a handful of short contest problems."""

from __future__ import annotations

import itertools
from collections.abc import Sequence

ALICE = "Alice"
BOB = "Bob"


def latin_square(n: int) -> list[list[int]]:
    """The cyclic ``n`` by ``n`` Latin square with entry ``(i + j) % n``."""
    if n < 0:
        raise ValueError("size must not be negative")
    return [[(i + j) % n for j in range(n)] for i in range(n)]


def subtraction_game_winner(n: int) -> str:
    """Winner of the game: Bob when ``n`` is a multiple of 4, otherwise Alice."""
    return BOB if n % 4 == 0 else ALICE


def can_win_tournament(strengths: Sequence[int], j: int, k: int) -> bool:
    """Whether player ``j`` (1-based) can be among the last ``k`` players standing."""
    if not 1 <= j <= len(strengths):
        raise ValueError(f"player {j} is outside 1..{len(strengths)}")
    if k > 1:
        return True
    return strengths[j - 1] >= max(strengths)


def survivors(values: Sequence[int]) -> str:
    """A '0'/'1' string marking each element that is both a prefix minimum and a suffix maximum."""
    prefix_min = list(itertools.accumulate(values, min))
    suffix_max = list(itertools.accumulate(reversed(values), max))[::-1]
    return "".join(
        "1" if low == value == high else "0"
        for value, low, high in zip(values, prefix_min, suffix_max)
    )


def binary_string_game_winner(s: str, k: int) -> str:
    """Winner of the game on binary string ``s`` where each move covers ``k`` characters."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if "1" not in s or k == 1:
        return ALICE
    if k > len(s):
        raise ValueError("k must not exceed the length of the string")
    head, tail = s[:k], s[-k:]
    if len(set(head)) > 1 or len(set(tail)) > 1:
        return ALICE
    return ALICE if s[0] != s[-1] else BOB