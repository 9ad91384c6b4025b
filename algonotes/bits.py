"""Bit manipulation helpers and a bitmask-based worker pairing problem."""

from __future__ import annotations

import functools
import itertools
import operator
import string
from collections.abc import Iterable
from dataclasses import dataclass

_CASE_BIT = 1 << 5
_WORD_MASK = 0xFFFFFFFF
FIRST_DAY = 1
LAST_DAY = 30


def bit_string(num: int, width: int = 11) -> str:
    """The lowest ``width`` bits of ``num``, most significant first."""
    if width < 0:
        raise ValueError("width must not be negative")
    return "".join(str((num >> i) & 1) for i in reversed(range(width)))


def is_bit_set(num: int, i: int) -> bool:
    return num & (1 << i) != 0


def set_bit(num: int, i: int) -> int:
    return num | (1 << i)


def unset_bit(num: int, i: int) -> int:
    return num & ~(1 << i)


def toggle_bit(num: int, i: int) -> int:
    return num ^ (1 << i)


def count_set_bits(num: int) -> int:
    """Number of set bits; negative numbers are counted as 32-bit words."""
    if num < 0:
        num &= _WORD_MASK
    return num.bit_count()


def _check_letter(ch: str) -> None:
    if len(ch) != 1 or ch not in string.ascii_letters:
        raise ValueError(f"expected a single ASCII letter, got {ch!r}")


def to_lowercase(ch: str) -> str:
    """Lower-case an ASCII letter by setting bit 5 (OR with a space)."""
    _check_letter(ch)
    return chr(ord(ch) | ord(" "))


def to_uppercase(ch: str) -> str:
    """Upper-case an ASCII letter by clearing bit 5 (AND with an underscore)."""
    _check_letter(ch)
    return chr(ord(ch) & ord("_"))


def is_odd(num: int) -> bool:
    return bool(num & 1)


def clear_low_bits(num: int, i: int) -> int:
    """Clear bits 0 through ``i`` of ``num``."""
    return num & ~((1 << (i + 1)) - 1)


def clear_high_bits(num: int, i: int) -> int:
    """Keep only bits 0 through ``i`` of ``num``."""
    return num & ((1 << (i + 1)) - 1)


def is_power_of_two(num: int) -> bool:
    return num > 0 and num & (num - 1) == 0


def odd_occurrence(values: Iterable[int]) -> int:
    """The one value that occurs an odd number of times, found by XOR."""
    return functools.reduce(operator.xor, values, 0)


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Swap two integers using three XORs."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


@dataclass(frozen=True)
class WorkerPair:
    """Two workers (by index) and the number of days both are available."""

    first: int
    second: int
    days: int


def availability_mask(days: Iterable[int]) -> int:
    """Bitmask with bit ``d`` set for every available day ``d`` in 1..30."""
    mask = 0
    for day in days:
        if not FIRST_DAY <= day <= LAST_DAY:
            raise ValueError(f"day {day} is outside {FIRST_DAY}..{LAST_DAY}")
        mask |= 1 << day
    return mask


def common_days(mask_a: int, mask_b: int) -> int:
    """Number of days set in both masks."""
    return count_set_bits(mask_a & mask_b)


def best_worker_pair(availabilities: Iterable[Iterable[int]]) -> WorkerPair | None:
    """The first pair of workers sharing the most days, or None if no pair shares any."""
    masks = [availability_mask(days) for days in availabilities]
    best: WorkerPair | None = None
    for (i, mask_i), (j, mask_j) in itertools.combinations(enumerate(masks), 2):
        shared = common_days(mask_i, mask_j)
        if shared > (best.days if best else 0):
            best = WorkerPair(i, j, shared)
    return best