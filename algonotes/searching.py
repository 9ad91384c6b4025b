"""Binary-search techniques: exact lookups, bounds, real roots and answer searches."""

from __future__ import annotations

import itertools
import math
from collections.abc import Callable, Iterable, Sequence

DEFAULT_EPS = 1e-6
_MAX_ANSWER = 10**9


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return the first index of ``target`` in sorted ``values``, or None."""
    if not values:
        return None
    lo, hi = 0, len(values) - 1
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if values[mid] < target:
            lo = mid
        else:
            hi = mid
    if values[lo] == target:
        return lo
    if values[hi] == target:
        return hi
    return None


def _first_index(values: Sequence[int], goes_right: Callable[[int], bool]) -> int | None:
    """Find the first index whose value does not satisfy ``goes_right``."""
    if not values:
        return None
    lo, hi = 0, len(values) - 1
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if goes_right(values[mid]):
            lo = mid + 1
        else:
            hi = mid
    if not goes_right(values[lo]):
        return lo
    if not goes_right(values[hi]):
        return hi
    return None


def lower_bound(values: Sequence[int], element: int) -> int | None:
    """Index of the first value ``>= element`` in sorted ``values``, or None."""
    return _first_index(values, lambda value: value < element)


def upper_bound(values: Sequence[int], element: int) -> int | None:
    """Index of the first value ``> element`` in sorted ``values``, or None."""
    return _first_index(values, lambda value: value <= element)


def _power(base: float, exponent: int) -> float:
    return math.prod(itertools.repeat(base, exponent))


def nth_root(x: float, n: int, eps: float = DEFAULT_EPS) -> float:
    """Approximate the ``n``-th root of ``x`` by bisection to within ``eps``."""
    if n < 1:
        raise ValueError("root degree must be at least 1")
    if x < 0:
        raise ValueError("cannot take the root of a negative number")
    if eps <= 0:
        raise ValueError("eps must be positive")
    lo, hi = (1.0, float(x)) if x >= 1 else (float(x), 1.0)
    while hi - lo > eps:
        mid = (lo + hi) / 2
        if mid in (lo, hi):
            break
        if _power(mid, n) < x:
            lo = mid
        else:
            hi = mid
    return hi


def square_root(x: float, eps: float = DEFAULT_EPS) -> float:
    """Approximate the square root of ``x`` by bisection to within ``eps``."""
    return nth_root(x, 2, eps)


def _last_true(predicate: Callable[[int], bool], lo: int, hi: int) -> int:
    """Search a T...TF...F range for its last true point (``lo`` if none is)."""
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if predicate(mid):
            lo = mid
        else:
            hi = mid - 1
    return hi if predicate(hi) else lo


def wood_cut(trees: Iterable[int], height: int) -> int:
    """Total wood taken off when every tree is cut down to ``height``."""
    return sum(tree - height for tree in trees if tree >= height)


def max_saw_height(trees: Iterable[int], required: int) -> int:
    """Highest integer saw height that still yields at least ``required`` wood.

    Returns 0 when even cutting at ground level is not enough.
    """
    heights = list(trees)
    return _last_true(lambda h: wood_cut(heights, h) >= required, 0, _MAX_ANSWER)


def _fits(sorted_positions: Sequence[int], cows: int, min_dist: int) -> bool:
    if cows <= 0:
        return True
    if not sorted_positions:
        return False
    placed = 1
    last = sorted_positions[0]
    for position in sorted_positions[1:]:
        if placed >= cows:
            break
        if position - last >= min_dist:
            placed += 1
            last = position
    return placed >= cows


def can_place_cows(positions: Iterable[int], cows: int, min_dist: int) -> bool:
    """Whether ``cows`` can occupy stalls at least ``min_dist`` apart."""
    return _fits(sorted(positions), cows, min_dist)


def largest_min_distance(positions: Iterable[int], cows: int) -> int:
    """Largest possible minimum distance between ``cows`` placed in the stalls."""
    stalls = sorted(positions)
    if cows < 2:
        raise ValueError("at least two cows are needed")
    if cows > len(stalls):
        raise ValueError("more cows than stalls")
    return _last_true(lambda d: _fits(stalls, cows, d), 0, _MAX_ANSWER)