"""Longest common subsequence and the dynamic programs built on it."""

from __future__ import annotations

import functools
from collections.abc import Sequence


def lcs_length_recursive(x: str, y: str) -> int:
    """LCS length by plain recursion; exponential, for short inputs only."""

    def solve(n: int, m: int) -> int:
        if n == 0 or m == 0:
            return 0
        if x[n - 1] == y[m - 1]:
            return 1 + solve(n - 1, m - 1)
        return max(solve(n, m - 1), solve(n - 1, m))

    return solve(len(x), len(y))


def lcs_length_memoized(x: str, y: str) -> int:
    """LCS length by top-down recursion with a memo table."""

    @functools.cache
    def solve(n: int, m: int) -> int:
        if n == 0 or m == 0:
            return 0
        if x[n - 1] == y[m - 1]:
            return 1 + solve(n - 1, m - 1)
        return max(solve(n, m - 1), solve(n - 1, m))

    return solve(len(x), len(y))


def lcs_table(x: str, y: str) -> list[list[int]]:
    """The full ``(len(x) + 1) x (len(y) + 1)`` LCS table, bottom-up."""
    table = [[0] * (len(y) + 1) for _ in range(len(x) + 1)]
    for i, a in enumerate(x, start=1):
        row, above = table[i], table[i - 1]
        for j, b in enumerate(y, start=1):
            if a == b:
                row[j] = 1 + above[j - 1]
            else:
                row[j] = max(above[j], row[j - 1])
    return table


def lcs_length(x: str, y: str) -> int:
    """LCS length from the bottom-up table."""
    return lcs_table(x, y)[-1][-1]


def lcs_length_compact(x: str, y: str) -> int:
    """LCS length keeping only two rows, sized by the shorter string."""
    if len(x) < len(y):
        x, y = y, x
    prev = [0] * (len(y) + 1)
    for a in x:
        curr = [0] * (len(y) + 1)
        for j, b in enumerate(y, start=1):
            curr[j] = 1 + prev[j - 1] if a == b else max(prev[j], curr[j - 1])
        prev = curr
    return prev[-1]


def lcs_string(x: str, y: str) -> str:
    """One longest common subsequence, recovered by walking the table back."""
    table = lcs_table(x, y)
    i, j = len(x), len(y)
    chars: list[str] = []
    while i > 0 and j > 0:
        if x[i - 1] == y[j - 1]:
            chars.append(x[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(chars))


def longest_common_substring(a: str, b: str) -> int:
    """Length of the longest contiguous run shared by ``a`` and ``b``."""
    best = 0
    prev = [0] * (len(b) + 1)
    for ca in a:
        curr = [0] * (len(b) + 1)
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                curr[j] = 1 + prev[j - 1]
                best = max(best, curr[j])
        prev = curr
    return best


def longest_palindromic_subsequence(s: str) -> int:
    """Length of the longest palindromic subsequence of ``s``."""
    return lcs_length(s, s[::-1])


def min_insertions_deletions(a: str, b: str) -> tuple[int, int]:
    """``(deletions, insertions)`` needed to turn ``a`` into ``b``."""
    common = lcs_length(a, b)
    return len(a) - common, len(b) - common


def min_deletions_to_palindrome(s: str) -> int:
    """Fewest characters to delete from ``s`` to leave a palindrome."""
    return len(s) - longest_palindromic_subsequence(s)


def shortest_common_supersequence(a: str, b: str) -> str:
    """A shortest string holding both ``a`` and ``b`` as subsequences."""
    table = lcs_table(a, b)
    i, j = len(a), len(b)
    chars: list[str] = []
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            chars.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            chars.append(a[i - 1])
            i -= 1
        else:
            chars.append(b[j - 1])
            j -= 1
    chars.extend(reversed(a[:i]))
    chars.extend(reversed(b[:j]))
    return "".join(reversed(chars))


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Fewest scalar multiplications to multiply the chain; matrix ``i`` is ``dims[i-1] x dims[i]``."""
    dims = tuple(dims)

    @functools.cache
    def solve(i: int, j: int) -> int:
        if i >= j:
            return 0
        return min(
            solve(i, k) + solve(k + 1, j) + dims[i - 1] * dims[k] * dims[j]
            for k in range(i, j)
        )

    return solve(1, len(dims) - 1)