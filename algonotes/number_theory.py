"""Greatest common divisor and fast exponentiation."""

from __future__ import annotations

MOD = 10**9 + 7


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def _check(b: int, modulus: int | None = None) -> None:
    if b < 0:
        raise ValueError("exponent must not be negative")
    if modulus is not None and modulus < 1:
        raise ValueError("modulus must be positive")


def power_mod_linear(a: int, b: int, modulus: int = MOD) -> int:
    """``a ** b % modulus`` by ``b`` successive multiplications."""
    _check(b, modulus)
    result = 1
    for _ in range(b):
        result = result * a % modulus
    return result


def bin_exp_recursive(a: int, b: int) -> int:
    """``a ** b`` by recursive squaring."""
    _check(b)
    if b == 0:
        return 1
    half = bin_exp_recursive(a, b // 2)
    return a * half * half if b & 1 else half * half


def bin_exp_iterative(a: int, b: int, modulus: int = MOD) -> int:
    """``a ** b % modulus`` by iterative squaring over the bits of ``b``."""
    _check(b, modulus)
    result = 1
    a %= modulus
    while b:
        if b & 1:
            result = result * a % modulus
        a = a * a % modulus
        b >>= 1
    return result % modulus