import math

import pytest

from algonotes.number_theory import (
    MOD,
    bin_exp_iterative,
    bin_exp_recursive,
    gcd,
    power_mod_linear,
)


@pytest.mark.parametrize("a,b", [(12, 4), (18, 12), (17, 5), (100, 75), (0, 9), (9, 0)])
def test_gcd_matches_math_gcd(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [(12, 4), (18, 12), (35, 21)])
def test_gcd_divides_both(a, b):
    g = gcd(a, b)
    assert a % g == 0 and b % g == 0


def test_gcd_is_symmetric():
    assert gcd(18, 12) == gcd(12, 18)


def test_default_modulus_reduces_results():
    assert bin_exp_iterative(10, 10) == 999_999_937
    assert power_mod_linear(10, 10) == 999_999_937


@pytest.mark.parametrize("a,b", [(2, 13), (3, 0), (7, 50), (10, 100)])
def test_power_mod_linear_matches_pow(a, b):
    assert power_mod_linear(a, b) == pow(a, b, MOD)


def test_power_mod_linear_custom_modulus():
    assert power_mod_linear(5, 20, 97) == pow(5, 20, 97)


@pytest.mark.parametrize("a,b", [(2, 13), (3, 0), (5, 1), (7, 31), (-3, 5)])
def test_bin_exp_recursive_matches_power(a, b):
    assert bin_exp_recursive(a, b) == a**b


@pytest.mark.parametrize("a,b", [(3, 13), (2, 13), (123456789, 987654321), (0, 0), (5, 1)])
def test_bin_exp_iterative_matches_pow(a, b):
    assert bin_exp_iterative(a, b) == pow(a, b, MOD)


def test_bin_exp_iterative_custom_modulus():
    assert bin_exp_iterative(3, 200, 1000) == pow(3, 200, 1000)


def test_iterative_and_linear_agree():
    assert bin_exp_iterative(11, 300) == power_mod_linear(11, 300)


def test_negative_exponent_rejected():
    with pytest.raises(ValueError):
        bin_exp_recursive(2, -1)
    with pytest.raises(ValueError):
        bin_exp_iterative(2, -1)
    with pytest.raises(ValueError):
        power_mod_linear(2, -1)


def test_non_positive_modulus_rejected():
    with pytest.raises(ValueError):
        bin_exp_iterative(2, 3, 0)
    with pytest.raises(ValueError):
        power_mod_linear(2, 3, -5)