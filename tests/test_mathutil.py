import pytest

from aoc2024.mathutil import abs_int, pow_int


@pytest.mark.parametrize("n", [0, 1, 7, 42, 10**12])
def test_abs_int_is_symmetric(n):
    assert abs_int(n) == n
    assert abs_int(-n) == n


def test_abs_int_never_negative():
    for n in range(-50, 51):
        assert abs_int(n) >= 0


def test_pow_int_zero_exponent_is_one():
    assert pow_int(7, 0) == 1
    assert pow_int(0, 0) == 1


def test_pow_int_first_power_is_identity():
    assert pow_int(7, 1) == 7
    assert pow_int(-3, 1) == -3


def test_pow_int_power_of_two():
    assert pow_int(2, 10) == 1024


@pytest.mark.parametrize("base", [2, 3, 5, -2])
def test_pow_int_multiplies_by_base(base):
    for exponent in range(1, 12):
        assert pow_int(base, exponent + 1) == pow_int(base, exponent) * base