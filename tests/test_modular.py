import pytest

from cdrills.modular import (
    gcd,
    is_prime,
    modular_exponent,
    modular_inverse,
    right_to_left,
    sieve_of_eratosthenes,
)


@pytest.mark.parametrize("a, b", [(12, 18), (17, 5), (100, 75), (7, 0), (0, 9)])
def test_gcd_divides_both(a, b):
    g = gcd(a, b)
    assert g > 0
    assert a % g == 0
    assert b % g == 0


def test_gcd_value():
    assert gcd(12, 18) == 6


def test_gcd_with_zero_returns_other():
    assert gcd(42, 0) == 42


def test_sieve_small():
    assert sieve_of_eratosthenes(20) == [2, 3, 5, 7, 11, 13, 17, 19]


def test_sieve_agrees_with_is_prime():
    assert sieve_of_eratosthenes(300) == [n for n in range(300) if is_prime(n)]


def test_sieve_excludes_limit():
    assert 13 not in sieve_of_eratosthenes(13)
    assert 13 in sieve_of_eratosthenes(14)


@pytest.mark.parametrize("limit", [0, 1, -5])
def test_sieve_rejects_small_limit(limit):
    with pytest.raises(ValueError):
        sieve_of_eratosthenes(limit)


@pytest.mark.parametrize("num", [-3, 0, 1, 4, 9, 25, 49])
def test_is_prime_false(num):
    assert is_prime(num) is False


@pytest.mark.parametrize("num", [2, 3, 5, 7, 97, 251])
def test_is_prime_true(num):
    assert is_prime(num) is True


@pytest.mark.parametrize("b, exp, mod", [(4, 13, 497), (2, 10, 1000), (7, 0, 13), (123, 45, 678)])
def test_exponent_methods_match_pow(b, exp, mod):
    assert modular_exponent(b, exp, mod) == pow(b, exp, mod)
    assert right_to_left(b, exp, mod) == pow(b, exp, mod)


def test_exponent_mod_one_is_zero():
    assert modular_exponent(5, 3, 1) == 0
    assert right_to_left(5, 3, 1) == 0


@pytest.mark.parametrize("a, c", [(7, 3120), (3, 11), (10, 17), (17, 3120)])
def test_modular_inverse_invariant(a, c):
    inverse = modular_inverse(a, c)
    assert 0 < inverse < c
    assert (a * inverse) % c == 1


@pytest.mark.parametrize("a, c", [(2, 4), (6, 9), (5, 1), (3, 0)])
def test_modular_inverse_missing(a, c):
    with pytest.raises(ValueError):
        modular_inverse(a, c)