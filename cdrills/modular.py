"""Number theory helpers used by the RSA key generator."""

from __future__ import annotations

from .prime_range import is_prime as _is_prime
from .prime_range import sieve as _sieve


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` (Euclid)."""
    while b:
        a, b = b, a % b
    return a


def is_prime(num: int) -> bool:
    """Return True when ``num`` is prime."""
    return _is_prime(num)


def sieve_of_eratosthenes(limit: int) -> list[int]:
    """Return every prime below ``limit``.

    Raises ValueError when ``limit`` is below 2.
    """
    if limit < 2:
        raise ValueError(f"sieve limit must be at least 2, got {limit}")
    return _sieve(limit)


def modular_exponent(b: int, exp: int, mod: int) -> int:
    """Compute ``b ** exp % mod`` by repeated multiplication."""
    if mod == 1:
        return 0
    result = 1
    for _ in range(exp):
        result = (result * b) % mod
    return result


def right_to_left(b: int, exp: int, mod: int) -> int:
    """Compute ``b ** exp % mod`` with the right-to-left binary method."""
    if mod == 1:
        return 0
    result = 1
    b %= mod
    while exp > 0:
        if exp % 2 == 1:
            result = (result * b) % mod
        exp >>= 1
        b = (b * b) % mod
    return result


def modular_inverse(a: int, c: int) -> int:
    """Return the smallest ``i`` with ``a * i % c == 1``.

    Raises ValueError when ``c`` is not positive or no inverse exists.
    """
    if c < 1:
        raise ValueError(f"modulus must be positive, got {c}")
    reduced = a % c
    inverse = next((i for i in range(1, c) if (reduced * i) % c == 1), None)
    if inverse is None:
        raise ValueError(f"{a} has no inverse modulo {c}")
    return inverse