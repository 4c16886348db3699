"""Textbook RSA key generation, encryption and decryption."""

from __future__ import annotations

import os
import random
import sys
from dataclasses import dataclass
from typing import Sequence

from .modular import gcd, modular_inverse, right_to_left, sieve_of_eratosthenes

RSA_SIEVE_LIMIT = 255


@dataclass(frozen=True)
class RsaKey:
    """An RSA modulus, its totient and the public and private exponents."""

    n: int
    phi: int
    e: int
    d: int


def pick_e(phi: int, primes: Sequence[int] | None = None) -> int:
    """Pick the first prime that is coprime to ``phi``.

    Without a prime list the primes below RSA_SIEVE_LIMIT are used.
    Raises ValueError when no suitable prime exists.
    """
    if phi == 0:
        raise ValueError("phi must not be zero")
    if not primes:
        primes = sieve_of_eratosthenes(RSA_SIEVE_LIMIT)
    for prime in primes:
        if prime % phi != 0 and gcd(prime, phi) == 1:
            return prime
    raise ValueError(f"no prime in the list is coprime to {phi}")


def rsa_keygen(p: int, q: int, primes: Sequence[int] | None = None) -> RsaKey:
    """Generate an RSA key from the primes ``p`` and ``q``."""
    n = p * q
    phi = (p - 1) * (q - 1)
    e = pick_e(phi, primes)
    d = modular_inverse(e, phi)
    return RsaKey(n=n, phi=phi, e=e, d=d)


def rsa_encrypt(msg: int, e: int, n: int) -> int:
    """Encrypt ``msg`` with the public exponent ``e``."""
    return right_to_left(msg, e, n)


def rsa_decrypt(cipher: int, d: int, n: int) -> int:
    """Decrypt ``cipher`` with the private exponent ``d``."""
    return right_to_left(cipher, d, n)


def main(argv: list[str] | None = None) -> int:
    """Generate and print an RSA key from given or random primes."""
    args = sys.argv[1:] if argv is None else list(argv)
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "rsa"

    print("This program can accept 3 parameters or no parameters.\n")
    print(f"To use:\n{prog} <p> <q> <limit>\n{prog}\n")
    print("Parameters: p and q for RSA keygen, limit is to limit the Sieve. ")
    print("If no parameters are given random values will be used for p and q,")
    print("and the Sieve will default to a defined value.\n\nStarting...\n")

    try:
        if len(args) >= 3:
            p, q, limit = (int(arg) for arg in args[:3])
            primes = sieve_of_eratosthenes(limit)
        else:
            primes = sieve_of_eratosthenes(RSA_SIEVE_LIMIT)
            p = random.choice(primes)
            q = random.choice(primes)
        print(f"P used: {p}, Q used: {q}")
        key = rsa_keygen(p, q, primes)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    print(
        f"P: {p}\nQ: {q}\nN: {key.n}\nphi(N): {key.phi}\n"
        f"Chosen e: {key.e}\nd: {key.d}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())