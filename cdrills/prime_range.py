"""Find the prime numbers in a range, by trial division or by a sieve."""

from __future__ import annotations

import enum
import math
import os
import sys
from dataclasses import dataclass, field
from typing import Iterator, TextIO


class Algorithm(enum.IntEnum):
    """How the primes are found."""

    SQRT = 0
    SIEVE = 1


def is_prime(num: int) -> bool:
    """Return True when ``num`` is prime, testing divisors up to its square root."""
    if num <= 1:
        return False
    return all(num % divisor for divisor in range(2, math.isqrt(num) + 1))


def sieve(limit: int) -> list[int]:
    """Return every prime below ``limit`` using the sieve of Eratosthenes."""
    if limit < 2:
        return []
    flags = bytearray([1]) * limit
    flags[0] = flags[1] = 0
    for index in range(2, math.isqrt(limit) + 1):
        if flags[index]:
            start = index * index
            flags[start::index] = bytes(len(range(start, limit, index)))
    return [number for number, flag in enumerate(flags) if flag]


@dataclass
class PrimeRange:
    """The primes between ``a`` and ``b`` found with a chosen algorithm.

    The sieve covers every number from 0 up to ``b``; only trial division
    honours the lower bound ``a``.
    """

    a: int
    b: int
    algorithm: Algorithm = Algorithm.SIEVE
    primes: list[int] | None = field(default=None, init=False)

    def find_primes(self) -> list[int]:
        """Find, store and return the primes for this range."""
        if self.algorithm is Algorithm.SQRT:
            self.primes = [num for num in range(self.a, self.b + 1) if is_prime(num)]
        else:
            self.primes = sieve(self.b + 1)
        return self.primes

    @property
    def total(self) -> int:
        """Sum of the primes found."""
        if self.primes is None:
            self.find_primes()
        return sum(self.primes)

    def info(self) -> str:
        """Describe the range."""
        return f"Prime Numbers in the range {self.a} and {self.b}"

    def report(self) -> str:
        """Return the listing of the primes followed by their sum."""
        if self.primes is None:
            self.find_primes()
        listing = "".join(f"{prime} " for prime in self.primes)
        info = self.info()
        return f"\n{info} are: {listing}\n\nSum of {info} is: {self.total}\n"


def choose_algorithm(prog: str, args: list[str]) -> Algorithm:
    """Print usage and pick the algorithm from the command arguments.

    Raises ValueError when more than one argument is given.
    """
    print("You can run the program using either")
    print(prog)
    print("command or,by providing options like ")
    print(f"{prog} <algo_type>")
    print("0 for SQRT 1 for SIEVE (by default it is - 1).")
    print()

    if not args:
        return Algorithm.SIEVE
    if len(args) == 1:
        first = args[0][:1]
        if first == "0":
            return Algorithm.SQRT
        if first == "1":
            return Algorithm.SIEVE
        print(f"Invalid <algo_type> {first}")
        print("Proceeding with default...")
        print()
        return Algorithm.SIEVE
    raise ValueError("Invalid argument count... Aborting")


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_numbers(stream: TextIO, count: int) -> list[int]:
    tokens = _tokens(stream)
    numbers = []
    for _ in range(count):
        token = next(tokens, None)
        if token is None:
            raise ValueError("not enough numbers given")
        numbers.append(int(token))
    return numbers


def main(argv: list[str] | None = None) -> int:
    """Run the prime finder on two numbers read from standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "prime_range"
    try:
        algorithm = choose_algorithm(prog, args)
    except ValueError as error:
        print(error)
        return 1

    print(f"Algo used: {algorithm.name}")
    print()
    print("Enter the number a and b: ", end="", flush=True)
    try:
        a, b = _read_numbers(sys.stdin, 2)
    except ValueError as error:
        print(f"\nInvalid input: {error}", file=sys.stderr)
        return 1

    data = PrimeRange(a, b, algorithm)
    data.find_primes()
    print(data.report(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())