"""Small console drills: primes, strings, toy RSA, PIN field checks, threads and sockets."""

__version__ = "0.1.0"