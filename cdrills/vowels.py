"""Replace every vowel of a line of text with a chosen character."""

from __future__ import annotations

import sys
from typing import TextIO

_VOWELS = frozenset("aeiouAEIOU")


def is_vowel(ch: str) -> bool:
    """Return True when ``ch`` is an English vowel of either case."""
    return ch in _VOWELS


def replace_vowels(text: str, ch: str) -> str:
    """Return ``text`` with each vowel replaced by ``ch``."""
    return "".join(ch if is_vowel(c) else c for c in text)


def read_line(stream: TextIO) -> str:
    """Read up to a newline or end of input; the newline is dropped."""
    line = stream.readline()
    return line.removesuffix("\n")


def main(argv: list[str] | None = None) -> int:
    """Read a line and a character, then print the line with vowels replaced."""
    print("Enter the string: ", end="", flush=True)
    text = read_line(sys.stdin)

    print()
    print("Enter the character to replaced with vowels: ", end="", flush=True)
    ch = sys.stdin.read(1)
    print()
    if not ch:
        print("No replacement character given", file=sys.stderr)
        return 1

    print(f"New String is: {replace_vowels(text, ch)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())