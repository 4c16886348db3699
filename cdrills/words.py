"""Reverse each word of a line of text in place."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_WORD = re.compile(r"[^ \n]+")


def reverse_words(text: str) -> str:
    """Reverse the letters of each word; words are split by spaces and newlines."""
    return _WORD.sub(lambda match: match.group()[::-1], text)


def read_line(stream: TextIO) -> str:
    """Read one line, keeping its newline when there is one."""
    return stream.readline()


def main(argv: list[str] | None = None) -> int:
    """Read a line and print it with every word reversed."""
    print("Enter the string: ", end="", flush=True)
    text = read_line(sys.stdin)
    print(f"New String is: {reverse_words(text)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())