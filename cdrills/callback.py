"""Call a function through a reference to it."""

from __future__ import annotations

import sys
from typing import Callable, TextIO, TypeVar

_T = TypeVar("_T")
_R = TypeVar("_R")


def show_value(a: int, out: TextIO | None = None) -> None:
    """Print the value handed in."""
    print(f"Value of a is {a}", file=out if out is not None else sys.stdout)


def invoke(func: Callable[[_T], _R], value: _T) -> _R:
    """Call ``func`` with ``value`` and return its result."""
    return func(value)


def main(argv: list[str] | None = None) -> int:
    """Show the value 10 through a function reference."""
    invoke(show_value, 10)
    return 0


if __name__ == "__main__":
    sys.exit(main())