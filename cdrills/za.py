"""Input validation for the fields of a ZA (alphanumeric PIN) host command."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Iterable, TextIO, TypeVar

PIN_LEN = 2
SALT_LEN = 16
LMK_ID_LEN = 2
ATTEMPTS = 3

_BLOCK_SIZES = {"0": 32, "1": 48, "7": 64}
_LENGTH_RANGES = {"0": (6, 16), "1": (6, 20), "7": (6, 30)}
_DEFAULT_PIN_FORMAT = "7"

_T = TypeVar("_T")


class LmkScheme(enum.Enum):
    """How the local master key is held."""

    VARIANT = 0
    KEYBLOCK = 1


class ZaError(Exception):
    """A field could not be read; ``code`` is the process exit status."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.code = code


def block_size(pin_format: str) -> int:
    """Return the PIN block size for a PIN format."""
    try:
        return _BLOCK_SIZES[pin_format]
    except KeyError:
        raise ValueError(f"invalid PIN format {pin_format!r}") from None


def parse_pin_format(text: str) -> str:
    """Parse a PIN format; an empty line selects the default ``7``."""
    first = text.rstrip("\n")[:1]
    if not first:
        return _DEFAULT_PIN_FORMAT
    if first in _BLOCK_SIZES:
        return first
    raise ValueError(f"invalid PIN format {first!r}")


def pin_length_range(pin_format: str) -> tuple[int, int]:
    """Return the smallest and largest PIN length allowed for a format."""
    try:
        return _LENGTH_RANGES[pin_format]
    except KeyError:
        raise ValueError(f"invalid PIN format {pin_format!r}") from None


def parse_pin_length(pin_format: str, text: str) -> int:
    """Parse a PIN length and check it against the format's range."""
    low, high = pin_length_range(pin_format)
    length = int(text.strip())
    if not low <= length <= high:
        raise ValueError(f"PIN length {length} is outside {low}..{high}")
    return length


def parse_pin_salt(text: str) -> str:
    """Parse a PIN salt: exactly 16 characters, or empty for a random salt."""
    salt = text.split("\n", 1)[0]
    if len(salt) not in (0, SALT_LEN):
        raise ValueError(f"PIN salt must have {SALT_LEN} characters, got {len(salt)}")
    return salt


def _ask(
    lines: Iterable[str],
    out: TextIO,
    prompt: str,
    parse: Callable[[str], _T],
    failure: str,
    code: int,
) -> _T:
    source = iter(lines)
    for _ in range(ATTEMPTS):
        out.write(prompt)
        line = next(source, None)
        if line is None:
            raise ZaError("Input ended before a valid value was given", code)
        try:
            return parse(line)
        except ValueError:
            out.write("\n")
    raise ZaError(failure, code)


def read_pin_format(lines: Iterable[str], out: TextIO) -> str:
    """Prompt for a PIN format, allowing three attempts."""
    return _ask(
        lines,
        out,
        "Enter the pin format 0/1/7 (Press Enter for default 7): ",
        parse_pin_format,
        "Invalid PIN format... (3 attempts made!)",
        4,
    )


def read_pin_length(pin_format: str, lines: Iterable[str], out: TextIO) -> int:
    """Prompt for a PIN length valid for ``pin_format``, allowing three attempts."""
    low, high = pin_length_range(pin_format)
    return _ask(
        lines,
        out,
        f"Enter pin length >={low} and <={high}: ",
        lambda text: parse_pin_length(pin_format, text),
        "Invalid PIN length... (3 attempts made!)",
        15,
    )


def read_pin_salt(pin_format: str, lines: Iterable[str], out: TextIO) -> str:
    """Prompt for a PIN salt; only format 7 takes one, others get an empty salt."""
    if pin_format != "7":
        return ""
    return _ask(
        lines,
        out,
        "Enter pin salt of length 16 (press Enter for random salt): ",
        parse_pin_salt,
        "Invalid PIN salt... (3 attempts made!)",
        16,
    )


@dataclass(frozen=True)
class ZaRequest:
    """The validated fields of a ZA command request."""

    pin_format: str
    pin_length: int
    pin_salt: str = ""
    lmk_scheme: LmkScheme = LmkScheme.KEYBLOCK

    def __post_init__(self) -> None:
        low, high = pin_length_range(self.pin_format)
        if not low <= self.pin_length <= high:
            raise ValueError(f"PIN length {self.pin_length} is outside {low}..{high}")
        parse_pin_salt(self.pin_salt)

    @property
    def block_size(self) -> int:
        """PIN block size for this request's format."""
        return block_size(self.pin_format)