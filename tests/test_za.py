import io

import pytest

from cdrills.za import (
    LmkScheme,
    ZaError,
    ZaRequest,
    block_size,
    parse_pin_format,
    parse_pin_length,
    parse_pin_salt,
    pin_length_range,
    read_pin_format,
    read_pin_length,
    read_pin_salt,
)

SALT = "ABCDEFGHIJKLMNOP"


@pytest.mark.parametrize("fmt, size", [("0", 32), ("1", 48), ("7", 64)])
def test_block_size(fmt, size):
    assert block_size(fmt) == size


def test_block_size_invalid():
    with pytest.raises(ValueError):
        block_size("3")


@pytest.mark.parametrize("text, expected", [("\n", "7"), ("", "7"), ("0\n", "0"), ("1", "1"), ("7\n", "7")])
def test_parse_pin_format(text, expected):
    assert parse_pin_format(text) == expected


@pytest.mark.parametrize("text", ["2\n", "x", " 0"])
def test_parse_pin_format_invalid(text):
    with pytest.raises(ValueError):
        parse_pin_format(text)


@pytest.mark.parametrize("fmt, bounds", [("0", (6, 16)), ("1", (6, 20)), ("7", (6, 30))])
def test_pin_length_range(fmt, bounds):
    assert pin_length_range(fmt) == bounds


@pytest.mark.parametrize("fmt", ["0", "1", "7"])
def test_parse_pin_length_bounds(fmt):
    low, high = pin_length_range(fmt)
    assert parse_pin_length(fmt, f"{low}\n") == low
    assert parse_pin_length(fmt, f"{high}\n") == high
    with pytest.raises(ValueError):
        parse_pin_length(fmt, f"{low - 1}\n")
    with pytest.raises(ValueError):
        parse_pin_length(fmt, f"{high + 1}\n")


def test_parse_pin_length_not_a_number():
    with pytest.raises(ValueError):
        parse_pin_length("7", "ab\n")


def test_parse_pin_salt():
    assert parse_pin_salt("\n") == ""
    assert parse_pin_salt(SALT + "\n") == SALT
    with pytest.raises(ValueError):
        parse_pin_salt("short\n")


def test_read_pin_format_retries():
    out = io.StringIO()
    assert read_pin_format(["x\n", "1\n"], out) == "1"
    assert out.getvalue().count("Enter the pin format") == 2


def test_read_pin_format_gives_up():
    out = io.StringIO()
    with pytest.raises(ZaError) as info:
        read_pin_format(["a\n", "b\n", "c\n", "1\n"], out)
    assert info.value.code == 4
    assert "3 attempts made" in str(info.value)


def test_read_pin_format_end_of_input():
    with pytest.raises(ZaError) as info:
        read_pin_format([], io.StringIO())
    assert info.value.code == 4


def test_read_pin_length():
    out = io.StringIO()
    assert read_pin_length("0", ["20\n", "16\n"], out) == 16
    assert "Enter pin length >=6 and <=16: " in out.getvalue()


def test_read_pin_length_gives_up():
    with pytest.raises(ZaError) as info:
        read_pin_length("1", ["3\n", "40\n", "x\n"], io.StringIO())
    assert info.value.code == 15


def test_read_pin_salt_only_for_format_seven():
    out = io.StringIO()
    assert read_pin_salt("0", [SALT + "\n"], out) == ""
    assert out.getvalue() == ""


def test_read_pin_salt_accepts_salt():
    assert read_pin_salt("7", ["bad\n", SALT + "\n"], io.StringIO()) == SALT


def test_read_pin_salt_gives_up():
    with pytest.raises(ZaError) as info:
        read_pin_salt("7", ["a\n", "b\n", "c\n"], io.StringIO())
    assert info.value.code == 16


def test_request_block_size_and_defaults():
    request = ZaRequest(pin_format="1", pin_length=8)
    assert request.block_size == 48
    assert request.lmk_scheme is LmkScheme.KEYBLOCK
    assert request.pin_salt == ""


@pytest.mark.parametrize(
    "kwargs",
    [
        {"pin_format": "0", "pin_length": 17},
        {"pin_format": "9", "pin_length": 8},
        {"pin_format": "7", "pin_length": 8, "pin_salt": "abc"},
    ],
)
def test_request_validation(kwargs):
    with pytest.raises(ValueError):
        ZaRequest(**kwargs)