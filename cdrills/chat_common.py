"""Constants and message framing shared by the chat programs."""

from __future__ import annotations

BUFFER_SIZE = 256
PORTNO = 8080
CONNECTIONS = 1
HOSTNAME = "127.0.0.1"
LOCAL_HOSTNAME = "localhost"
FAREWELL = "Bye"

SOCKET_ERROR = "Error in creating socket..."
BIND_ERROR = "Error in binding socket..."
LISTEN_ERROR = "Error in listening on socket..."
READ_ERROR = "Error in reading on socket..."
WRITE_ERROR = "Error in writing on socket..."
ACCEPT_ERROR = "Error in accepting the connection on socket..."
HOST_ERROR = "Error, no such host..."
CONNECT_ERROR = "Error connecting to socket..."


class ChatError(Exception):
    """A step of setting up or running a chat connection failed."""


def is_farewell(message: str) -> bool:
    """Return True when ``message`` asks to close the connection."""
    return message.startswith(FAREWELL)


def encode_message(text: str) -> bytes:
    """Encode ``text`` as one fixed-size, zero-padded message block.

    Raises ValueError when the text does not fit in a block with its
    terminating zero byte.
    """
    data = text.encode("utf-8")
    if len(data) >= BUFFER_SIZE:
        raise ValueError(
            f"message of {len(data)} bytes does not fit in {BUFFER_SIZE - 1} bytes"
        )
    return data.ljust(BUFFER_SIZE, b"\0")


def decode_message(data: bytes) -> str:
    """Decode a message block: the text before the first zero byte."""
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def usage(prog: str, hint: str) -> str:
    """Return the text explaining how to start ``prog``."""
    return f"You can either run command as,\n{prog}\nor as,\n{prog} {hint}\n\n"