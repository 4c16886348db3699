"""A one-to-one chat where server and client take turns to speak."""

from __future__ import annotations

import socket
import sys
from typing import Iterable, TextIO

from .chat_common import (
    ACCEPT_ERROR,
    BIND_ERROR,
    BUFFER_SIZE,
    CONNECT_ERROR,
    CONNECTIONS,
    HOST_ERROR,
    HOSTNAME,
    LISTEN_ERROR,
    PORTNO,
    READ_ERROR,
    SOCKET_ERROR,
    WRITE_ERROR,
    ChatError,
    decode_message,
    encode_message,
    is_farewell,
)


def _fail(message: str, error: BaseException) -> ChatError:
    return ChatError(f"{message}: {error}")


def _new_socket() -> socket.socket:
    try:
        return socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as error:
        raise _fail(SOCKET_ERROR, error) from error


def _receive(sock: socket.socket) -> bytes:
    block = bytearray()
    while len(block) < BUFFER_SIZE:
        try:
            chunk = sock.recv(BUFFER_SIZE - len(block))
        except OSError as error:
            raise _fail(READ_ERROR, error) from error
        if not chunk:
            raise ChatError(f"{READ_ERROR}: connection closed by peer")
        block += chunk
    return bytes(block)


def _send(sock: socket.socket, text: str) -> None:
    data = encode_message(text)
    try:
        sock.sendall(data)
    except OSError as error:
        raise _fail(WRITE_ERROR, error) from error


class ChatServer:
    """Accepts one client and alternates: read its message, then answer."""

    def __init__(
        self,
        port: int = PORTNO,
        connections: int = CONNECTIONS,
        timeout: float | None = None,
    ) -> None:
        self.port = port
        self.connections = connections
        self.timeout = timeout
        self._listener: socket.socket | None = None

    def __enter__(self) -> ChatServer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def listen(self, host: str = "") -> int:
        """Bind to ``host`` and the server's port and listen; return the port."""
        listener = _new_socket()
        listener.settimeout(self.timeout)
        try:
            listener.bind((host, self.port))
        except OSError as error:
            listener.close()
            raise _fail(BIND_ERROR, error) from error
        try:
            listener.listen(self.connections)
        except OSError as error:
            listener.close()
            raise _fail(LISTEN_ERROR, error) from error
        self._listener = listener
        self.port = listener.getsockname()[1]
        return self.port

    def serve(self, lines: Iterable[str], out: TextIO | None = None) -> None:
        """Accept a client and chat until a farewell is sent or input ends.

        Each client message is written to ``out``; each answer is taken
        from ``lines``. The server is closed afterwards.
        """
        if self._listener is None:
            raise ChatError("server is not listening")
        stream = out if out is not None else sys.stdout
        source = iter(lines)
        try:
            try:
                conn, _ = self._listener.accept()
            except OSError as error:
                raise _fail(ACCEPT_ERROR, error) from error
            with conn:
                conn.settimeout(self.timeout)
                while True:
                    message = decode_message(_receive(conn))
                    stream.write(f"Client: {message}")
                    stream.flush()
                    line = next(source, None)
                    if line is None:
                        break
                    _send(conn, line)
                    if is_farewell(line):
                        break
        finally:
            self.close()

    def close(self) -> None:
        """Stop listening."""
        if self._listener is not None:
            self._listener.close()
            self._listener = None


class ChatClient:
    """Connects to a server and alternates: send a line, then read the answer."""

    def __init__(self, port: int = PORTNO, timeout: float | None = None) -> None:
        self.port = port
        self.timeout = timeout
        self._sock: socket.socket | None = None

    def __enter__(self) -> ChatClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def connect(self, host: str = HOSTNAME) -> None:
        """Resolve ``host`` and connect to it on the client's port."""
        try:
            address = socket.gethostbyname(host)
        except OSError as error:
            raise _fail(HOST_ERROR, error) from error
        sock = _new_socket()
        sock.settimeout(self.timeout)
        try:
            sock.connect((address, self.port))
        except OSError as error:
            sock.close()
            raise _fail(CONNECT_ERROR, error) from error
        self._sock = sock

    def converse(self, lines: Iterable[str], out: TextIO | None = None) -> None:
        """Send each line and write the server's answer to ``out``.

        Stops when the server says farewell or the lines run out, then
        closes the connection.
        """
        if self._sock is None:
            raise ChatError("client is not connected")
        stream = out if out is not None else sys.stdout
        try:
            for line in lines:
                _send(self._sock, line)
                message = decode_message(_receive(self._sock))
                stream.write(f"Server: {message}")
                stream.flush()
                if is_farewell(message):
                    break
        finally:
            self.close()

    def close(self) -> None:
        """Close the connection."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None


def host_main(argv: list[str] | None = None) -> int:
    """Run a chat server on the default port, answering from standard input."""
    server = ChatServer()
    try:
        server.listen()
        server.serve(sys.stdin, sys.stdout)
    except (ChatError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1
    finally:
        server.close()
    return 0


def node_main(argv: list[str] | None = None) -> int:
    """Connect to the default chat server and talk from standard input."""
    client = ChatClient()
    try:
        client.connect(HOSTNAME)
        client.converse(sys.stdin, sys.stdout)
    except (ChatError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(host_main())