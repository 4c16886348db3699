"""A one-to-one chat where both sides may speak at any time.

Reading and writing run on separate threads, so messages are shown as
soon as they arrive. The server ends the chat by sending a farewell; the
client stops once it receives one.
"""

from __future__ import annotations

import os
import socket
import sys
import threading
from typing import Iterable, TextIO

from .chat_common import (
    ACCEPT_ERROR,
    BIND_ERROR,
    BUFFER_SIZE,
    CONNECT_ERROR,
    CONNECTIONS,
    HOST_ERROR,
    LISTEN_ERROR,
    LOCAL_HOSTNAME,
    PORTNO,
    READ_ERROR,
    SOCKET_ERROR,
    WRITE_ERROR,
    ChatError,
    decode_message,
    encode_message,
    is_farewell,
    usage,
)

_HOST_HINT = "<portno> <connections>"
_NODE_HINT = "<hostname|hostaddress> <portno>"
_WRITER_JOIN_TIMEOUT = 0.5


def _fail(message: str, error: BaseException) -> ChatError:
    return ChatError(f"{message}: {error}")


def _new_socket() -> socket.socket:
    try:
        return socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as error:
        raise _fail(SOCKET_ERROR, error) from error


def _send(sock: socket.socket, text: str) -> None:
    data = encode_message(text)
    try:
        sock.sendall(data)
    except OSError as error:
        raise _fail(WRITE_ERROR, error) from error


def _receive(sock: socket.socket) -> bytes | None:
    """Read one message block; None when the peer has closed the connection."""
    block = bytearray()
    while len(block) < BUFFER_SIZE:
        try:
            chunk = sock.recv(BUFFER_SIZE - len(block))
        except OSError as error:
            raise _fail(READ_ERROR, error) from error
        if not chunk:
            return None
        block += chunk
    return bytes(block)


def _relay(sock: socket.socket, out: TextIO, label: str, stop_on_farewell: bool) -> bool:
    """Write incoming messages to ``out``; return True when a farewell ended it."""
    while True:
        block = _receive(sock)
        if block is None:
            return False
        message = decode_message(block)
        out.write(f"{label}: {message}")
        out.flush()
        if stop_on_farewell and is_farewell(message):
            return True


def _shutdown(sock: socket.socket) -> None:
    try:
        sock.shutdown(socket.SHUT_RDWR)
    except OSError:
        pass


def _int_arg(text: str, name: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"invalid {name}: {text!r}") from None


def parse_host_args(prog: str, args: list[str], out: TextIO) -> tuple[int, int]:
    """Return the port and connection count from the server's arguments.

    Missing values fall back to the defaults, with a note written to
    ``out``. Raises ValueError for more than two arguments or non-numbers.
    """
    if not args:
        out.write(
            "Portno and Connections not provided... Proceeding with the default\n"
            f"Portno: {PORTNO}\nConnections: {CONNECTIONS}\n\n"
        )
        out.write(usage(prog, _HOST_HINT))
        return PORTNO, CONNECTIONS
    if len(args) == 1:
        out.write(
            "Connections not provided... Proceeding with the default\n"
            f"Connections: {CONNECTIONS}\n\n"
        )
        out.write(usage(prog, _HOST_HINT))
        return _int_arg(args[0], "port number"), CONNECTIONS
    if len(args) == 2:
        return _int_arg(args[0], "port number"), _int_arg(args[1], "connection count")
    out.write("Invalid number of arguments... Aborting the process.\n\n")
    out.write(usage(prog, _HOST_HINT))
    raise ValueError("Invalid number of arguments")


def parse_node_args(prog: str, args: list[str], out: TextIO) -> tuple[str, int]:
    """Return the host and port from the client's arguments.

    Missing values fall back to the defaults, with a note written to
    ``out``. Raises ValueError for more than two arguments or a bad port.
    """
    if not args:
        out.write(
            "Host and Portno not provided... Proceeding with the default\n"
            f"Host: {LOCAL_HOSTNAME}\nPortno: {PORTNO}\n\n"
        )
        out.write(usage(prog, _NODE_HINT))
        return LOCAL_HOSTNAME, PORTNO
    if len(args) == 1:
        out.write(
            "Portno not provided... Proceeding with the default\n"
            f"Portno: {PORTNO}\n\n"
        )
        out.write(usage(prog, _NODE_HINT))
        return args[0], PORTNO
    if len(args) == 2:
        return args[0], _int_arg(args[1], "port number")
    out.write("Invalid number of arguments... Aborting the process.\n\n")
    out.write(usage(prog, _NODE_HINT))
    raise ValueError("Invalid number of arguments")


class ThreadedChatServer:
    """Accepts one client; shows its messages while sending lines to it."""

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

    def __enter__(self) -> ThreadedChatServer:
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
        """Accept a client and chat until a farewell is sent or the lines end.

        Client messages are written to ``out`` by a reader thread while
        ``lines`` are sent. The server is closed afterwards.
        """
        if self._listener is None:
            raise ChatError("server is not listening")
        stream = out if out is not None else sys.stdout
        errors: list[BaseException] = []

        try:
            try:
                conn, _ = self._listener.accept()
            except OSError as error:
                raise _fail(ACCEPT_ERROR, error) from error
            with conn:
                conn.settimeout(self.timeout)

                def read() -> None:
                    try:
                        _relay(conn, stream, "Client", stop_on_farewell=False)
                    except ChatError as error:
                        errors.append(error)

                reader = threading.Thread(target=read, daemon=True)
                reader.start()
                try:
                    for line in lines:
                        _send(conn, line)
                        if is_farewell(line):
                            break
                finally:
                    _shutdown(conn)
                    reader.join()
        finally:
            self.close()

    def close(self) -> None:
        """Stop listening."""
        if self._listener is not None:
            self._listener.close()
            self._listener = None


class ThreadedChatClient:
    """Connects to a server; sends lines while showing what it says."""

    def __init__(self, port: int = PORTNO, timeout: float | None = None) -> None:
        self.port = port
        self.timeout = timeout
        self._sock: socket.socket | None = None

    def __enter__(self) -> ThreadedChatClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def connect(self, host: str = LOCAL_HOSTNAME) -> None:
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
        """Send ``lines`` from a writer thread and show the server's messages.

        Stops when the server says farewell or closes the connection, then
        closes the client. A line too long for one message raises ValueError.
        """
        if self._sock is None:
            raise ChatError("client is not connected")
        sock = self._sock
        stream = out if out is not None else sys.stdout
        finished = threading.Event()
        errors: list[BaseException] = []

        def write() -> None:
            try:
                for line in lines:
                    if finished.is_set():
                        return
                    _send(sock, line)
            except (ChatError, ValueError) as error:
                errors.append(error)

        writer = threading.Thread(target=write, daemon=True)
        writer.start()
        try:
            _relay(sock, stream, "Server", stop_on_farewell=True)
        finally:
            finished.set()
            _shutdown(sock)
            writer.join(_WRITER_JOIN_TIMEOUT)
            self.close()
        for error in errors:
            if isinstance(error, ValueError):
                raise error

    def close(self) -> None:
        """Close the connection."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None


def _prog(default: str) -> str:
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else default


def host_main(argv: list[str] | None = None) -> int:
    """Run a threaded chat server, answering from standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        port, connections = parse_host_args(_prog("chat-host"), args, sys.stdout)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print("Starting connection process...\n")
    server = ThreadedChatServer(port, connections)
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
    """Connect to a threaded chat server and talk from standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        host, port = parse_node_args(_prog("chat-node"), args, sys.stdout)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print("Starting connection process...\n")
    client = ThreadedChatClient(port)
    try:
        client.connect(host)
        client.converse(sys.stdin, sys.stdout)
    except (ChatError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(host_main())