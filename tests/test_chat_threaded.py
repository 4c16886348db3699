import io
import socket
import threading
import time

import pytest

from cdrills.chat_common import ChatError
from cdrills.chat_threaded import (
    ThreadedChatClient,
    ThreadedChatServer,
    parse_host_args,
    parse_node_args,
)

TIMEOUT = 5.0


def _start_server(lines):
    server = ThreadedChatServer(port=0, timeout=TIMEOUT)
    port = server.listen("127.0.0.1")
    out = io.StringIO()
    errors = []

    def run():
        try:
            server.serve(lines, out)
        except BaseException as error:  # noqa: BLE001
            errors.append(error)

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return port, out, errors, thread


def _chat(server_lines, client_lines):
    port, server_out, server_errors, thread = _start_server(server_lines)
    client = ThreadedChatClient(port=port, timeout=TIMEOUT)
    client.connect("127.0.0.1")
    client_out = io.StringIO()
    client.converse(client_lines, client_out)
    thread.join(TIMEOUT)
    return server_out, server_errors, client_out


def _reply_after(holder, marker, reply):
    """Yield ``reply`` once ``marker`` shows up in the held output."""
    deadline = time.monotonic() + TIMEOUT
    while "out" not in holder or marker not in holder["out"].getvalue():
        if time.monotonic() >= deadline:
            break
        time.sleep(0.01)
    yield reply


def test_parse_host_args_defaults():
    out = io.StringIO()
    assert parse_host_args("host", [], out) == (8080, 1)
    assert "Proceeding with the default" in out.getvalue()
    assert "host <portno> <connections>" in out.getvalue()


def test_parse_host_args_port_only():
    out = io.StringIO()
    assert parse_host_args("host", ["9000"], out) == (9000, 1)
    assert out.getvalue().startswith("Connections not provided")


def test_parse_host_args_both_given_prints_nothing():
    out = io.StringIO()
    assert parse_host_args("host", ["9000", "3"], out) == (9000, 3)
    assert out.getvalue() == ""


def test_parse_host_args_too_many():
    out = io.StringIO()
    with pytest.raises(ValueError):
        parse_host_args("host", ["1", "2", "3"], out)
    assert "Aborting" in out.getvalue()


def test_parse_node_args_defaults_and_host():
    out = io.StringIO()
    assert parse_node_args("node", [], out) == ("localhost", 8080)
    assert parse_node_args("node", ["example.com"], io.StringIO()) == ("example.com", 8080)
    assert parse_node_args("node", ["example.com", "9001"], io.StringIO()) == (
        "example.com",
        9001,
    )


def test_parse_node_args_bad_port():
    with pytest.raises(ValueError):
        parse_node_args("node", ["example.com", "abc"], io.StringIO())


def test_serve_without_listen_raises():
    server = ThreadedChatServer(port=0)
    with pytest.raises(ChatError):
        server.serve([], io.StringIO())


def test_converse_without_connect_raises():
    client = ThreadedChatClient(port=0)
    with pytest.raises(ChatError):
        client.converse([], io.StringIO())


def test_connect_refused_raises():
    probe = socket.socket()
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    client = ThreadedChatClient(port=port, timeout=TIMEOUT)
    with pytest.raises(ChatError):
        client.connect("127.0.0.1")


def test_server_messages_until_farewell():
    server_out, server_errors, client_out = _chat(["one\n", "Bye\n", "ignored\n"], [])
    assert server_errors == []
    assert client_out.getvalue() == "Server: one\nServer: Bye\n"


def test_client_stops_when_server_closes_without_farewell():
    server_out, server_errors, client_out = _chat(["only\n"], [])
    assert server_errors == []
    assert client_out.getvalue() == "Server: only\n"


def test_both_directions():
    holder = {}
    port, server_out, server_errors, thread = _start_server(
        _reply_after(holder, "hello", "Bye\n")
    )
    holder["out"] = server_out
    client = ThreadedChatClient(port=port, timeout=TIMEOUT)
    client.connect("127.0.0.1")
    client_out = io.StringIO()
    client.converse(["hello\n"], client_out)
    thread.join(TIMEOUT)
    assert server_errors == []
    assert server_out.getvalue() == "Client: hello\n"
    assert client_out.getvalue() == "Server: Bye\n"


def test_server_rejects_overlong_line():
    server_out, server_errors, client_out = _chat(["x" * 300], [])
    assert len(server_errors) == 1
    assert isinstance(server_errors[0], ValueError)
    assert client_out.getvalue() == ""