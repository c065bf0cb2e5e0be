# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

import ssl

from websockets.datastructures import Headers
from websockets.exceptions import ConnectionClosedError, ConnectionClosedOK, InvalidStatus
from websockets.frames import Close
from websockets.http11 import Response

from gqldoctor.config import WebSocketSettings
from gqldoctor.diagnose.classifier import classify
from gqldoctor.errors import TransportErrorKind
from gqldoctor.models import ConnectionClosed, TransportFailure
from gqldoctor.ws import WebsocketsClient


class FakeConnection:
    def __init__(self, events):
        self.events = list(events)
        self.timeouts = []
        self.closed = False

    def recv(self, timeout=None):
        self.timeouts.append(timeout)
        event = self.events.pop(0) if self.events else TimeoutError()
        if isinstance(event, BaseException):
            raise event
        return event

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True


class FakeConnector:
    def __init__(self, result):
        self.result = result
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result


def _client(result, **settings):
    connector = FakeConnector(result)
    return WebsocketsClient(WebSocketSettings(**settings), connector=connector), connector


def test_clean_close_is_success_and_origin_is_sent():
    connection = FakeConnection([ConnectionClosedOK(Close(1000, "bye"), None)])
    client, connector = _client(connection, subprotocols=("graphql-transport-ws",))
    outcome = client.connect("ws://localhost:4000/graphql", "https://studio.apollographql.com")
    assert outcome == ConnectionClosed(close_code=1000, reason="bye")
    assert connection.closed is True
    url, kwargs = connector.calls[0]
    assert url == "ws://localhost:4000/graphql"
    assert kwargs["origin"] == "https://studio.apollographql.com"
    assert kwargs["subprotocols"] == ["graphql-transport-ws"]
    assert "ssl" not in kwargs


def test_messages_before_close_are_ignored():
    connection = FakeConnection(["hello", ConnectionClosedOK(Close(1000, ""), None)])
    client, _ = _client(connection)
    assert isinstance(client.connect("ws://localhost/graphql", "https://o"), ConnectionClosed)


def test_idle_connection_counts_as_reachable():
    connection = FakeConnection([TimeoutError()])
    client, _ = _client(connection, close_wait=0.5)
    outcome = client.connect("ws://localhost/graphql", "https://o")
    assert outcome == ConnectionClosed(idle=True)
    assert 0 < connection.timeouts[0] <= 0.5


def test_post_connect_drop_without_close_frame_is_abnormal_closure():
    connection = FakeConnection([ConnectionClosedError(None, None)])
    client, _ = _client(connection)
    outcome = client.connect("ws://localhost/graphql", "https://o")
    assert isinstance(outcome, TransportFailure)
    assert outcome.kind == TransportErrorKind.ABNORMAL_CLOSURE
    assert outcome.close_code is None
    assert outcome.error_type == "ConnectionClosedError"
    assert outcome.message


def test_application_close_code_is_reachable():
    # graphql-ws closes with 4406 when the subprotocol is not acceptable.
    connection = FakeConnection([ConnectionClosedError(Close(4406, "Subprotocol not acceptable"), None)])
    client, _ = _client(connection)
    outcome = client.connect("ws://localhost/graphql", "https://studio.apollographql.com")
    assert outcome == ConnectionClosed(close_code=4406, reason="Subprotocol not acceptable")
    assert classify(outcome, source="WebSocket") is None


def test_server_error_close_frame_is_reachable():
    connection = FakeConnection([ConnectionClosedError(Close(1011, "internal error"), None)])
    client, _ = _client(connection)
    assert client.connect("ws://localhost/graphql", "https://o") == ConnectionClosed(
        close_code=1011, reason="internal error"
    )


def test_socket_error_after_connect_is_abnormal_closure():
    connection = FakeConnection([ConnectionResetError(104, "Connection reset by peer")])
    client, _ = _client(connection)
    outcome = client.connect("ws://localhost/graphql", "https://o")
    assert outcome.kind == TransportErrorKind.ABNORMAL_CLOSURE
    assert outcome.error_type == "ConnectionResetError"
    assert connection.closed is True


def test_user_agent_header_comes_from_settings():
    client, connector = _client(FakeConnection([]), user_agent="gqldoctor-ci/1.0", close_wait=0.01)
    client.connect("ws://localhost/graphql", "https://o")
    assert connector.calls[0][1]["user_agent_header"] == "gqldoctor-ci/1.0"


def test_refused_connection_is_transport_failure():
    client, _ = _client(ConnectionRefusedError(111, "Connection refused"))
    outcome = client.connect("wss://localhost/graphql", "https://o")
    assert outcome.kind == TransportErrorKind.CONNECTION_REFUSED
    assert outcome.error_type == "ConnectionRefusedError"


def test_rejected_upgrade_keeps_status():
    rejection = InvalidStatus(Response(403, "Forbidden", Headers(), b""))
    client, _ = _client(rejection)
    outcome = client.connect("ws://localhost/graphql", "https://o")
    assert outcome.kind == TransportErrorKind.HANDSHAKE_REJECTED
    assert outcome.status_code == 403


def test_insecure_tls_context_for_wss_only():
    client, connector = _client(FakeConnection([]), verify_ssl=False, close_wait=0.01)
    client.connect("wss://localhost/graphql", "https://o")
    context = connector.calls[0][1]["ssl"]
    assert isinstance(context, ssl.SSLContext)
    assert context.verify_mode == ssl.CERT_NONE

    client.connect("ws://localhost/graphql", "https://o")
    assert "ssl" not in connector.calls[1][1]
