# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl
from collections.abc import Iterator
from enum import Enum

import httpx
from websockets.exceptions import InvalidHandshake, InvalidMessage, InvalidURI


class TransportErrorKind(str, Enum):
    NAME_RESOLUTION = "NAME_RESOLUTION"
    CONNECTION_REFUSED = "CONNECTION_REFUSED"
    PROTOCOL_MISMATCH = "PROTOCOL_MISMATCH"
    TIMEOUT = "TIMEOUT"
    INVALID_URL = "INVALID_URL"
    HANDSHAKE_REJECTED = "HANDSHAKE_REJECTED"
    ABNORMAL_CLOSURE = "ABNORMAL_CLOSURE"
    UNKNOWN = "UNKNOWN"


# Fallback markers for platforms/libraries that flatten the original OSError into a message.
_MESSAGE_MARKERS: tuple[tuple[str, TransportErrorKind], ...] = (
    ("name or service not known", TransportErrorKind.NAME_RESOLUTION),
    ("nodename nor servname", TransportErrorKind.NAME_RESOLUTION),
    ("getaddrinfo failed", TransportErrorKind.NAME_RESOLUTION),
    ("temporary failure in name resolution", TransportErrorKind.NAME_RESOLUTION),
    ("connection refused", TransportErrorKind.CONNECTION_REFUSED),
    ("actively refused", TransportErrorKind.CONNECTION_REFUSED),
    ("wrong version number", TransportErrorKind.PROTOCOL_MISMATCH),
    ("wrong_version_number", TransportErrorKind.PROTOCOL_MISMATCH),
    ("record layer failure", TransportErrorKind.PROTOCOL_MISMATCH),
)


def _exception_chain(exc: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def _categorize_single(exc: BaseException) -> TransportErrorKind | None:
    if isinstance(exc, (httpx.TimeoutException, TimeoutError, socket.timeout)):
        return TransportErrorKind.TIMEOUT

    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol, InvalidURI)):
        return TransportErrorKind.INVALID_URL

    if isinstance(exc, socket.gaierror):
        return TransportErrorKind.NAME_RESOLUTION

    if isinstance(exc, ConnectionRefusedError):
        return TransportErrorKind.CONNECTION_REFUSED

    # Certificate problems are not a protocol mismatch; they surface unclassified with the raw error.
    if isinstance(exc, ssl.SSLCertVerificationError):
        return None

    if isinstance(exc, ssl.SSLError):
        return TransportErrorKind.PROTOCOL_MISMATCH

    # The server answered with something that is not HTTP (e.g. ws:// against a TLS port).
    if isinstance(exc, (httpx.RemoteProtocolError, InvalidMessage)):
        return TransportErrorKind.PROTOCOL_MISMATCH

    return None


def categorize_exception(exc: BaseException) -> TransportErrorKind:
    """
    Map httpx/websockets/socket exceptions to a TransportErrorKind.

    httpx wraps httpcore which wraps the original socket/ssl error, so the whole
    cause chain is inspected before falling back to message markers.
    """
    for item in _exception_chain(exc):
        kind = _categorize_single(item)
        if kind is not None:
            return kind

    message = " ".join(str(item) for item in _exception_chain(exc)).lower()
    for marker, kind in _MESSAGE_MARKERS:
        if marker in message:
            return kind

    if isinstance(exc, InvalidHandshake):
        return TransportErrorKind.HANDSHAKE_REJECTED

    return TransportErrorKind.UNKNOWN


def describe_exception(exc: BaseException) -> str:
    """Render an exception as ``Type: message`` for user-facing output."""
    message = str(exc).strip()
    name = type(exc).__name__
    return f"{name}: {message}" if message else name


__all__ = ["TransportErrorKind", "categorize_exception", "describe_exception"]
