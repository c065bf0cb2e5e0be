# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""WebSocket client abstraction and factory."""

from typing import Protocol

from ..config import WebSocketSettings, load_websocket_settings
from ..models.probe import ProbeOutcome


class WebSocketClient(Protocol):
    """
    Minimal protocol for a WebSocket reachability check.

    ``connect`` blocks until exactly one terminal outcome is known: a connect
    failure, a post-connect error, or a close. It must not raise for network
    failures.
    """

    def connect(self, url: str, origin: str) -> ProbeOutcome: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_websocket_client(settings: WebSocketSettings | None = None) -> WebSocketClient:
    """Factory for the default websockets-backed client."""
    from .websockets_client import WebsocketsClient

    return WebsocketsClient(settings or load_websocket_settings())
