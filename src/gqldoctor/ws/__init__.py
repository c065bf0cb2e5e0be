# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""WebSocket client exports."""

from .adapters import StubWebSocketClient
from .client import WebSocketClient, create_default_websocket_client
from .websockets_client import WebsocketsClient

__all__ = [
    "StubWebSocketClient",
    "WebSocketClient",
    "WebsocketsClient",
    "create_default_websocket_client",
]
