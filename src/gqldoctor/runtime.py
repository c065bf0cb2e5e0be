# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level facade wiring settings, clients and the diagnostic engine."""

from __future__ import annotations

from contextlib import suppress

from .config import (
    DiagnosticSettings,
    HttpSettings,
    WebSocketSettings,
    load_diagnostic_settings,
    load_http_settings,
    load_websocket_settings,
)
from .diagnose.engine import DiagnosticEngine
from .http.client import HttpClient, create_default_http_client
from .models import Endpoint, Report
from .ws.client import WebSocketClient, create_default_websocket_client


class GraphQLDoctor:
    """
    Convenience wrapper owning the HTTP and WebSocket clients for one or more runs.

    Use as a context manager so the underlying connection pools are closed.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        websocket_client: WebSocketClient | None = None,
        *,
        http_settings: HttpSettings | None = None,
        websocket_settings: WebSocketSettings | None = None,
        settings: DiagnosticSettings | None = None,
    ):
        self.http_settings = http_settings or load_http_settings()
        self.websocket_settings = websocket_settings or load_websocket_settings()
        self.settings = settings or load_diagnostic_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)
        self.websocket_client = websocket_client or create_default_websocket_client(self.websocket_settings)
        self.engine = DiagnosticEngine(
            http_client=self.http_client,
            websocket_client=self.websocket_client,
            settings=self.settings,
        )

    def diagnose(self, endpoint: str, *, origin: str | None = None) -> Report:
        return self.engine.run(Endpoint.from_url(endpoint), origin or self.settings.origin)

    def close(self) -> None:
        for client in (self.http_client, self.websocket_client):
            with suppress(Exception):
                if hasattr(client, "close"):
                    client.close()

    def __enter__(self) -> GraphQLDoctor:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
