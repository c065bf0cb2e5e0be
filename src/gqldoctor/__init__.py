# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
gqldoctor package entrypoint.

Diagnoses why a GraphQL HTTP or WebSocket endpoint fails from a browser client:
unreachable hosts, authentication walls, missing CORS headers and broken or
disabled introspection. Network access is abstracted behind injectable HTTP and
WebSocket client interfaces, and results are modeled with typed dataclasses.
"""

from .config import DiagnosticSettings, HttpSettings, WebSocketSettings, load_http_settings
from .diagnose import DiagnosticEngine, render_report
from .http import HttpClient, HttpRequest, HttpResponse, HttpxClient, create_default_http_client
from .log import setup_logging
from .models import Diagnosis, DiagnosisCategory, DiagnosisKind, Endpoint, Report, TransportKind
from .runtime import GraphQLDoctor
from .version import __version__
from .ws import WebSocketClient, WebsocketsClient, create_default_websocket_client

__all__ = [
    "Diagnosis",
    "DiagnosisCategory",
    "DiagnosisKind",
    "DiagnosticEngine",
    "DiagnosticSettings",
    "Endpoint",
    "GraphQLDoctor",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "Report",
    "TransportKind",
    "WebSocketClient",
    "WebSocketSettings",
    "WebsocketsClient",
    "create_default_http_client",
    "create_default_websocket_client",
    "load_http_settings",
    "render_report",
    "setup_logging",
    "__version__",
]
