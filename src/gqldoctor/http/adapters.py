# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Programmable HttpClient used to drive the probes without a network."""

from __future__ import annotations

from collections.abc import Callable

from .client import HttpClient
from .models import HttpRequest, HttpResponse

Responder = Callable[[HttpRequest], HttpResponse]


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests.

    Responses are keyed by HTTP method; a value may be a fixed HttpResponse, a callable
    receiving the request, or an exception instance to raise.
    """

    def __init__(self, responses: dict[str, HttpResponse | Responder | BaseException] | None = None):
        self._responses: dict[str, HttpResponse | Responder | BaseException] = {
            method.upper(): value for method, value in (responses or {}).items()
        }
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, method: str, response: HttpResponse | Responder | BaseException) -> None:
        self._responses[method.upper()] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        configured = self._responses.get(request.method.upper())
        if configured is None:
            return HttpResponse(ok=False, error_message="No stubbed response configured")
        if isinstance(configured, BaseException):
            raise configured
        if callable(configured):
            return configured(request)
        return configured

    def close(self) -> None:
        self.closed = True
