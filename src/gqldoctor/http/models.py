# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used by the probes."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from ..errors import TransportErrorKind

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | str | None = None
    timeout: float | None = None

    @classmethod
    def json_post(cls, url: str, payload: dict[str, Any], headers: Headers | None = None) -> HttpRequest:
        """Build a POST request carrying a JSON document."""
        merged: Headers = {"content-type": "application/json"}
        merged.update(headers or {})
        return cls(url=url, method="POST", headers=merged, body=json.dumps(payload))


@dataclass
class HttpResponse:
    """
    Normalized HTTP response.

    ``ok`` only reports whether a response was received at all; HTTP error statuses
    still produce ``ok=True`` so callers inspect ``status_code`` explicitly.
    """

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    text: str = ""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    error_kind: TransportErrorKind | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def failure(cls, exc: BaseException, kind: TransportErrorKind) -> HttpResponse:
        return cls(
            ok=False,
            error_message=str(exc),
            error_type=type(exc).__name__,
            error_kind=kind,
        )
