# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Normalized probe outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from ..errors import TransportErrorKind
from ..http.models import HttpResponse


@dataclass(frozen=True)
class ProbeSuccess:
    """A response was received; the status may still be an HTTP error."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""
    truncated: bool = False


@dataclass(frozen=True)
class TransportFailure:
    """No usable response: the operation failed below HTTP, or a WebSocket upgrade/connection failed."""

    kind: TransportErrorKind
    message: str = ""
    error_type: str | None = None
    status_code: int | None = None
    close_code: int | None = None


@dataclass(frozen=True)
class ConnectionClosed:
    """A WebSocket connection opened and then ended without an error."""

    close_code: int | None = None
    reason: str = ""
    idle: bool = False


ProbeOutcome = Union[ProbeSuccess, TransportFailure, ConnectionClosed]


def outcome_from_response(response: HttpResponse) -> ProbeOutcome:
    """Convert an HttpClient response into a probe outcome."""
    if response.ok and response.status_code is not None:
        return ProbeSuccess(
            status_code=response.status_code,
            headers=dict(response.headers or {}),
            body=response.text or "",
            truncated=bool(response.meta.get("body_truncated")),
        )
    return TransportFailure(
        kind=response.error_kind or TransportErrorKind.UNKNOWN,
        message=response.error_message or "",
        error_type=response.error_type,
    )
