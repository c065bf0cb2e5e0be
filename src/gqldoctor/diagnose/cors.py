# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""CORS header checks for preflight and actual responses.

Both checks only look at response headers; bodies are never inspected.
"""

from __future__ import annotations

import re

from ..http.headers import header_value
from ..models import Diagnosis, DiagnosisKind, ProbeSuccess

ALLOW_METHODS = "access-control-allow-methods"
ALLOW_ORIGIN = "access-control-allow-origin"
ALLOW_CREDENTIALS = "access-control-allow-credentials"

_TOKEN_SPLIT_RE = re.compile(r"[\s,]+")


def _tokens(value: str) -> set[str]:
    return {token for token in _TOKEN_SPLIT_RE.split(value) if token}


def check_preflight(response: ProbeSuccess) -> Diagnosis | None:
    """Fail unless the preflight response allows POST."""
    methods = header_value(response.headers, ALLOW_METHODS)
    if methods and "POST" in _tokens(methods):
        return None
    received = f" (received '{ALLOW_METHODS}: {methods}')" if methods else ""
    return Diagnosis.of(
        DiagnosisKind.CORS_MISSING,
        f"OPTIONS response is missing header '{ALLOW_METHODS}: POST'{received}",
    )


def check_actual_response(response: ProbeSuccess, origin: str) -> Diagnosis | None:
    """Fail unless the response allows the requesting origin (exactly or by wildcard)."""
    allowed = header_value(response.headers, ALLOW_ORIGIN)
    if allowed and allowed in {"*", origin}:
        return None

    if allowed is None:
        problem = f"POST response missing '{ALLOW_ORIGIN}' header."
    else:
        problem = f"POST response header '{ALLOW_ORIGIN}: {allowed}' does not allow origin {origin}."
    return Diagnosis.of(
        DiagnosisKind.CORS_MISSING,
        "\n".join(
            [
                problem,
                "If using cookie-based authentication, the following headers are required from your endpoint: ",
                f"    {ALLOW_ORIGIN}: {origin}",
                f"    {ALLOW_CREDENTIALS}: true",
                "Otherwise, a wildcard value would work:",
                f"    {ALLOW_ORIGIN}: *",
            ]
        ),
    )


__all__ = ["check_actual_response", "check_preflight"]
