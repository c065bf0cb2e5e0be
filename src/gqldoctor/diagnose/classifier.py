# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Map probe outcomes (HTTP statuses and transport failures) to diagnoses."""

from __future__ import annotations

from ..errors import TransportErrorKind
from ..models import ConnectionClosed, Diagnosis, DiagnosisKind, ProbeOutcome, ProbeSuccess, TransportFailure

UNREACHABLE_HINT = "Is the address correct?\nIs the server running?"
REPORT_REQUEST = "Would you care to let us know about this? Please report it to the gqldoctor maintainers along with the endpoint."

_TRANSPORT_MESSAGES: dict[TransportErrorKind, str] = {
    TransportErrorKind.NAME_RESOLUTION: f"Could not resolve host\n{UNREACHABLE_HINT}",
    TransportErrorKind.CONNECTION_REFUSED: f"Connection refused\n{UNREACHABLE_HINT}",
    TransportErrorKind.PROTOCOL_MISMATCH: (
        f"Protocol wrong type for socket (TLS/plaintext mismatch?)\n{UNREACHABLE_HINT}"
    ),
    TransportErrorKind.TIMEOUT: f"Timed out waiting for a response\n{UNREACHABLE_HINT}",
    TransportErrorKind.INVALID_URL: "The endpoint url could not be used\nIs the address correct?",
}


def _prefixed(source: str, text: str) -> str:
    return f"{source} {text}" if source else text[:1].upper() + text[1:]


def classify_status(status_code: int | None, *, source: str = "") -> Diagnosis | None:
    """Diagnose an HTTP status; only 401 and 404 carry actionable guidance."""
    if status_code == 401:
        return Diagnosis.of(
            DiagnosisKind.AUTH_REQUIRED,
            _prefixed(source, "response returned 401. Are authorization headers or cookies required?"),
        )
    if status_code == 404:
        return Diagnosis.of(
            DiagnosisKind.NOT_FOUND,
            _prefixed(source, "response returned 404. Is the url correct? Are authorization headers or cookies required?"),
        )
    return None


def unclassified(error: str, *, source: str = "") -> Diagnosis:
    """Escape hatch for failures no rule anticipates: quote the raw error and ask for a report."""
    where = f" ({source})" if source else ""
    return Diagnosis.of(
        DiagnosisKind.UNCLASSIFIED,
        f"Failed to diagnose what went wrong{where}. Here's the error: {error}\n{REPORT_REQUEST}",
    )


def _classify_failure(failure: TransportFailure, source: str) -> Diagnosis:
    if failure.kind is TransportErrorKind.HANDSHAKE_REJECTED:
        status_diagnosis = classify_status(failure.status_code, source=source)
        if status_diagnosis is not None:
            return status_diagnosis
        return Diagnosis.of(
            DiagnosisKind.TRANSPORT_UNREACHABLE,
            _prefixed(
                source,
                f"upgrade was rejected with HTTP {failure.status_code}\nDoes the endpoint accept WebSocket connections at this path?",
            ),
        )

    if failure.kind is TransportErrorKind.ABNORMAL_CLOSURE:
        detail = f" (code {failure.close_code})" if failure.close_code is not None else ""
        reason = f": {failure.message}" if failure.message else ""
        return Diagnosis.of(
            DiagnosisKind.TRANSPORT_UNREACHABLE,
            _prefixed(source, f"connection closed with an error{detail}{reason}\n{UNREACHABLE_HINT}"),
        )

    message = _TRANSPORT_MESSAGES.get(failure.kind)
    if message is None:
        raw = f"{failure.error_type}: {failure.message}" if failure.error_type else failure.message
        return unclassified(raw or failure.kind.value, source=source)
    return Diagnosis.of(DiagnosisKind.TRANSPORT_UNREACHABLE, message)


def classify(outcome: ProbeOutcome, *, source: str = "") -> Diagnosis | None:
    """
    Diagnose a single probe outcome.

    Pure: the result depends only on ``outcome`` and ``source`` (a label such as
    ``"OPTIONS"`` used to prefix status messages).
    """
    if isinstance(outcome, ProbeSuccess):
        return classify_status(outcome.status_code, source=source)
    if isinstance(outcome, TransportFailure):
        return _classify_failure(outcome, source)
    if isinstance(outcome, ConnectionClosed):
        return None
    raise TypeError(f"unsupported probe outcome: {outcome!r}")


__all__ = ["REPORT_REQUEST", "UNREACHABLE_HINT", "classify", "classify_status", "unclassified"]
