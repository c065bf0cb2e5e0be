# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Introspection result parsing and structural schema validation."""

from __future__ import annotations

import json
import logging

from graphql import build_client_schema, validate_schema

from ..models import Diagnosis, DiagnosisKind

logger = logging.getLogger(__name__)

DEFAULT_MAX_QUOTED_BODY = 2048


def quote_body(body: str, max_chars: int = DEFAULT_MAX_QUOTED_BODY) -> str:
    """Shorten a response body for display."""
    if len(body) <= max_chars:
        return body
    return f"{body[:max_chars]}...[truncated {len(body) - max_chars} chars]"


def _introspection_data(document: object) -> dict | None:
    if not isinstance(document, dict):
        return None
    data = document.get("data")
    if not isinstance(data, dict) or not isinstance(data.get("__schema"), dict):
        return None
    return data


def validate(raw_body: str, *, max_quoted_body: int = DEFAULT_MAX_QUOTED_BODY) -> Diagnosis | None:
    """Return a SCHEMA diagnosis unless ``raw_body`` is a valid introspection result."""
    quoted = quote_body(raw_body, max_quoted_body)
    try:
        document = json.loads(raw_body)
    except ValueError as exc:
        return Diagnosis.of(
            DiagnosisKind.SCHEMA_UNREADABLE,
            f'Introspection query could not parse "{quoted}" as valid json. Here is the error: {exc}',
        )

    data = _introspection_data(document)
    if data is None:
        return Diagnosis.of(
            DiagnosisKind.SCHEMA_UNREADABLE,
            f"Introspection query received a response of {quoted}. Does introspection need to be turned on?",
        )

    # graphql-core assumes well-formed introspection data and fails with arbitrary
    # exception types (including from lazy field thunks during validation).
    try:
        schema = build_client_schema(data)
        errors = validate_schema(schema)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Building schema from introspection failed", exc_info=True)
        return Diagnosis.of(
            DiagnosisKind.SCHEMA_INVALID,
            f"Could not build a schema from the introspection result: {type(exc).__name__}: {exc}",
        )

    if errors:
        listed = "\n".join(f"    {error.message}" for error in errors)
        return Diagnosis.of(DiagnosisKind.SCHEMA_INVALID, f"Invalid schema from introspection:\n{listed}")
    return None


__all__ = ["quote_body", "validate"]
