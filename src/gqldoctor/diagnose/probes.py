# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Concrete probes: WebSocket connect, CORS preflight, ping and introspection."""

from __future__ import annotations

from ..http import HttpRequest
from ..models import Diagnosis, DiagnosisKind, ProbeSuccess, ReportBuilder, TransportKind, outcome_from_response
from .base import Probe, ProbeContext
from .classifier import classify
from .cors import check_actual_response, check_preflight
from .queries import INTROSPECTION_QUERY, PING_QUERY
from .schema import validate


def _collect(*diagnoses: Diagnosis | None) -> list[Diagnosis]:
    return [d for d in diagnoses if d is not None]


class WebSocketProbe(Probe):
    name = "websocket"
    transport = TransportKind.WEBSOCKET
    priority = 10

    def run(self, context: ProbeContext) -> list[Diagnosis]:
        outcome = context.websocket_client.connect(context.endpoint.url, context.origin)
        return _collect(classify(outcome, source="WebSocket"))


class PreflightProbe(Probe):
    """OPTIONS request as a browser would send before a cross-origin POST."""

    name = "preflight"
    priority = 20

    def run(self, context: ProbeContext) -> list[Diagnosis]:
        request = HttpRequest(
            url=context.endpoint.url,
            method="OPTIONS",
            headers={
                "access-control-request-method": "POST",
                "origin": context.origin,
            },
        )
        outcome = outcome_from_response(context.http_client.request(request))
        diagnosis = classify(outcome, source="OPTIONS")
        if not isinstance(outcome, ProbeSuccess):
            return _collect(diagnosis)
        return _collect(diagnosis, check_preflight(outcome))


class PingProbe(Probe):
    name = "ping"
    priority = 30

    def run(self, context: ProbeContext) -> list[Diagnosis]:
        request = HttpRequest.json_post(
            context.endpoint.url,
            {"query": PING_QUERY},
            headers={"origin": context.origin},
        )
        outcome = outcome_from_response(context.http_client.request(request))
        diagnosis = classify(outcome, source="POST")
        if not isinstance(outcome, ProbeSuccess):
            return _collect(diagnosis)
        return _collect(diagnosis, check_actual_response(outcome, context.origin))


class IntrospectionProbe(Probe):
    """
    Fetch and validate the schema.

    Only runs on an otherwise clean endpoint: after any earlier finding an
    introspection failure is almost always the same root cause again.
    """

    name = "introspection"
    priority = 40

    def should_skip(self, state: ReportBuilder) -> bool:
        return state.has_problem

    def run(self, context: ProbeContext) -> list[Diagnosis]:
        request = HttpRequest.json_post(
            context.endpoint.url,
            {"query": INTROSPECTION_QUERY},
            headers={"origin": context.origin},
        )
        outcome = outcome_from_response(context.http_client.request(request))
        if not isinstance(outcome, ProbeSuccess):
            return _collect(classify(outcome, source="Introspection"))
        if outcome.truncated:
            return [
                Diagnosis.of(
                    DiagnosisKind.SCHEMA_UNREADABLE,
                    "Introspection response exceeded the response size limit and was cut off, so the schema "
                    "could not be checked. Raise GQLDOCTOR_HTTP_MAX_BODY_BYTES to validate large schemas.",
                )
            ]
        return _collect(validate(outcome.body, max_quoted_body=context.settings.max_quoted_body))


__all__ = ["IntrospectionProbe", "PingProbe", "PreflightProbe", "WebSocketProbe"]
