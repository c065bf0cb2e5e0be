# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

import dataclasses

import pytest

from gqldoctor.errors import TransportErrorKind
from gqldoctor.http.models import HttpRequest, HttpResponse
from gqldoctor.models import (
    Diagnosis,
    DiagnosisCategory,
    DiagnosisKind,
    Endpoint,
    ProbeSuccess,
    ReportAlreadyFinalized,
    ReportBuilder,
    TransportFailure,
    TransportKind,
    outcome_from_response,
)


@pytest.mark.parametrize(
    ("url", "kind"),
    [
        ("ws://localhost:4000/graphql", TransportKind.WEBSOCKET),
        ("WSS://api.example.com/graphql", TransportKind.WEBSOCKET),
        ("https://api.example.com/graphql", TransportKind.HTTP),
        ("http://localhost:4000", TransportKind.HTTP),
        ("localhost:4000/ws", TransportKind.HTTP),
    ],
)
def test_endpoint_transport_kind_follows_scheme(url, kind):
    assert Endpoint.from_url(url).transport_kind == kind


def test_endpoint_is_immutable():
    endpoint = Endpoint.from_url("https://api.example.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        endpoint.url = "https://other.example.com"


def test_diagnosis_kind_determines_category():
    diagnosis = Diagnosis.of(DiagnosisKind.SCHEMA_INVALID, "bad schema")
    assert diagnosis.category == DiagnosisCategory.SCHEMA
    assert diagnosis.is_blocking is False
    assert Diagnosis.of(DiagnosisKind.TRANSPORT_UNREACHABLE, "down").is_blocking is True
    tagged = diagnosis.with_probe("introspection")
    assert tagged.probe == "introspection"
    assert diagnosis.probe is None
    assert tagged.to_dict()["kind"] == "SchemaInvalid"


def _builder():
    return ReportBuilder(endpoint=Endpoint.from_url("https://api.example.com"), origin="https://studio.apollographql.com")


def test_report_flags_are_derived_from_diagnoses():
    builder = _builder()
    builder.add(Diagnosis.of(DiagnosisKind.AUTH_REQUIRED, "401"))
    builder.add(None)
    builder.add(Diagnosis.of(DiagnosisKind.CORS_MISSING, "cors"))
    report = builder.finalize()
    assert report.has_problem is True
    assert report.has_cors_problem is True
    assert report.categories() == [DiagnosisCategory.AUTH, DiagnosisCategory.CORS]

    empty = _builder().finalize()
    assert empty.has_problem is False
    assert empty.has_cors_problem is False


def test_report_builder_is_append_only_and_finalized_once():
    builder = _builder()
    builder.add(Diagnosis.of(DiagnosisKind.NOT_FOUND, "404"))
    snapshot = builder.diagnoses
    builder.add(Diagnosis.of(DiagnosisKind.CORS_MISSING, "cors"))
    assert len(snapshot) == 1
    report = builder.finalize()
    with pytest.raises(ReportAlreadyFinalized):
        builder.add(Diagnosis.of(DiagnosisKind.CORS_MISSING, "late"))
    with pytest.raises(ReportAlreadyFinalized):
        builder.finalize()
    assert len(report.diagnoses) == 2


def test_report_to_dict():
    builder = _builder()
    builder.add(Diagnosis.of(DiagnosisKind.CORS_MISSING, "cors", probe="ping"))
    builder.mark_skipped("introspection")
    payload = builder.finalize().to_dict()
    assert payload["endpoint"] == "https://api.example.com"
    assert payload["transport"] == "HTTP"
    assert payload["has_cors_problem"] is True
    assert payload["diagnoses"][0] == {"message": "cors", "category": "CORS", "kind": "CorsMissing", "probe": "ping"}
    assert payload["skipped_probes"] == ["introspection"]


def test_outcome_from_response():
    success = outcome_from_response(HttpResponse(ok=True, status_code=404, headers={"x": "1"}, text="nope"))
    assert success == ProbeSuccess(status_code=404, headers={"x": "1"}, body="nope")
    assert success.truncated is False

    cut_off = outcome_from_response(HttpResponse(ok=True, status_code=200, text="{\"da", meta={"body_truncated": True}))
    assert cut_off.truncated is True

    failure = outcome_from_response(
        HttpResponse(ok=False, error_message="refused", error_type="ConnectError", error_kind=TransportErrorKind.CONNECTION_REFUSED)
    )
    assert failure == TransportFailure(kind=TransportErrorKind.CONNECTION_REFUSED, message="refused", error_type="ConnectError")

    unknown = outcome_from_response(HttpResponse(ok=False))
    assert unknown.kind == TransportErrorKind.UNKNOWN


def test_json_post_request_sets_content_type():
    request = HttpRequest.json_post("http://x", {"query": "{ a }"}, headers={"origin": "http://o"})
    assert request.method == "POST"
    assert request.headers == {"content-type": "application/json", "origin": "http://o"}
    assert request.body == '{"query": "{ a }"}'
