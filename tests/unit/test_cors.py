# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from gqldoctor.diagnose.cors import check_actual_response, check_preflight
from gqldoctor.models import DiagnosisCategory, ProbeSuccess

ORIGIN = "https://studio.apollographql.com"


def _response(headers):
    return ProbeSuccess(status_code=200, headers=headers, body="ignored")


@pytest.mark.parametrize("value", ["POST", "GET, POST", "POST,OPTIONS", "GET,POST,OPTIONS", "OPTIONS POST"])
def test_preflight_allowing_post_passes(value):
    assert check_preflight(_response({"access-control-allow-methods": value})) is None


@pytest.mark.parametrize("headers", [{}, {"access-control-allow-methods": ""}, {"access-control-allow-methods": "GET, OPTIONS"}])
def test_preflight_without_post_fails(headers):
    diagnosis = check_preflight(_response(headers))
    assert diagnosis.category == DiagnosisCategory.CORS
    assert "access-control-allow-methods: POST" in diagnosis.message


def test_preflight_header_lookup_is_case_insensitive():
    assert check_preflight(_response({"Access-Control-Allow-Methods": "GET, POST"})) is None


@pytest.mark.parametrize("value", ["*", ORIGIN])
def test_actual_response_allowing_origin_passes(value):
    assert check_actual_response(_response({"access-control-allow-origin": value}), ORIGIN) is None


def test_actual_response_missing_header_lists_both_remediations():
    diagnosis = check_actual_response(_response({}), ORIGIN)
    assert diagnosis.category == DiagnosisCategory.CORS
    assert "missing 'access-control-allow-origin'" in diagnosis.message
    assert f"access-control-allow-origin: {ORIGIN}" in diagnosis.message
    assert "access-control-allow-credentials: true" in diagnosis.message
    assert "access-control-allow-origin: *" in diagnosis.message


@pytest.mark.parametrize("value", ["https://example.com", "null", f"{ORIGIN}/", ""])
def test_actual_response_with_other_origin_fails(value):
    diagnosis = check_actual_response(_response({"access-control-allow-origin": value}), ORIGIN)
    assert diagnosis is not None
    assert diagnosis.category == DiagnosisCategory.CORS


def test_checks_never_read_the_body():
    response = ProbeSuccess(status_code=200, headers={"access-control-allow-origin": "*"}, body="access-control-allow-methods: POST")
    assert check_actual_response(response, ORIGIN) is None
    assert check_preflight(response) is not None
