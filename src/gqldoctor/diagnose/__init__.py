# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Diagnostic decision engine: probes, classifiers and report rendering."""

from .classifier import classify, classify_status
from .cors import check_actual_response, check_preflight
from .engine import DiagnosticEngine
from .registry import PROBES
from .reporter import print_report, print_report_json, render_report
from .schema import validate

__all__ = [
    "DiagnosticEngine",
    "PROBES",
    "check_actual_response",
    "check_preflight",
    "classify",
    "classify_status",
    "print_report",
    "print_report_json",
    "render_report",
    "validate",
]
