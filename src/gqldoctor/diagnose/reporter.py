# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Human-readable rendering of a finished Report."""

from __future__ import annotations

import json
import sys
from typing import TextIO

from ..models import Report

WARNING_MARKER = "⚠️ "
CORS_BYPASS_SUGGESTION = (
    "(📫 Can't change the endpoint's CORS headers? A local tunnel or proxy that adds them, "
    "or a client that is not subject to browser CORS rules, can bypass these requirements.)"
)
NO_PROBLEM_FALLBACK = (
    "Failed to diagnose any problems with the endpoint. "
    "Please report the endpoint to the gqldoctor maintainers to help us investigate🙏"
)


def render_report(report: Report) -> list[str]:
    """Return the output lines for a report."""
    lines = [f"{WARNING_MARKER} {diagnosis.message}" for diagnosis in report.diagnoses]
    if report.has_cors_problem:
        lines.append(CORS_BYPASS_SUGGESTION)
    if not report.has_problem:
        lines.append(NO_PROBLEM_FALLBACK)
    return lines


def print_report(report: Report, stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    for line in render_report(report):
        out.write(f"{line}\n")


def print_report_json(report: Report, stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    json.dump(report.to_dict(), out, indent=2, sort_keys=True, ensure_ascii=False)
    out.write("\n")


__all__ = [
    "CORS_BYPASS_SUGGESTION",
    "NO_PROBLEM_FALLBACK",
    "WARNING_MARKER",
    "print_report",
    "print_report_json",
    "render_report",
]
