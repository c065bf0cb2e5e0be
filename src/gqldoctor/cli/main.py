# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""gqldoctor CLI."""

from __future__ import annotations

import argparse
import logging

from ..config import (
    DiagnosticSettings,
    HttpSettings,
    WebSocketSettings,
    load_diagnostic_settings,
    load_http_settings,
    load_websocket_settings,
)
from ..diagnose.reporter import print_report, print_report_json
from ..log import setup_logging
from ..runtime import GraphQLDoctor

logger = logging.getLogger(__name__)


def build_parser(default_origin: str | None = None) -> argparse.ArgumentParser:
    default_origin = default_origin or DiagnosticSettings.origin
    parser = argparse.ArgumentParser(
        prog="gqldoctor",
        description="Diagnose why a GraphQL endpoint is unreachable or misconfigured from a browser",
    )
    parser.add_argument("--endpoint", required=True, help="endpoint to diagnose")
    parser.add_argument(
        "--origin",
        default=default_origin,
        help=f"origin (for testing CORS headers), default: {default_origin}",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the report as JSON instead of text",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed endpoints)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for each probe before giving up",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: GQLDOCTOR_LOG_LEVEL or WARNING)")
    return parser


def _apply_overrides(
    args: argparse.Namespace,
    http_settings: HttpSettings,
    websocket_settings: WebSocketSettings,
) -> None:
    if args.ignore_ssl_errors:
        http_settings.verify_ssl = False
        websocket_settings.verify_ssl = False
    if args.timeout is not None and args.timeout > 0:
        http_settings.timeout = args.timeout
        websocket_settings.open_timeout = args.timeout


def main(argv: list[str] | None = None) -> int:
    settings = load_diagnostic_settings()
    parser = build_parser(settings.origin)
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    http_settings = load_http_settings()
    websocket_settings = load_websocket_settings()
    _apply_overrides(args, http_settings, websocket_settings)
    settings.origin = args.origin

    if not args.json:
        print(f"Diagnosing {args.endpoint}")

    with GraphQLDoctor(
        http_settings=http_settings,
        websocket_settings=websocket_settings,
        settings=settings,
    ) as doctor:
        report = doctor.diagnose(args.endpoint, origin=args.origin)

    logger.debug("Finished %s with %d diagnoses", args.endpoint, len(report.diagnoses))
    if args.json:
        print_report_json(report)
    else:
        print_report(report)

    # Findings are reported on stdout only; the exit status never reflects them.
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
