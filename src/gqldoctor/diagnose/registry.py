# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Ordered probe registry."""

from .probes import IntrospectionProbe, PingProbe, PreflightProbe, WebSocketProbe

PROBES = sorted(
    [
        WebSocketProbe(),
        PreflightProbe(),
        PingProbe(),
        IntrospectionProbe(),
    ],
    key=lambda probe: probe.priority,
)

__all__ = ["PROBES"]
