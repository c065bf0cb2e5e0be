# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Command line entry point."""
