# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""GraphQL documents sent by the probes."""

from graphql import get_introspection_query

PING_QUERY = "query Ping { __typename }"

# Descriptions are irrelevant for validation and only inflate the response.
INTROSPECTION_QUERY = get_introspection_query(descriptions=False)
