# SPDX-FileCopyrightText: 2025 The gqldoctor Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

from .cli.main import main

raise SystemExit(main())
