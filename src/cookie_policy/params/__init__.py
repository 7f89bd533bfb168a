# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP parameter names and accessors used by cookie specifications."""

from cookie_policy.params.cookie_spec_params import (
    COOKIE_POLICY,
    DATE_PATTERNS,
    SINGLE_COOKIE_HEADER,
    get_cookie_policy,
    get_date_patterns,
    get_single_cookie_header,
    set_cookie_policy,
)

__all__: list[str] = [
    "COOKIE_POLICY",
    "DATE_PATTERNS",
    "SINGLE_COOKIE_HEADER",
    "get_cookie_policy",
    "get_date_patterns",
    "get_single_cookie_header",
    "set_cookie_policy",
]
