# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Cookie Policy Enumerations Module.

Exports:
    EnumCookiePolicy: Well-known cookie policy names
"""

from cookie_policy.enums.enum_cookie_policy import EnumCookiePolicy

__all__: list[str] = [
    "EnumCookiePolicy",
]
