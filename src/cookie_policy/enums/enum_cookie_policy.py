# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Well-Known Cookie Policy Names.

Defines the canonical identifiers of the cookie management policies commonly
registered with a CookiePolicyRegistry. Values are stored case-folded so they
match registry keys directly.
"""

from enum import Enum


class EnumCookiePolicy(str, Enum):
    """Cookie policy identifiers.

    Attributes:
        BEST_MATCH: Picks the most appropriate spec based on the cookie format
        BROWSER_COMPATIBILITY: Mimics common browser behaviour
        NETSCAPE: Original Netscape cookie draft
        RFC_2109: RFC 2109 compliant cookies
        RFC_2965: RFC 2965 compliant cookies
        IGNORE_COOKIES: Ignores all cookies
    """

    BEST_MATCH = "best-match"
    BROWSER_COMPATIBILITY = "compatibility"
    NETSCAPE = "netscape"
    RFC_2109 = "rfc2109"
    RFC_2965 = "rfc2965"
    IGNORE_COOKIES = "ignorecookies"


__all__ = ["EnumCookiePolicy"]
