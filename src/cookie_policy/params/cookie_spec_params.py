# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Cookie specification parameter names and accessors.

Parameters are read from a plain string-keyed mapping (the HTTP parameter
bag). Accessors never mutate the mapping they read from.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import Optional

from cookie_policy.enums import EnumCookiePolicy
from cookie_policy.errors import InvalidArgumentError, ProtocolConfigurationError

# Name of the cookie policy to use (str)
COOKIE_POLICY = "http.protocol.cookie-policy"

# Date patterns used for parsing cookie expiry dates (sequence of str)
DATE_PATTERNS = "http.protocol.cookie-datepatterns"

# Whether cookies should be put on a single request header (bool)
SINGLE_COOKIE_HEADER = "http.protocol.single-cookie-header"


def _require_params(params: Optional[Mapping[str, object]]) -> Mapping[str, object]:
    if params is None:
        raise InvalidArgumentError(
            "HTTP parameters may not be None", argument="params"
        )
    return params


def get_cookie_policy(params: Optional[Mapping[str, object]]) -> Optional[str]:
    """Return the cookie policy name configured in ``params``.

    Args:
        params: HTTP parameter bag.

    Returns:
        The configured policy name, or None when the parameter is not set.

    Raises:
        InvalidArgumentError: If params is None.
        ProtocolConfigurationError: If the configured value is not a string.
    """
    value = _require_params(params).get(COOKIE_POLICY)
    if value is None:
        return None
    if isinstance(value, EnumCookiePolicy):
        return value.value
    if not isinstance(value, str):
        raise ProtocolConfigurationError(
            f"Parameter {COOKIE_POLICY!r} must be a string, "
            f"got {type(value).__name__}",
            parameter=COOKIE_POLICY,
        )
    return value


def set_cookie_policy(
    params: MutableMapping[str, object], name: str | EnumCookiePolicy
) -> None:
    """Store the cookie policy name in ``params``."""
    if params is None:
        raise InvalidArgumentError(
            "HTTP parameters may not be None", argument="params"
        )
    if isinstance(name, EnumCookiePolicy):
        name = name.value
    params[COOKIE_POLICY] = name


def get_date_patterns(params: Optional[Mapping[str, object]]) -> Optional[list[str]]:
    """Return the configured cookie date patterns, or None when unset."""
    value = _require_params(params).get(DATE_PATTERNS)
    if value is None:
        return None
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ProtocolConfigurationError(
            f"Parameter {DATE_PATTERNS!r} must be a sequence of strings",
            parameter=DATE_PATTERNS,
        )
    patterns = list(value)
    if not all(isinstance(p, str) for p in patterns):
        raise ProtocolConfigurationError(
            f"Parameter {DATE_PATTERNS!r} must be a sequence of strings",
            parameter=DATE_PATTERNS,
        )
    return patterns


def get_single_cookie_header(params: Optional[Mapping[str, object]]) -> bool:
    """Return whether all cookies go on one header. Defaults to False."""
    value = _require_params(params).get(SINGLE_COOKIE_HEADER, False)
    if not isinstance(value, bool):
        raise ProtocolConfigurationError(
            f"Parameter {SINGLE_COOKIE_HEADER!r} must be a bool",
            parameter=SINGLE_COOKIE_HEADER,
        )
    return value


__all__: list[str] = [
    "COOKIE_POLICY",
    "DATE_PATTERNS",
    "SINGLE_COOKIE_HEADER",
    "get_cookie_policy",
    "get_date_patterns",
    "get_single_cookie_header",
    "set_cookie_policy",
]
