# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Cookie Policy - named registry of cookie specification factories.

This package maps case-insensitive cookie policy names to factories that
build cookie specifications, and resolves a specification either by name or
from an HTTP parameter bag.

Key Components:
    - CookiePolicyRegistry: Thread-safe registry (register, unregister,
      lookup, lookup_from_params, list_names)
    - cookie_policy.params: Parameter names and accessors
    - cookie_policy.runtime.registry_wiring: YAML driven registry construction
    - cookie_policy.errors: Error hierarchy with structured context
"""

from cookie_policy.enums import EnumCookiePolicy
from cookie_policy.errors import (
    CookiePolicyError,
    InvalidArgumentError,
    PolicyNotFoundError,
    ProtocolConfigurationError,
)
from cookie_policy.runtime import (
    CookiePolicyRegistry,
    ProtocolCookieSpec,
    ProtocolCookieSpecFactory,
    create_cookie_policy_registry,
)

__all__: list[str] = [
    "CookiePolicyError",
    "CookiePolicyRegistry",
    "EnumCookiePolicy",
    "InvalidArgumentError",
    "PolicyNotFoundError",
    "ProtocolConfigurationError",
    "ProtocolCookieSpec",
    "ProtocolCookieSpecFactory",
    "create_cookie_policy_registry",
]
