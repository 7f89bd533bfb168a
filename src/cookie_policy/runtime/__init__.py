# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Cookie Policy Runtime Module.

Exports:
    CookiePolicyRegistry: Case-insensitive, thread-safe name -> factory registry
    ProtocolCookieSpec: Cookie specification interface
    ProtocolCookieSpecFactory: Factory interface registered with the registry
    create_cookie_policy_registry: Build an explicitly owned registry
    load_cookie_policy_config: Load a YAML factory configuration
    wire_cookie_specs: Register configured factories with a registry
"""

from cookie_policy.runtime.cookie_policy_registry import CookiePolicyRegistry
from cookie_policy.runtime.protocol_cookie_spec import (
    ProtocolCookieSpec,
    ProtocolCookieSpecFactory,
)
from cookie_policy.runtime.registry_wiring import (
    create_cookie_policy_registry,
    import_factory,
    load_cookie_policy_config,
    wire_cookie_specs,
)

__all__: list[str] = [
    "CookiePolicyRegistry",
    "ProtocolCookieSpec",
    "ProtocolCookieSpecFactory",
    "create_cookie_policy_registry",
    "import_factory",
    "load_cookie_policy_config",
    "wire_cookie_specs",
]
