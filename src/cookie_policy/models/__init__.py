# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Cookie Policy Configuration Models.

Exports:
    ModelCookiePolicyConfig: Ordered list of factories to register
    ModelCookieSpecEntry: One name -> factory import path entry
"""

from cookie_policy.models.model_cookie_policy_config import ModelCookiePolicyConfig
from cookie_policy.models.model_cookie_spec_entry import ModelCookieSpecEntry

__all__: list[str] = [
    "ModelCookiePolicyConfig",
    "ModelCookieSpecEntry",
]
