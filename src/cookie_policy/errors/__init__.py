# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Cookie Policy Errors Module.

Exports:
    ModelErrorContext: Configuration model for bundled error context
    CookiePolicyError: Base error class
    InvalidArgumentError: Missing or malformed argument
    PolicyNotFoundError: No factory registered under the requested name
    ProtocolConfigurationError: Configuration loading/validation failure

Correlation IDs:
    Propagate the caller's correlation_id into ModelErrorContext, or use
    ModelErrorContext.with_correlation() to generate one.
"""

from cookie_policy.errors.cookie_policy_errors import (
    CookiePolicyError,
    InvalidArgumentError,
    ProtocolConfigurationError,
)
from cookie_policy.errors.error_policy_not_found import PolicyNotFoundError
from cookie_policy.errors.model_error_context import ModelErrorContext

__all__: list[str] = [
    "CookiePolicyError",
    "InvalidArgumentError",
    "ModelErrorContext",
    "PolicyNotFoundError",
    "ProtocolConfigurationError",
]
