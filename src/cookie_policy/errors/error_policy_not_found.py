# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Policy Not Found Error Class.

This module defines the PolicyNotFoundError raised by registry lookups.
"""

from typing import Optional

from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode

from cookie_policy.errors.cookie_policy_errors import CookiePolicyError
from cookie_policy.errors.model_error_context import ModelErrorContext


class PolicyNotFoundError(CookiePolicyError):
    """Error raised when no cookie spec factory is registered under a name.

    The registry performs no retry, fallback, or default substitution; the
    error is propagated to the caller unchanged.

    Example:
        >>> try:
        ...     spec = registry.lookup("unknown")
        ... except PolicyNotFoundError as e:
        ...     print(e.model.context["policy_name"])
        unknown
    """

    def __init__(
        self,
        message: str,
        policy_name: Optional[str] = None,
        registered_names: Optional[list[str]] = None,
        context: Optional[ModelErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize PolicyNotFoundError.

        Args:
            message: Human-readable error message
            policy_name: The name that could not be resolved
            registered_names: Names registered at the time of the lookup
            context: Bundled error context
            **extra_context: Additional context information
        """
        if policy_name is not None:
            extra_context["policy_name"] = policy_name
        if registered_names is not None:
            extra_context["registered_names"] = list(registered_names)

        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.RESOURCE_NOT_FOUND,
            context=context,
            **extra_context,
        )


__all__ = ["PolicyNotFoundError"]
