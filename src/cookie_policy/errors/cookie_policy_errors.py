# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Cookie Policy Error Classes.

All error classes extend ModelOnexError (from omnibase_core), so registry
failures surface with the same structured payload as other ONEX errors.

Error Hierarchy:
    ModelOnexError (from omnibase_core)
    └── CookiePolicyError (base error)
        ├── InvalidArgumentError
        ├── ProtocolConfigurationError
        └── PolicyNotFoundError (see error_policy_not_found)

All errors:
    - Use EnumCoreErrorCode for classification
    - Expose structured context on ``error.model.context``
    - Support proper error chaining with ``raise ... from e``
    - Accept ModelErrorContext for bundled context parameters
"""

from typing import Optional

from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode
from omnibase_core.models.errors.model_onex_error import ModelOnexError

from cookie_policy.errors.model_error_context import ModelErrorContext


class CookiePolicyError(ModelOnexError):
    """Base error class for the cookie_policy package.

    Structured Fields (via ModelErrorContext):
        operation: Operation being performed
        target_name: Target resource name
        correlation_id: Request correlation ID for tracking

    Example:
        >>> context = ModelErrorContext(operation="lookup", target_name="netscape")
        >>> raise CookiePolicyError("Operation failed", context=context)

        # Or with extra context:
        >>> raise CookiePolicyError("Operation failed", context=context, attempt=2)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumCoreErrorCode] = None,
        context: Optional[ModelErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize CookiePolicyError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled error context (operation, target_name, correlation_id)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id = None
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            correlation_id = context.correlation_id

        super().__init__(
            message=message,
            error_code=error_code or EnumCoreErrorCode.OPERATION_FAILED,
            correlation_id=correlation_id,
            **structured_context,
        )


class InvalidArgumentError(CookiePolicyError):
    """Raised when a required argument is absent or malformed.

    Always caller-fixable; never retried internally.

    Example:
        >>> raise InvalidArgumentError("Name may not be None", argument="name")
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.INVALID_PARAMETER,
            context=context,
            **extra_context,
        )


class ProtocolConfigurationError(CookiePolicyError):
    """Raised when configuration loading or validation fails.

    Used for unreadable or malformed YAML, schema violations, factory import
    failures, and parameter values of the wrong type.

    Example:
        >>> context = ModelErrorContext(operation="load_config")
        >>> raise ProtocolConfigurationError(
        ...     "Missing required field 'specs'",
        ...     context=context,
        ...     config_path="cookies.yaml",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


__all__ = [
    "CookiePolicyError",
    "InvalidArgumentError",
    "ProtocolConfigurationError",
]
