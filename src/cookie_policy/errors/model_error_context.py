# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error Context Configuration Model.

This module defines the configuration model for error context, bundling the
common structured fields shared by every cookie_policy error so that error
constructors keep a small parameter list.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelErrorContext(BaseModel):
    """Configuration model for error context.

    Attributes:
        operation: Operation being performed (register, lookup, load_config, ...)
        target_name: Target resource name (policy name, config path, ...)
        correlation_id: Request correlation ID for tracing

    Example:
        >>> context = ModelErrorContext(
        ...     operation="lookup",
        ...     target_name="rfc2965",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise CookiePolicyError("Operation failed", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (register, lookup, load_config, ...)",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Target resource name",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Request correlation ID for tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: Optional[UUID] = None,
        **kwargs: object,
    ) -> ModelErrorContext:
        """Create a context, generating a correlation ID when none is given.

        Args:
            correlation_id: Existing correlation ID to propagate.
            **kwargs: Remaining context fields.

        Returns:
            A new ModelErrorContext with a non-null correlation_id.
        """
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelErrorContext"]
