# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Top-level cookie policy configuration model."""

from pydantic import BaseModel, ConfigDict, Field

from cookie_policy.models.model_cookie_spec_entry import ModelCookieSpecEntry


class ModelCookiePolicyConfig(BaseModel):
    """Factories to register when building a CookiePolicyRegistry.

    Entries are registered in order, so the order here is the order reported
    by ``CookiePolicyRegistry.list_names()``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    specs: list[ModelCookieSpecEntry] = Field(default_factory=list)


__all__ = ["ModelCookiePolicyConfig"]
