# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration model for a single cookie spec factory registration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ModelCookieSpecEntry(BaseModel):
    """One ``name -> factory`` entry of a cookie policy configuration.

    Attributes:
        name: Policy name (case-insensitive, stored lower-cased, never stripped)
        factory_path: Fully qualified import path of the factory
            (e.g. ``myapp.cookies.NetscapeDraftSpecFactory``). Classes are
            instantiated with no arguments.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    name: str = Field(..., min_length=1, description="Cookie policy name")
    factory_path: str = Field(
        ...,
        alias="factory",
        min_length=1,
        description="Fully qualified import path of the spec factory",
    )

    @field_validator("name")
    @classmethod
    def _normalize_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value.lower()

    @field_validator("factory_path")
    @classmethod
    def _validate_factory_path(cls, value: str) -> str:
        value = value.strip()
        module_path, _, attr = value.rpartition(".")
        if not module_path or not attr:
            raise ValueError(
                f"factory must be a fully qualified path, got {value!r}"
            )
        return value


__all__ = ["ModelCookieSpecEntry"]
