# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for cookie policy configuration models."""

import pytest
from pydantic import ValidationError

from cookie_policy.models import ModelCookiePolicyConfig, ModelCookieSpecEntry
from cookie_policy.runtime.cookie_policy_registry import CookiePolicyRegistry
from tests.helpers.cookie_spec_fakes import NetscapeSpecFactory


class TestModelCookieSpecEntry:
    def test_name_is_case_folded(self) -> None:
        entry = ModelCookieSpecEntry(name="RFC2965", factory="myapp.cookies.Factory")
        assert entry.name == "rfc2965"

    @pytest.mark.parametrize("name", ["Netscape", " Netscape ", "RFC2965"])
    def test_name_matches_registry_key(self, name: str) -> None:
        """Configured names are stored exactly as register() would store them."""
        entry = ModelCookieSpecEntry(name=name, factory="myapp.cookies.Factory")
        registry = CookiePolicyRegistry()
        registry.register(name, NetscapeSpecFactory())

        assert registry.list_names() == [entry.name]

    def test_accepts_field_name_as_well_as_alias(self) -> None:
        entry = ModelCookieSpecEntry(name="netscape", factory_path="myapp.cookies.Factory")
        assert entry.factory_path == "myapp.cookies.Factory"

    @pytest.mark.parametrize("name", ["", "   ", "\t"])
    def test_blank_name_rejected(self, name: str) -> None:
        with pytest.raises(ValidationError):
            ModelCookieSpecEntry(name=name, factory="myapp.cookies.Factory")

    @pytest.mark.parametrize("path", ["Factory", ".Factory", "myapp.", ""])
    def test_unqualified_factory_rejected(self, path: str) -> None:
        with pytest.raises(ValidationError):
            ModelCookieSpecEntry(name="netscape", factory=path)

    def test_frozen(self) -> None:
        entry = ModelCookieSpecEntry(name="netscape", factory="myapp.cookies.Factory")
        with pytest.raises(ValidationError):
            entry.name = "other"  # type: ignore[misc]


class TestModelCookiePolicyConfig:
    def test_defaults_to_no_specs(self) -> None:
        assert ModelCookiePolicyConfig().specs == []

    def test_validates_nested_entries(self) -> None:
        config = ModelCookiePolicyConfig.model_validate(
            {"specs": [{"name": "Netscape", "factory": "myapp.cookies.Factory"}]}
        )
        assert config.specs[0].name == "netscape"

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            ModelCookiePolicyConfig.model_validate({"specs": [], "default": "netscape"})
