# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for cookie_policy tests."""

from __future__ import annotations

import pytest

from cookie_policy.runtime.cookie_policy_registry import CookiePolicyRegistry
from tests.helpers.cookie_spec_fakes import NetscapeSpecFactory, RFC2965SpecFactory

# =============================================================================
# Duck Typing Conformance Helpers
# =============================================================================


def assert_has_methods(
    obj: object,
    required_methods: list[str],
    *,
    protocol_name: str | None = None,
) -> None:
    """Assert that an object has all required methods (duck typing conformance).

    Args:
        obj: The object to check for method presence.
        required_methods: Method names that must be present and callable.
        protocol_name: Optional protocol name for clearer error messages.

    Raises:
        AssertionError: If any required method is missing or not callable.
    """
    name = protocol_name or obj.__class__.__name__
    for method_name in required_methods:
        assert hasattr(obj, method_name), f"{name} must have '{method_name}' method"
        # __len__ and __contains__ are reached through len() and 'in'
        if not method_name.startswith("__"):
            assert callable(
                getattr(obj, method_name)
            ), f"{name}.{method_name} must be callable"


def assert_cookie_policy_registry_interface(registry: object) -> None:
    """Assert that an object exposes the CookiePolicyRegistry interface."""
    assert_has_methods(
        registry,
        [
            "register",
            "unregister",
            "lookup",
            "lookup_from_params",
            "list_names",
            "is_registered",
            "__len__",
            "__contains__",
        ],
        protocol_name="CookiePolicyRegistry",
    )


# =============================================================================
# Registry Fixtures
# =============================================================================


@pytest.fixture
def cookie_policy_registry() -> CookiePolicyRegistry:
    """Provide a fresh, empty CookiePolicyRegistry for each test."""
    return CookiePolicyRegistry()


@pytest.fixture
def netscape_factory() -> NetscapeSpecFactory:
    return NetscapeSpecFactory()


@pytest.fixture
def rfc2965_factory() -> RFC2965SpecFactory:
    return RFC2965SpecFactory()


@pytest.fixture
def populated_registry(
    netscape_factory: NetscapeSpecFactory,
    rfc2965_factory: RFC2965SpecFactory,
) -> CookiePolicyRegistry:
    """Provide a registry with 'Netscape' and 'RFC2965' registered, in that order."""
    registry = CookiePolicyRegistry()
    registry.register("Netscape", netscape_factory)
    registry.register("RFC2965", rfc2965_factory)
    return registry
