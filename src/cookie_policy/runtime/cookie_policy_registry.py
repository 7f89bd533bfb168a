# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Cookie Policy Registry - name to cookie spec factory lookup.

This module provides the CookiePolicyRegistry class, a case-insensitive
mapping from cookie policy names to factories that build cookie
specifications.

The registry is responsible for:
- Registering factories under case-folded names (re-registration overwrites)
- Building a cookie spec by explicit name or from an HTTP parameter bag
- Listing registered names in insertion order
- Serializing all access through a single lock

Design Principles:
- Explicit ownership: there is no process-wide default instance. Each
  subsystem constructs (or is handed) its own registry, see registry_wiring.
- No fallback: a failed lookup raises PolicyNotFoundError; the registry never
  substitutes another policy or consults another registry.
- Coarse locking: one threading.Lock per instance guards every operation,
  including the factory call made by lookup(). Factories must not block for
  long, since they stall every other caller of the same registry.

Example Usage:
    ```python
    from cookie_policy.runtime import CookiePolicyRegistry

    registry = CookiePolicyRegistry()
    registry.register("Netscape", NetscapeDraftSpecFactory())
    registry.register("RFC2965", RFC2965SpecFactory())

    registry.list_names()               # ['netscape', 'rfc2965']
    spec = registry.lookup("NETSCAPE")  # built by NetscapeDraftSpecFactory

    params = {"http.protocol.cookie-policy": "rfc2965"}
    spec = registry.lookup_from_params(params)
    ```
"""

from __future__ import annotations

import logging
import threading
import warnings
from collections.abc import Mapping
from typing import Optional

from cookie_policy.enums import EnumCookiePolicy
from cookie_policy.errors import (
    InvalidArgumentError,
    ModelErrorContext,
    PolicyNotFoundError,
)
from cookie_policy.params.cookie_spec_params import get_cookie_policy
from cookie_policy.runtime.protocol_cookie_spec import (
    ProtocolCookieSpec,
    ProtocolCookieSpecFactory,
)

logger = logging.getLogger(__name__)

PolicyNameInput = str | EnumCookiePolicy


class CookiePolicyRegistry:
    """Thread-safe, case-insensitive registry of cookie spec factories.

    Keys are lower-cased before storage and lookup, so ``"Netscape"``,
    ``"NETSCAPE"`` and ``"netscape"`` all address the same entry. The
    underlying dict preserves insertion order; overwriting an existing name
    keeps its original position. Names are not stripped, and blank names
    are rejected.

    Thread Safety:
        Every public method that touches the mapping holds ``_lock`` for the
        whole operation. Concurrent calls are serialized and each observes a
        consistent view of the registry.

    Attributes:
        _factories: Case-folded policy name -> factory, in insertion order
        _lock: Lock serializing all access to _factories

    Example:
        >>> registry = CookiePolicyRegistry()
        >>> registry.register("Netscape", NetscapeDraftSpecFactory())
        >>> registry.list_names()
        ['netscape']
        >>> "NETSCAPE" in registry
        True
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._factories: dict[str, ProtocolCookieSpecFactory] = {}
        self._lock: threading.Lock = threading.Lock()

    @staticmethod
    def _normalize_name(name: Optional[PolicyNameInput], operation: str) -> str:
        """Validate a policy name and return its case-folded form.

        Raises:
            InvalidArgumentError: If name is None, blank, or not a string.
        """
        if isinstance(name, EnumCookiePolicy):
            return name.value
        if name is None:
            raise InvalidArgumentError(
                "Name may not be None",
                context=ModelErrorContext(operation=operation),
                argument="name",
            )
        if not isinstance(name, str):
            raise InvalidArgumentError(
                f"Name must be a string, got {type(name).__name__}",
                context=ModelErrorContext(operation=operation),
                argument="name",
            )
        if not name.strip():
            raise InvalidArgumentError(
                "Name may not be empty or blank",
                context=ModelErrorContext(operation=operation),
                argument="name",
            )
        return name.lower()

    @staticmethod
    def _validate_factory(name: str, factory: object) -> None:
        if factory is None:
            raise InvalidArgumentError(
                "Cookie spec factory may not be None",
                context=ModelErrorContext(operation="register", target_name=name),
                argument="factory",
            )
        if isinstance(factory, type):
            raise InvalidArgumentError(
                f"Cookie spec factory for {name!r} must be an instance, "
                f"got class {factory.__name__}",
                context=ModelErrorContext(operation="register", target_name=name),
                argument="factory",
            )
        if not callable(getattr(factory, "new_instance", None)):
            raise InvalidArgumentError(
                f"Cookie spec factory for {name!r} must define a callable "
                f"new_instance(params), got {type(factory).__name__}",
                context=ModelErrorContext(operation="register", target_name=name),
                argument="factory",
            )

    def register(
        self,
        name: PolicyNameInput,
        factory: ProtocolCookieSpecFactory,
    ) -> None:
        """Register a cookie spec factory under the given name.

        If a factory is already registered under the same case-folded name it
        is replaced.

        Args:
            name: Policy identifier, matched case-insensitively.
            factory: Object with a callable ``new_instance(params)``.

        Raises:
            InvalidArgumentError: If name is None or blank, or if factory is
                None or lacks new_instance(). The registry is unchanged.
        """
        key = self._normalize_name(name, "register")
        self._validate_factory(key, factory)

        with self._lock:
            replaced = key in self._factories
            self._factories[key] = factory

        logger.debug(
            "Registered cookie spec factory",
            extra={
                "policy_name": key,
                "factory": type(factory).__name__,
                "replaced": replaced,
            },
        )

    def unregister(self, name: PolicyNameInput) -> bool:
        """Remove the factory registered under the given name.

        Removing a name that is not registered is a no-op.

        Args:
            name: Policy identifier, matched case-insensitively.

        Returns:
            True if an entry was removed, False otherwise.

        Raises:
            InvalidArgumentError: If name is None or blank.
        """
        key = self._normalize_name(name, "unregister")
        with self._lock:
            removed = self._factories.pop(key, None) is not None

        if removed:
            logger.debug(
                "Unregistered cookie spec factory",
                extra={"policy_name": key},
            )
        return removed

    def lookup(
        self,
        name: Optional[PolicyNameInput],
        params: Optional[Mapping[str, object]] = None,
    ) -> ProtocolCookieSpec:
        """Build the cookie spec registered under the given name.

        Args:
            name: Policy identifier, matched case-insensitively.
            params: Optional HTTP parameters handed to the factory.

        Returns:
            The cookie spec returned by the factory's new_instance(params).

        Raises:
            InvalidArgumentError: If name is None or blank.
            PolicyNotFoundError: If no factory is registered under name.
        """
        key = self._normalize_name(name, "lookup")
        with self._lock:
            factory = self._factories.get(key)
            if factory is None:
                registered = list(self._factories)
                requested = name.value if isinstance(name, EnumCookiePolicy) else name
                raise PolicyNotFoundError(
                    f"Unsupported cookie spec: {requested}",
                    policy_name=key,
                    registered_names=registered,
                    context=ModelErrorContext(operation="lookup", target_name=key),
                )
            return factory.new_instance(params)

    def lookup_from_params(
        self, params: Optional[Mapping[str, object]]
    ) -> ProtocolCookieSpec:
        """Build the cookie spec named by the HTTP parameters.

        The policy name is read from ``params`` with get_cookie_policy() and
        the call is delegated to lookup(name, params).

        Args:
            params: HTTP parameter bag. Never mutated.

        Returns:
            The cookie spec built by the matching factory.

        Raises:
            InvalidArgumentError: If params is None or names no policy.
            PolicyNotFoundError: If no factory is registered under the name.
        """
        if params is None:
            raise InvalidArgumentError(
                "HTTP parameters may not be None",
                context=ModelErrorContext(operation="lookup_from_params"),
                argument="params",
            )
        return self.lookup(get_cookie_policy(params), params)

    def list_names(self) -> list[str]:
        """Return the registered names in registration order.

        The returned list is a snapshot; mutating it does not affect the
        registry and later registry changes do not affect it.
        """
        with self._lock:
            return list(self._factories)

    def is_registered(self, name: PolicyNameInput) -> bool:
        """Check whether a factory is registered under the given name."""
        key = self._normalize_name(name, "is_registered")
        with self._lock:
            return key in self._factories

    def clear(self) -> None:
        """Remove all registrations.

        Warning:
            Intended for tests only; emits a UserWarning.
        """
        warnings.warn(
            "CookiePolicyRegistry.clear() is intended for testing only. "
            "Do not use in production code.",
            UserWarning,
            stacklevel=2,
        )
        with self._lock:
            self._factories.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._factories)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str) or not name.strip():
            return False
        return self.is_registered(name)


__all__: list[str] = [
    "CookiePolicyRegistry",
    "PolicyNameInput",
]
