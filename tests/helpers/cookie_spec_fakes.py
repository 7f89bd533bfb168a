# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Fake cookie specs and factories for registry tests.

The factories record every ``new_instance`` call so tests can assert which
factory built a spec and with which parameters. Module-level names are also
referenced by import path from YAML wiring tests.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping, Sequence
from typing import Optional


class FakeCookieSpec:
    """Minimal cookie spec remembering the factory and params it was built with."""

    def __init__(
        self,
        built_by: str,
        params: Optional[Mapping[str, object]] = None,
        version: int = 0,
    ) -> None:
        self.built_by = built_by
        self.params = params
        self._version = version

    @property
    def version(self) -> int:
        return self._version

    def parse(self, header: object, origin: object) -> Sequence[object]:
        return []

    def validate(self, cookie: object, origin: object) -> None:
        return None

    def match(self, cookie: object, origin: object) -> bool:
        return True

    def format_cookies(self, cookies: Sequence[object]) -> Sequence[object]:
        return list(cookies)

    def get_version_header(self) -> Optional[object]:
        return None


class RecordingSpecFactory:
    """Factory that builds FakeCookieSpec instances and records each call."""

    label = "recording"
    version = 0

    def __init__(self, label: Optional[str] = None) -> None:
        if label is not None:
            self.label = label
        self.calls: list[Optional[Mapping[str, object]]] = []
        self._calls_lock = threading.Lock()

    def new_instance(self, params: Optional[Mapping[str, object]]) -> FakeCookieSpec:
        with self._calls_lock:
            self.calls.append(params)
        return FakeCookieSpec(self.label, params, self.version)


class NetscapeSpecFactory(RecordingSpecFactory):
    label = "netscape"


class RFC2965SpecFactory(RecordingSpecFactory):
    label = "rfc2965"
    version = 1


class FailingSpecFactory:
    """Factory whose construction always fails."""

    def new_instance(self, params: Optional[Mapping[str, object]]) -> FakeCookieSpec:
        raise RuntimeError("spec construction failed")


class FactoryWithArgs:
    """Factory class that cannot be built without arguments."""

    def __init__(self, label: str) -> None:
        self.label = label

    def new_instance(self, params: Optional[Mapping[str, object]]) -> FakeCookieSpec:
        return FakeCookieSpec(self.label, params)


class NotAFactory:
    """Class without new_instance()."""


# Pre-built factory instance, referenced by import path in wiring tests
SHARED_NETSCAPE_FACTORY = NetscapeSpecFactory(label="shared-netscape")

__all__ = [
    "FactoryWithArgs",
    "FailingSpecFactory",
    "FakeCookieSpec",
    "NetscapeSpecFactory",
    "NotAFactory",
    "RFC2965SpecFactory",
    "RecordingSpecFactory",
    "SHARED_NETSCAPE_FACTORY",
]
