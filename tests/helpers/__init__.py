# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for cookie_policy unit tests.

Available Utilities:
    Cookie Spec Fakes:
        - FakeCookieSpec: Spec recording the factory and params it came from
        - RecordingSpecFactory: Factory recording every new_instance() call
        - NetscapeSpecFactory / RFC2965SpecFactory: Labelled recording factories
        - FailingSpecFactory: Factory whose new_instance() raises

    Log Helpers:
        - filter_records: Filter captured log records by logger and level
        - get_messages: Messages of the records kept by filter_records
"""

from tests.helpers.cookie_spec_fakes import (
    FactoryWithArgs,
    FailingSpecFactory,
    FakeCookieSpec,
    NetscapeSpecFactory,
    NotAFactory,
    RecordingSpecFactory,
    RFC2965SpecFactory,
)
from tests.helpers.log_helpers import filter_records, get_messages

__all__ = [
    "FactoryWithArgs",
    "FailingSpecFactory",
    "FakeCookieSpec",
    "NetscapeSpecFactory",
    "NotAFactory",
    "RFC2965SpecFactory",
    "RecordingSpecFactory",
    "filter_records",
    "get_messages",
]
