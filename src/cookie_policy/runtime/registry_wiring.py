# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Registry Wiring - explicit construction of cookie policy registries.

There is no shared default registry. Applications build the registry they
need, either from a name -> factory mapping or from a YAML configuration
file naming factories by import path, and pass it to the code that needs it.

Configuration Format:
    ```yaml
    specs:
      - name: netscape
        factory: myapp.cookies.NetscapeDraftSpecFactory
      - name: rfc2965
        factory: myapp.cookies.RFC2965SpecFactory
    ```

Example Usage:
    ```python
    from cookie_policy.runtime.registry_wiring import (
        create_cookie_policy_registry,
        load_cookie_policy_config,
    )

    config = load_cookie_policy_config(Path("config/cookies.yaml"))
    registry = create_cookie_policy_registry(config)
    spec = registry.lookup("netscape")
    ```

Security Considerations:
    Factory paths are imported with importlib, so configuration files should
    be treated as code and loaded only from trusted locations.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from cookie_policy.errors import ModelErrorContext, ProtocolConfigurationError
from cookie_policy.models import ModelCookiePolicyConfig, ModelCookieSpecEntry
from cookie_policy.runtime.cookie_policy_registry import (
    CookiePolicyRegistry,
    PolicyNameInput,
)
from cookie_policy.runtime.protocol_cookie_spec import ProtocolCookieSpecFactory

logger = logging.getLogger(__name__)

# Maximum configuration file size (1MB)
MAX_CONFIG_SIZE = 1024 * 1024


def load_cookie_policy_config(path: Path) -> ModelCookiePolicyConfig:
    """Load and validate a cookie policy configuration file.

    Args:
        path: Path to a YAML file. An empty file yields an empty config.

    Returns:
        The validated configuration model.

    Raises:
        ProtocolConfigurationError: If the file is missing, too large, not
            valid YAML, or does not match the configuration schema.
    """
    context = ModelErrorContext(operation="load_config", target_name=str(path))

    if not path.is_file():
        raise ProtocolConfigurationError(
            f"Cookie policy config not found: {path}",
            context=context,
            config_path=str(path),
        )
    if path.stat().st_size > MAX_CONFIG_SIZE:
        raise ProtocolConfigurationError(
            f"Cookie policy config exceeds {MAX_CONFIG_SIZE} bytes: {path}",
            context=context,
            config_path=str(path),
        )

    try:
        with path.open("r", encoding="utf-8") as f:
            raw_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ProtocolConfigurationError(
            f"Invalid YAML syntax in cookie policy config: {e}",
            context=context,
            config_path=str(path),
        ) from e

    if raw_data is None:
        raw_data = {}
    if not isinstance(raw_data, dict):
        raise ProtocolConfigurationError(
            "Cookie policy config must be a mapping at the top level, "
            f"got {type(raw_data).__name__}",
            context=context,
            config_path=str(path),
        )

    try:
        return ModelCookiePolicyConfig.model_validate(raw_data)
    except ValidationError as e:
        raise ProtocolConfigurationError(
            f"Invalid cookie policy config: {e}",
            context=context,
            config_path=str(path),
            error_count=e.error_count(),
        ) from e


def import_factory(factory_path: str) -> ProtocolCookieSpecFactory:
    """Import a cookie spec factory from a fully qualified path.

    Classes are instantiated with no arguments; any other object is returned
    as-is and is expected to already be a factory instance.

    Raises:
        ProtocolConfigurationError: If the module or attribute cannot be
            imported, the class cannot be instantiated, or the result has no
            callable new_instance().
    """
    context = ModelErrorContext(operation="import_factory", target_name=factory_path)
    module_path, _, attr_name = factory_path.rpartition(".")
    if not module_path or not attr_name:
        raise ProtocolConfigurationError(
            f"Invalid factory path '{factory_path}': must be fully qualified "
            "(e.g., 'myapp.cookies.NetscapeDraftSpecFactory')",
            context=context,
            factory_path=factory_path,
        )

    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise ProtocolConfigurationError(
            f"Import error loading module {module_path}: {e}",
            context=context,
            module_path=module_path,
            factory_path=factory_path,
        ) from e

    if not hasattr(module, attr_name):
        raise ProtocolConfigurationError(
            f"Factory '{attr_name}' not found in module '{module_path}'",
            context=context,
            module_path=module_path,
            factory_path=factory_path,
        )

    factory = getattr(module, attr_name)
    if isinstance(factory, type):
        try:
            factory = factory()
        except TypeError as e:
            raise ProtocolConfigurationError(
                f"Factory class '{factory_path}' must be constructible "
                f"without arguments: {e}",
                context=context,
                factory_path=factory_path,
            ) from e

    if not callable(getattr(factory, "new_instance", None)):
        raise ProtocolConfigurationError(
            f"'{factory_path}' is not a cookie spec factory: "
            "missing callable new_instance(params)",
            context=context,
            factory_path=factory_path,
        )
    return factory


def wire_cookie_specs(
    registry: CookiePolicyRegistry,
    config: ModelCookiePolicyConfig,
) -> list[str]:
    """Register every factory named in ``config`` with ``registry``.

    Entries are registered in configuration order. All factories are imported
    before any registration happens, so a bad entry leaves the registry
    untouched.

    Returns:
        The names registered, in order.
    """
    entries: list[tuple[ModelCookieSpecEntry, ProtocolCookieSpecFactory]] = [
        (entry, import_factory(entry.factory_path)) for entry in config.specs
    ]
    for entry, factory in entries:
        registry.register(entry.name, factory)

    names = [entry.name for entry, _ in entries]
    logger.info(
        "Cookie spec factories wired successfully",
        extra={"spec_count": len(names), "specs": names},
    )
    return names


def create_cookie_policy_registry(
    config: Optional[ModelCookiePolicyConfig] = None,
    factories: Optional[Mapping[PolicyNameInput, ProtocolCookieSpecFactory]] = None,
) -> CookiePolicyRegistry:
    """Create a new, independently owned registry.

    Configured entries are registered first, then ``factories`` in mapping
    order; a name present in both ends up with the factory from ``factories``.

    Args:
        config: Optional configuration of factories to import and register.
        factories: Optional name -> factory instances to register.

    Returns:
        A fresh CookiePolicyRegistry.
    """
    registry = CookiePolicyRegistry()
    if config is not None:
        wire_cookie_specs(registry, config)
    if factories is not None:
        for name, factory in factories.items():
            registry.register(name, factory)
    return registry


__all__: list[str] = [
    "MAX_CONFIG_SIZE",
    "create_cookie_policy_registry",
    "import_factory",
    "load_cookie_policy_config",
    "wire_cookie_specs",
]
