"""Registry core: value storage, population lifecycle and shared instances."""

from dynamic_registry.core.context import DEFAULT_CONTEXT, RegistryContext
from dynamic_registry.core.exceptions import (
    ConfigurationError,
    DynamicRegistryError,
    InvalidValue,
)
from dynamic_registry.core.registry import AbstractRegistry, is_hashable

__all__ = [
    "AbstractRegistry",
    "ConfigurationError",
    "DEFAULT_CONTEXT",
    "DynamicRegistryError",
    "InvalidValue",
    "RegistryContext",
    "is_hashable",
]
