"""Lazily populated registries of unique values."""

from dynamic_registry.core import (
    DEFAULT_CONTEXT,
    AbstractRegistry,
    ConfigurationError,
    DynamicRegistryError,
    InvalidValue,
    RegistryContext,
)
from dynamic_registry.populators import (
    CallablePopulator,
    DynamicPopulator,
    StaticValuesPopulator,
)
from dynamic_registry.registries import SimpleRegistry, StringRegistry

__version__ = "0.1.0"

__all__ = [
    "AbstractRegistry",
    "CallablePopulator",
    "ConfigurationError",
    "DEFAULT_CONTEXT",
    "DynamicPopulator",
    "DynamicRegistryError",
    "InvalidValue",
    "RegistryContext",
    "SimpleRegistry",
    "StaticValuesPopulator",
    "StringRegistry",
]
