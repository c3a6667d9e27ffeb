"""Populators that fill registries on first access."""

from dynamic_registry.populators.base import (
    CallablePopulator,
    DynamicPopulator,
    StaticValuesPopulator,
)

__all__ = ["CallablePopulator", "DynamicPopulator", "StaticValuesPopulator"]
