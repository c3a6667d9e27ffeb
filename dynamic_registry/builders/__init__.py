"""Config-driven construction of registries."""

from dynamic_registry.builders.registry_builder import (
    build_populator,
    build_registries,
    build_registry,
)

__all__ = ["build_populator", "build_registries", "build_registry"]
