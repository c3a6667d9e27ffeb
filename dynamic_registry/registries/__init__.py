"""Concrete registry variants."""

from dynamic_registry.registries.simple_registry import SimpleRegistry
from dynamic_registry.registries.string_registry import StringRegistry, is_string

__all__ = ["SimpleRegistry", "StringRegistry", "is_string"]
