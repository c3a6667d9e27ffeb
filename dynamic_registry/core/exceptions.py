"""Errors raised by registries, populators and config builders."""


class DynamicRegistryError(Exception):
    """Root of every error this package raises on purpose."""


class InvalidValue(DynamicRegistryError):
    """Raised when a value is rejected by a registry."""


class ConfigurationError(DynamicRegistryError):
    """Raised when a registry or populator definition cannot be built."""
