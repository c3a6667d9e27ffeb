"""Registry variant that only accepts strings."""

from __future__ import annotations

from typing import Any

from dynamic_registry.core.registry import AbstractRegistry


def is_string(value: Any) -> bool:
    return isinstance(value, str)


class StringRegistry(AbstractRegistry):
    """Rejects non-string values before the duplicate check."""

    value_checks = (is_string, *AbstractRegistry.value_checks)
