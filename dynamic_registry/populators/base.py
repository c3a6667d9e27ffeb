"""Populator interface and in-memory populators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from dynamic_registry.core.registry import AbstractRegistry


class DynamicPopulator(ABC):
    """Adds values to a registry when the registry is first queried."""

    @abstractmethod
    def populate(self, registry: AbstractRegistry) -> None:
        """Push values into ``registry`` through its insertion methods."""


class StaticValuesPopulator(DynamicPopulator):
    """Pushes a fixed sequence of values."""

    def __init__(self, values: Sequence[Any]) -> None:
        self.values = tuple(values)

    def populate(self, registry: AbstractRegistry) -> None:
        registry.add_values(self.values)


class CallablePopulator(DynamicPopulator):
    """Adapts a plain ``func(registry)`` function to the populator interface."""

    def __init__(self, func: Callable[[AbstractRegistry], None]) -> None:
        if not callable(func):
            raise TypeError(f"CallablePopulator needs a callable, got {type(func).__name__}.")
        self.func = func

    def populate(self, registry: AbstractRegistry) -> None:
        self.func(registry)
