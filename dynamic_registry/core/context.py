"""Registry-of-registries keyed by registry class."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from dynamic_registry.core.registry import AbstractRegistry

R = TypeVar("R", bound="AbstractRegistry")


@dataclass
class RegistryContext:
    """Holds at most one instance per registry class, created on first access."""

    _instances: dict[type, AbstractRegistry] = field(default_factory=dict)

    def get(self, registry_cls: type[R], values: Iterable[Any] | None = None) -> R:
        instance = self._instances.get(registry_cls)
        if instance is None:
            instance = registry_cls(values)
            self._instances[registry_cls] = instance
        return instance  # type: ignore[return-value]

    def has(self, registry_cls: type) -> bool:
        return registry_cls in self._instances

    def registries(self) -> tuple[AbstractRegistry, ...]:
        return tuple(self._instances.values())

    def clear(self) -> None:
        self._instances.clear()

    def __len__(self) -> int:
        return len(self._instances)


DEFAULT_CONTEXT = RegistryContext()
