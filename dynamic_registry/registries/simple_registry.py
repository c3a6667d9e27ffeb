"""Ready-made registry for ad hoc value sets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from dynamic_registry.core.registry import AbstractRegistry, ValueCheck


class SimpleRegistry(AbstractRegistry):
    """Concrete registry that needs no subclass.

    Name, default values, the silent-fail policy and extra value checks are
    given per instance instead of per class.
    """

    def __init__(
        self,
        values: Iterable[Any] | None = None,
        *,
        name: str = "registry",
        default_values: Sequence[Any] = (),
        fail_silently: bool = False,
        value_checks: Sequence[ValueCheck] = (),
    ) -> None:
        self._name = str(name)
        self._default_values = tuple(default_values)
        self._fail_silently = bool(fail_silently)
        self.value_checks = (*value_checks, *AbstractRegistry.value_checks)  # type: ignore[misc]
        super().__init__(values)

    @property
    def name(self) -> str:
        return self._name

    @property
    def fail_silently(self) -> bool:
        return self._fail_silently

    def _initial_defaults(self) -> Iterable[Any]:
        return self._default_values
