"""Lazily populated registry of unique values.

A registry holds three groups of values:

* default values declared on the class, restored by :meth:`AbstractRegistry.reset`;
* manual values inserted by callers outside of a population pass;
* dynamic values inserted by populators while a population pass is running.

Population is deferred until :meth:`AbstractRegistry.has` (or an explicit
:meth:`AbstractRegistry.populate`) is called, then cached until the registry is
depopulated or reset. Insertion methods are shared between callers and
populators; the ``populating`` flag decides which group receives the value.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from itertools import chain
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from dynamic_registry.core.context import DEFAULT_CONTEXT, RegistryContext
from dynamic_registry.core.exceptions import InvalidValue
from dynamic_registry.utils.logger import get_logger
from dynamic_registry.utils.perf import PerfTracker

if TYPE_CHECKING:
    from dynamic_registry.populators.base import DynamicPopulator

ValueCheck = Callable[[Any], bool]
R = TypeVar("R", bound="AbstractRegistry")

logger = get_logger(__name__)


def is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


class AbstractRegistry(ABC):
    """Named set of unique values with deferred, cached population."""

    default_values: ClassVar[tuple[Any, ...]] = ()
    value_checks: ClassVar[tuple[ValueCheck, ...]] = (is_hashable,)

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        # dicts keep insertion order, values are the keys
        self._defaults: dict[Any, None] = dict.fromkeys(self._initial_defaults())
        self._values: dict[Any, None] = {}
        self._dynamic_values: dict[Any, None] = {}
        self._populators: list[DynamicPopulator] = []
        self._populated = False
        self._populating = False
        self.perf = PerfTracker()

        if values is not None:
            self.set_values(values)

    @property
    @abstractmethod
    def name(self) -> str:
        """Friendly name of the registry, used in messages."""

    @property
    def fail_silently(self) -> bool:
        """Whether invalid insertions are ignored instead of raising InvalidValue."""
        return False

    @property
    def populated(self) -> bool:
        return self._populated

    @property
    def populating(self) -> bool:
        return self._populating

    def _initial_defaults(self) -> Iterable[Any]:
        return self.default_values

    def set_populated(self, populated: bool = True) -> None:
        self._populated = bool(populated)

    # Values

    def valid_value(self, value: Any) -> bool:
        """Return whether ``value`` passes every value check and is not present yet."""

        if not all(check(value) for check in self.value_checks):
            return False
        return not self._contains(value)

    def add_value(self, value: Any) -> None:
        if not self.valid_value(value):
            if self.fail_silently:
                logger.debug("Registry '%s' ignored invalid value %r.", self.name, value)
                return
            raise InvalidValue(f"Value {value!r} is not allowed within registry '{self.name}'.")

        if self._populating:
            self._dynamic_values[value] = None
        else:
            self._values[value] = None

    def add_values(self, values: Iterable[Any]) -> None:
        """Add values in order; the first rejected value aborts the batch."""

        for value in values:
            self.add_value(value)

    def set_values(self, values: Iterable[Any]) -> None:
        """Replace the values of the current mode (manual or dynamic) with ``values``."""

        if self._populating:
            self._dynamic_values.clear()
        else:
            self._values.clear()
        self.add_values(values)

    def get_values(self) -> list[Any]:
        """Return default, manual and dynamic values, without triggering population."""

        return list(chain(self._defaults, self._values, self._dynamic_values))

    def has(self, value: Any) -> bool:
        self.populate()
        return self._contains(value)

    def __contains__(self, value: Any) -> bool:
        return self.has(value)

    def _contains(self, value: Any) -> bool:
        if not is_hashable(value):
            return False
        return value in self._defaults or value in self._values or value in self._dynamic_values

    # Population

    def populate(self) -> None:
        """Run every registered populator once, unless already populated or populating."""

        if self._populated or self._populating:
            return

        started = time.perf_counter()
        self._populating = True
        current: DynamicPopulator | None = None
        try:
            for current in self._populators:
                logger.debug(
                    "Registry '%s' running populator %s.", self.name, type(current).__name__
                )
                with self.perf.time(type(current).__name__):
                    current.populate(self)
        except Exception:
            self._dynamic_values.clear()
            logger.warning(
                "Populator %s failed for registry '%s'.", type(current).__name__, self.name
            )
            raise
        finally:
            self._populating = False

        self._populated = True
        logger.info(
            "Registry '%s' populated with %d dynamic values in %.3fs.",
            self.name,
            len(self._dynamic_values),
            time.perf_counter() - started,
        )

    def depopulate(self) -> None:
        """Drop dynamically added values so the next query populates again."""

        self._dynamic_values.clear()
        self._populated = False

    def reset(self) -> None:
        """Drop manual and dynamic values and restore the default values."""

        self._values.clear()
        self._dynamic_values.clear()
        self._defaults = dict.fromkeys(self._initial_defaults())
        self._populated = False

    def clear(self) -> None:
        """Drop every value, defaults included, until the next reset()."""

        self._values.clear()
        self._dynamic_values.clear()
        self._defaults.clear()
        self._populated = False

    # Populators

    def register(self, populator: DynamicPopulator) -> None:
        if not callable(getattr(populator, "populate", None)):
            raise TypeError(
                f"Populator for registry '{self.name}' must define populate(registry), "
                f"got {type(populator).__name__}."
            )
        self._populators.append(populator)

    def get_populators(self) -> list[DynamicPopulator]:
        return list(self._populators)

    def clear_populators(self) -> None:
        self._populators.clear()

    # Singleton access

    @classmethod
    def get(
        cls: type[R],
        values: Iterable[Any] | None = None,
        *,
        context: RegistryContext | None = None,
    ) -> R:
        """Return the shared instance of this registry class.

        ``values`` seed the instance only when it is created by this call.
        """

        target = DEFAULT_CONTEXT if context is None else context
        return target.get(cls, values)

    def __repr__(self) -> str:
        state = "populated" if self._populated else "unpopulated"
        return f"{type(self).__name__}(name={self.name!r}, values={len(self.get_values())}, {state})"
