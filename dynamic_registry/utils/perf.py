"""Wall-clock timing of population passes."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(slots=True)
class PerfTracker:
    """Accumulates named durations when profiling is enabled."""

    enabled: bool = False
    _durations: dict[str, float] = field(default_factory=dict)
    _calls: dict[str, int] = field(default_factory=dict)

    @contextmanager
    def time(self, name: str) -> Iterator[None]:
        if not self.enabled:
            yield
            return
        started = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - started
            self._durations[name] = self._durations.get(name, 0.0) + elapsed
            self._calls[name] = self._calls.get(name, 0) + 1

    def calls(self, name: str) -> int:
        return self._calls.get(name, 0)

    def as_dict(self) -> dict[str, float]:
        return {name: float(value) for name, value in sorted(self._durations.items())}
