"""Conversion of loaded column data into registry values."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np


def to_builtin(value: Any) -> Any:
    """Convert numpy scalars and arrays into hashable builtins."""

    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray):
        return tuple(to_builtin(v) for v in value.tolist())
    if isinstance(value, list):
        return tuple(to_builtin(v) for v in value)
    return value


def distinct_values(values: Iterable[Any]) -> list[Any]:
    """Drop nulls and repeats from loaded values, keeping first-seen order."""

    seen: dict[Any, None] = {}
    for raw in values:
        if raw is None:
            continue
        if isinstance(raw, float) and np.isnan(raw):
            continue
        seen.setdefault(to_builtin(raw), None)
    return list(seen)
