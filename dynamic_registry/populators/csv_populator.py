"""Populator reading one column of a CSV file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd

from dynamic_registry.core.exceptions import ConfigurationError
from dynamic_registry.populators.base import DynamicPopulator
from dynamic_registry.utils.logger import get_logger
from dynamic_registry.utils.values import distinct_values

if TYPE_CHECKING:
    from dynamic_registry.core.registry import AbstractRegistry

logger = get_logger(__name__)


class CsvColumnPopulator(DynamicPopulator):
    """Loads the distinct non-null values of ``column`` from a CSV file."""

    def __init__(self, path: str | Path, column: str) -> None:
        self.path = Path(path)
        self.column = str(column)

    def load(self) -> list:
        header = pd.read_csv(self.path, nrows=0)
        if self.column not in header.columns:
            available = ", ".join(str(name) for name in header.columns) or "<empty>"
            raise ConfigurationError(
                f"Column '{self.column}' not found in {self.path}. Available: {available}."
            )
        frame = pd.read_csv(self.path, usecols=[self.column])
        return distinct_values(frame[self.column].dropna().to_numpy())

    def populate(self, registry: AbstractRegistry) -> None:
        values = self.load()
        logger.debug("Loaded %d values from %s:%s.", len(values), self.path, self.column)
        registry.add_values(values)
