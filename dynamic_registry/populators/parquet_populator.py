"""Populator reading one column of a Parquet file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pyarrow.parquet as pq

from dynamic_registry.core.exceptions import ConfigurationError
from dynamic_registry.populators.base import DynamicPopulator
from dynamic_registry.utils.logger import get_logger
from dynamic_registry.utils.values import distinct_values

if TYPE_CHECKING:
    from dynamic_registry.core.registry import AbstractRegistry

logger = get_logger(__name__)


class ParquetColumnPopulator(DynamicPopulator):
    """Loads the distinct non-null values of ``column`` from a Parquet table."""

    def __init__(self, path: str | Path, column: str) -> None:
        self.path = Path(path)
        self.column = str(column)

    def load(self) -> list:
        schema = pq.read_schema(self.path)
        if self.column not in schema.names:
            raise ConfigurationError(
                f"Column '{self.column}' not found in {self.path}. "
                f"Available: {', '.join(schema.names) or '<empty>'}."
            )
        table = pq.read_table(self.path, columns=[self.column])
        column = table[self.column].drop_null().combine_chunks()
        return distinct_values(column.to_numpy(zero_copy_only=False))

    def populate(self, registry: AbstractRegistry) -> None:
        values = self.load()
        logger.debug("Loaded %d values from %s:%s.", len(values), self.path, self.column)
        registry.add_values(values)
