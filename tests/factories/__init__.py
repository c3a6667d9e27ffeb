"""Shared test factories."""

from .registry_factory import (
    BlockRegistry,
    CountingPopulator,
    EmptyRegistry,
    FailingPopulator,
    FlakyPopulator,
    NumberRegistry,
    ReentrantPopulator,
    SameNameRegistry,
    SilentRegistry,
    write_values_csv,
    write_values_parquet,
)

__all__ = [
    "BlockRegistry",
    "CountingPopulator",
    "EmptyRegistry",
    "FailingPopulator",
    "FlakyPopulator",
    "NumberRegistry",
    "ReentrantPopulator",
    "SameNameRegistry",
    "SilentRegistry",
    "write_values_csv",
    "write_values_parquet",
]
