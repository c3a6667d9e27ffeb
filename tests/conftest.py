from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from pathlib import Path
from typing import Any

import pytest

from dynamic_registry.core.context import DEFAULT_CONTEXT, RegistryContext
from tests.factories.registry_factory import write_values_csv, write_values_parquet


@pytest.fixture(autouse=True)
def _fresh_default_context() -> Iterator[None]:
    DEFAULT_CONTEXT.clear()
    yield
    DEFAULT_CONTEXT.clear()


@pytest.fixture
def context() -> RegistryContext:
    return RegistryContext()


@pytest.fixture
def write_parquet_values(tmp_path: Path) -> Callable[..., Path]:
    def _write(
        values: Sequence[Any],
        *,
        column: str = "name",
        filename: str = "values.parquet",
        **extra: Sequence[Any],
    ) -> Path:
        path = tmp_path / filename
        write_values_parquet(path, column, values, **extra)
        return path

    return _write


@pytest.fixture
def write_csv_values(tmp_path: Path) -> Callable[..., Path]:
    def _write(
        values: Sequence[Any],
        *,
        column: str = "name",
        filename: str = "values.csv",
        **extra: Sequence[Any],
    ) -> Path:
        path = tmp_path / filename
        write_values_csv(path, column, values, **extra)
        return path

    return _write
