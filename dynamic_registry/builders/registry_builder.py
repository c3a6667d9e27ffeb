"""Build registries and populators from OmegaConf definitions."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from omegaconf import DictConfig, ListConfig, OmegaConf

from dynamic_registry.core.exceptions import ConfigurationError
from dynamic_registry.populators.base import DynamicPopulator, StaticValuesPopulator
from dynamic_registry.registries.simple_registry import SimpleRegistry
from dynamic_registry.registries.string_registry import is_string
from dynamic_registry.utils.logger import get_logger

SUPPORTED_KINDS: tuple[str, ...] = ("simple", "string")
SUPPORTED_POPULATORS: tuple[str, ...] = ("values", "parquet", "csv")

logger = get_logger(__name__)


def _as_config(cfg: Any) -> DictConfig:
    if isinstance(cfg, DictConfig):
        return cfg
    if isinstance(cfg, dict):
        return OmegaConf.create(cfg)
    raise ConfigurationError(f"Expected a mapping, got {type(cfg).__name__}.")


def _as_list(value: Any, key: str) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, ListConfig):
        return list(OmegaConf.to_container(value, resolve=True))  # type: ignore[arg-type]
    if isinstance(value, (list, tuple)):
        return list(value)
    raise ConfigurationError(f"'{key}' must be a list, got {type(value).__name__}.")


def _required(cfg: DictConfig, key: str, owner: str) -> str:
    value = cfg.get(key)
    if value is None or str(value).strip() == "":
        raise ConfigurationError(f"{owner} definition requires '{key}'.")
    return str(value)


def build_populator(cfg: Any) -> DynamicPopulator:
    """Build a populator based on its ``type`` key."""

    cfg = _as_config(cfg)
    populator_type = _required(cfg, "type", "Populator").lower()
    if populator_type == "values":
        return StaticValuesPopulator(_as_list(cfg.get("values"), "values"))
    if populator_type == "parquet":
        from dynamic_registry.populators.parquet_populator import ParquetColumnPopulator

        return ParquetColumnPopulator(
            path=_required(cfg, "path", "Parquet populator"),
            column=_required(cfg, "column", "Parquet populator"),
        )
    if populator_type == "csv":
        from dynamic_registry.populators.csv_populator import CsvColumnPopulator

        return CsvColumnPopulator(
            path=_required(cfg, "path", "CSV populator"),
            column=_required(cfg, "column", "CSV populator"),
        )
    raise ConfigurationError(
        f"Unsupported populator type: {cfg.type}. "
        f"Supported types: {', '.join(SUPPORTED_POPULATORS)}."
    )


def build_registry(cfg: Any) -> SimpleRegistry:
    """Build one registry with its populators registered but not yet run."""

    cfg = _as_config(cfg)
    name = _required(cfg, "name", "Registry")
    kind = str(cfg.get("kind", "simple")).lower()
    if kind not in SUPPORTED_KINDS:
        raise ConfigurationError(
            f"Unsupported registry kind for '{name}': {kind}. "
            f"Supported kinds: {', '.join(SUPPORTED_KINDS)}."
        )

    registry = SimpleRegistry(
        _as_list(cfg.get("values"), "values"),
        name=name,
        default_values=_as_list(cfg.get("default_values"), "default_values"),
        fail_silently=bool(cfg.get("fail_silently", False)),
        value_checks=(is_string,) if kind == "string" else (),
    )
    for populator_cfg in _as_list(cfg.get("populators"), "populators"):
        registry.register(build_populator(populator_cfg))
    if cfg.get("profile", False):
        registry.perf.enabled = True

    logger.debug(
        "Built %s registry '%s' with %d populators.",
        kind,
        name,
        len(registry.get_populators()),
    )
    return registry


def build_registries(definitions: Iterable[Any] | None) -> dict[str, SimpleRegistry]:
    """Build every registry of a ``registries`` list, keyed by name."""

    registries: dict[str, SimpleRegistry] = {}
    for definition in _as_list(definitions, "registries"):
        registry = build_registry(definition)
        if registry.name in registries:
            raise ConfigurationError(f"Registry '{registry.name}' is defined more than once.")
        registries[registry.name] = registry
    return registries
