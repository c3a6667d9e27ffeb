"""OmegaConf helpers."""

from __future__ import annotations

from pathlib import Path

from omegaconf import DictConfig, OmegaConf

from dynamic_registry.core.exceptions import ConfigurationError

# Shipped as package data next to the subpackages.
CONFIG_ROOT = Path(__file__).resolve().parents[1] / "configs"


def load_config(path: str | Path | None = None) -> DictConfig:
    """Load a YAML config, defaulting to the bundled ``configs/config.yaml``."""

    target = CONFIG_ROOT / "config.yaml" if path is None else Path(path)
    cfg = OmegaConf.load(target)
    if not isinstance(cfg, DictConfig):
        raise ConfigurationError(f"Config at {target} must be a mapping, got a list.")
    return cfg


def as_yaml(cfg: DictConfig) -> str:
    """Render ``cfg`` with interpolations resolved, for echoing a run's config."""

    return OmegaConf.to_yaml(cfg, resolve=True)
