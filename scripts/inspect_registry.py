"""CLI for checking a value against a configured registry."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import hydra
from omegaconf import DictConfig

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dynamic_registry.builders.registry_builder import build_registries  # noqa: E402
from dynamic_registry.core.exceptions import ConfigurationError  # noqa: E402
from dynamic_registry.utils.config import as_yaml  # noqa: E402
from dynamic_registry.utils.logger import configure_logging  # noqa: E402


def inspect_registry(cfg: DictConfig) -> dict:
    registries = build_registries(cfg.registries)
    name = str(cfg.query.registry)
    if name not in registries:
        known = ", ".join(sorted(registries)) or "<empty>"
        raise ConfigurationError(f"Unknown registry '{name}'. Available: {known}.")

    registry = registries[name]
    registry.perf.enabled = bool(cfg.get("profile", False))
    found = registry.has(cfg.query.value)
    return {
        "registry": registry.name,
        "value": cfg.query.value,
        "found": found,
        "populated": registry.populated,
        "value_count": len(registry.get_values()),
        "timings": registry.perf.as_dict(),
    }


@hydra.main(version_base=None, config_path="../dynamic_registry/configs", config_name="config")
def main(cfg: DictConfig) -> None:
    configure_logging(str(cfg.logging.level))
    print(as_yaml(cfg))
    print(json.dumps(inspect_registry(cfg), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
