from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from lexispell.checker import SpellChecker


def load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Malformed YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return data


def parse_log_level(name: str) -> str:
    level = str(name).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level


@dataclass(frozen=True)
class CheckerConfig:
    seed: Path | None = None
    index: Path | None = None
    training: Path | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if (self.seed is None) == (self.index is None):
            raise ValueError("Exactly one of 'seed' or 'index' must be configured.")
        parse_log_level(self.log_level)

    @staticmethod
    def from_dict(data: dict[str, Any], base_dir: Path | None = None) -> "CheckerConfig":
        unknown = set(data) - {"seed", "index", "training", "log_level"}
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")

        def _path(key: str) -> Path | None:
            value = data.get(key)
            if value is None:
                return None
            p = Path(str(value))
            return p if p.is_absolute() or base_dir is None else base_dir / p

        return CheckerConfig(
            seed=_path("seed"),
            index=_path("index"),
            training=_path("training"),
            log_level=parse_log_level(data.get("log_level", "WARNING")),
        )

    @staticmethod
    def load(path: Path) -> "CheckerConfig":
        return CheckerConfig.from_dict(load_yaml(path), base_dir=path.parent)


def build_checker(cfg: CheckerConfig) -> SpellChecker:
    checker = SpellChecker()
    if cfg.index is not None:
        return checker.initialize_from_index(cfg.index, cfg.training)
    return checker.initialize_from_files(cfg.seed, cfg.training)
