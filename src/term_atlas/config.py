"""Configuration management for Term Atlas."""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from .layout.composer import DEFAULT_COMPOSER
from .layout.solver import DEFAULT_SOLVER

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "records": {
        "id_field": "id",
        "text_fields": ["term", "definition", "example"],
        "group_field": "term_type_id",
    },
    "group_names": {},
    "tokenizer": {"min_length": 3, "extra_stopwords": []},
    "solver": dict(DEFAULT_SOLVER),
    "composer": dict(DEFAULT_COMPOSER),
}


def _find_config_file() -> Path | None:
    """Look for config.yaml in standard locations."""
    candidates = [
        Path.cwd() / "config" / "config.yaml",
        Path.cwd() / "config.yaml",
        Path.home() / ".term-atlas" / "config.yaml",
    ]
    if env_path := os.environ.get("TERM_ATLAS_CONFIG"):
        candidates.insert(0, Path(env_path).expanduser())
    for p in candidates:
        if p.exists():
            return p
    return None


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration, merging defaults with file and env vars."""
    cfg = copy.deepcopy(DEFAULT_CONFIG)

    path = Path(config_path) if config_path else _find_config_file()
    if path and path.exists():
        with open(path) as f:
            file_cfg = yaml.safe_load(f) or {}
        _deep_merge(cfg, file_cfg)

    # Env overrides
    if member_cap := os.environ.get("TERM_ATLAS_MEMBER_CAP"):
        try:
            cfg["composer"]["member_cap"] = int(member_cap)
        except ValueError:
            logger.warning(f"Ignoring TERM_ATLAS_MEMBER_CAP={member_cap!r}: not an integer")

    return cfg


def load_group_names(path: str | Path) -> dict[Any, str]:
    """Load a key -> display name mapping from a YAML or JSON file."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Group names file must contain a mapping: {path}")
    return {k: str(v) for k, v in data.items()}


def _deep_merge(base: dict, override: dict) -> None:
    """Merge override into base in-place."""
    for k, v in override.items():
        if k in base and isinstance(base[k], dict) and isinstance(v, dict):
            _deep_merge(base[k], v)
        else:
            base[k] = v
