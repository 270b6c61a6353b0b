"""Locate and read YAML config files."""

from __future__ import annotations

import os
from pathlib import Path

import yaml


def resolve_config_file(
    name_or_path: str | None,
    config_dir: Path,
    env_var: str = "CONFIG_ENV",
    fallback: str = "prod",
) -> Path:
    """Return the YAML file a CLI should load.

    `name_or_path` may be a bare environment name ("prod", "test"), looked up
    as `<config_dir>/<name>.yaml`, or an explicit path ending in .yaml/.yml.
    When it is None the name comes from `env_var`, then `fallback`.

    Raises:
        FileNotFoundError: If the resolved file does not exist.
    """
    name = name_or_path or os.environ.get(env_var) or fallback

    if name.endswith((".yaml", ".yml")):
        candidate = Path(name).expanduser()
    else:
        candidate = config_dir / f"{name}.yaml"

    if not candidate.is_file():
        raise FileNotFoundError(f"Config file not found: {candidate}")
    return candidate


def read_yaml_mapping(path: Path) -> dict:
    """Read a YAML file whose top level is a mapping; an empty file reads as {}."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data
