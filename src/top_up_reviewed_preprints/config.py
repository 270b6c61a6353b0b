"""Configuration loader for the reviewed preprints top-up."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from common.config import read_yaml_mapping, resolve_config_file

CONFIG_DIR = Path(__file__).parent / "configs"

DEFAULT_API_BASE_URL = "https://api.prod.elifesciences.org/reviewed-preprints"


@dataclass
class TopUpConfig:
    api_base_url: str = DEFAULT_API_BASE_URL
    cache_dir: str = ".cached"
    request_timeout: int = 30
    max_workers: int = 8
    user_agent: str = "reviewed-preprints-cache/0.1.0"


def load_config(config_name: str | None = None) -> TopUpConfig:
    """Load configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension) or a path to one.
                    If None, uses CONFIG_ENV env var or "prod".

    Returns:
        Loaded TopUpConfig object
    """
    return _parse_config(read_yaml_mapping(resolve_config_file(config_name, CONFIG_DIR)))


def _parse_config(data: dict) -> TopUpConfig:
    defaults = TopUpConfig()
    api = data.get("api", {})
    cache = data.get("cache", {})
    return TopUpConfig(
        api_base_url=api.get("base_url", defaults.api_base_url).rstrip("/"),
        cache_dir=cache.get("dir", defaults.cache_dir),
        request_timeout=api.get("request_timeout", defaults.request_timeout),
        max_workers=data.get("max_workers", defaults.max_workers),
        user_agent=api.get("user_agent", defaults.user_agent),
    )


# Loaded on first get_config(); set_config() overrides it for the rest of the process.
_active: TopUpConfig | None = None


def get_config() -> TopUpConfig:
    global _active
    if _active is None:
        _active = load_config()
    return _active


def set_config(config: TopUpConfig) -> None:
    global _active
    _active = config


def reset_config() -> None:
    global _active
    _active = None
