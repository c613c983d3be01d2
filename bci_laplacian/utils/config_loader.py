"""Configuration loader for YAML-based filter config."""

from pathlib import Path
from typing import Any

import yaml

from bci_laplacian.preprocessing.spatial_filters.errors import MissingParameterError

_CONFIG: dict[str, Any] | None = None

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load config from YAML file. Uses default path if none given."""
    global _CONFIG
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with open(path, "r") as f:
        _CONFIG = yaml.safe_load(f) or {}
    return _CONFIG


def get_config() -> dict[str, Any]:
    """Return loaded config. Loads default if not yet loaded."""
    global _CONFIG
    if _CONFIG is None:
        load_config()
    assert _CONFIG is not None
    return _CONFIG


def get_laplacian_params(config: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    Return the spatial_filter.laplacian section (layout, optional nchannels).
    Raises MissingParameterError if the section is absent.
    """
    cfg = get_config() if config is None else config
    section = (cfg.get("spatial_filter") or {}).get("laplacian")
    if not isinstance(section, dict):
        raise MissingParameterError("Config has no 'spatial_filter.laplacian' section")
    return dict(section)
