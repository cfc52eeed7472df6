"""Layered TOML files for venture_cms settings.

A config directory holds ``default.toml`` and optional per-environment
overlays named after ``VENTURE_ENV`` (``development.toml``,
``production.toml``). Overlay tables are merged key by key onto the
defaults, so an overlay only lists what it changes.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_VAR = "VENTURE_CONFIG_DIR"
ENVIRONMENT_VAR = "VENTURE_ENV"
DEFAULT_ENVIRONMENT = "development"


def resolve_config_dir(config_dir: Path | None = None) -> Path:
    """Return the directory holding the TOML layers.

    An explicit argument wins over VENTURE_CONFIG_DIR, which wins over
    ``./config``.

    Raises:
        FileNotFoundError: If the directory does not exist
    """
    if config_dir is None:
        config_dir = Path(os.environ.get(CONFIG_DIR_VAR, "config"))
    if not config_dir.is_dir():
        raise FileNotFoundError(f"Config directory not found: {config_dir}")
    return config_dir


def merge_tables(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Merge an overlay onto base. Tables merge recursively, other values replace."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_tables(current, value)
        else:
            merged[key] = value
    return merged


def load_config(config_dir: Path | None = None, environment: str | None = None) -> dict[str, Any]:
    """Read ``default.toml`` and the overlay for `environment`, if present.

    Args:
        config_dir: Directory to read; see `resolve_config_dir`
        environment: Overlay name; defaults to VENTURE_ENV or "development"

    Raises:
        FileNotFoundError: If the directory or default.toml is missing
        tomllib.TOMLDecodeError: If a layer is not valid TOML
    """
    directory = resolve_config_dir(config_dir)
    environment = environment or os.environ.get(ENVIRONMENT_VAR, DEFAULT_ENVIRONMENT)

    default_layer = directory / "default.toml"
    if not default_layer.is_file():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_layer}. "
            f"Create it or point {CONFIG_DIR_VAR} at a directory that has one."
        )

    layers = [default_layer]
    overlay = directory / f"{environment}.toml"
    if overlay.is_file():
        layers.append(overlay)

    config: dict[str, Any] = {}
    for layer in layers:
        with layer.open("rb") as f:
            config = merge_tables(config, tomllib.load(f))
    return config
