"""TOML configuration loader for schema-migrator.

Files are read only from the directory named by SCHEMA_MIGRATOR_CONFIG_DIR.
The working directory is never searched: an application embedding this
library keeps its own config/ directory to itself.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "SCHEMA_MIGRATOR_CONFIG_DIR"
ENVIRONMENT_ENV = "SCHEMA_MIGRATOR_ENV"


def get_config_dir() -> Path | None:
    """Directory named by SCHEMA_MIGRATOR_CONFIG_DIR, or None when unset.

    Raises:
        FileNotFoundError: If the variable names a directory that does not exist
    """
    configured = os.environ.get(CONFIG_DIR_ENV)
    if not configured:
        return None

    path = Path(configured)
    if not path.is_dir():
        raise FileNotFoundError(f"Config directory not found: {configured}")
    return path


def get_environment() -> str:
    """Current environment name from SCHEMA_MIGRATOR_ENV ('development' if unset)."""
    return os.environ.get(ENVIRONMENT_ENV, "development")


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into a copy of base; nested tables merge key by key."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config(config_dir: Path | None = None, env: str | None = None) -> dict[str, Any]:
    """Merge default.toml and {env}.toml from the config directory.

    Both files are optional. With no directory given and
    SCHEMA_MIGRATOR_CONFIG_DIR unset, nothing is read and the result is
    empty, so the settings models fall back to their defaults.
    """
    directory = config_dir if config_dir is not None else get_config_dir()
    if directory is None:
        return {}

    merged: dict[str, Any] = {}
    for name in ("default", env or get_environment()):
        path = directory / f"{name}.toml"
        if path.is_file():
            merged = deep_merge(merged, load_toml(path))
    return merged
