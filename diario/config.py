"""Configuration file management for diario."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from diario.store.persistence import DEFAULT_STORAGE_KEY
from diario.store.storage import get_data_dir


@dataclass(frozen=True)
class Settings:
    """Resolved settings, defaults filled in."""

    data_dir: Path
    storage_key: str
    export_dir: Path


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "diario" / "config.toml"


def default_config() -> dict[str, Any]:
    return {
        "storage": {
            "data_dir": str(get_data_dir()),
            "key": DEFAULT_STORAGE_KEY,
        },
        "export": {
            "output_dir": ".",
        },
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_settings(config_path: Path | None = None) -> Settings:
    """Resolve settings from the config file, falling back to defaults.

    A missing config file is not an error: every key has a default.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Resolved Settings.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = {}

    defaults = default_config()
    storage = {**defaults["storage"], **config.get("storage", {})}
    export = {**defaults["export"], **config.get("export", {})}

    return Settings(
        data_dir=Path(storage["data_dir"]).expanduser(),
        storage_key=str(storage["key"]),
        export_dir=Path(export["output_dir"]).expanduser(),
    )
