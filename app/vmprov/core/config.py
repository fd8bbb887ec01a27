"""Provisioning config file I/O operations.

This module provides functions for loading and saving provision.toml
files with validation using Pydantic models.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import ValidationError

from vmprov.core.paths import ensure_config_dir, get_config_path
from vmprov.models.config import ProvisionConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for config-related errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the config content is invalid."""


def load_config(path: Path | None = None) -> ProvisionConfig:
    """Load and validate a provisioning config from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated ProvisionConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return ProvisionConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> tuple[ProvisionConfig, bool]:
    """Load the config file, falling back to built-in defaults.

    An explicitly given path must exist; only the default location may be
    absent.

    Args:
        path: Explicit config path, or None for the default location.

    Returns:
        Tuple of (config, loaded_from_file).

    Raises:
        ConfigError: If the file exists but cannot be loaded, or an
            explicit path does not exist.
    """
    if path is None and not get_config_path().exists():
        return ProvisionConfig(), False
    return load_config(path), True


def save_config(config: ProvisionConfig, path: Path | None = None) -> Path:
    """Save a provisioning config to a TOML file.

    The file is written to a temporary file in the same directory and
    moved into place with os.replace().

    Args:
        config: The ProvisionConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    if path is None:
        try:
            ensure_config_dir()
        except RuntimeError as e:
            raise ConfigError(str(e)) from e
    config_path = path or get_config_path()
    data = config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: ProvisionConfig) -> dict[str, Any]:
    """Convert a ProvisionConfig to a dictionary suitable for TOML.

    TOML has no null, so unset optional values are left out.

    Args:
        config: The ProvisionConfig object to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    return config.model_dump(mode="json", exclude_none=True)


def require_config(config_path: Path | None = None) -> ProvisionConfig:
    """Load the config or exit with a helpful error message.

    Falls back to built-in defaults when no config exists at the default
    location.

    Args:
        config_path: Optional custom config path.

    Returns:
        Loaded and validated ProvisionConfig.

    Raises:
        typer.Exit: If the config cannot be loaded.
    """
    import typer

    from vmprov.utils.formatting import print_error, print_info

    try:
        config, from_file = load_config_or_default(config_path)
    except ConfigNotFoundError as e:
        print_error(f"Config not found: {config_path}")
        print_info("Run 'vmprov init' to write the default configuration.")
        raise typer.Exit(code=1) from e
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e

    if not from_file:
        logger.info("No config at %s, using defaults", get_config_path())
    return config
