"""XDG-compliant locations for vmprov files.

- Config: $XDG_CONFIG_HOME/vmprov/ (provision.toml, theme.toml)
- State: $XDG_STATE_HOME/vmprov/ (provision.log)
"""

import os
from pathlib import Path

APP_NAME = "vmprov"

CONFIG_FILENAME = "provision.toml"
THEME_FILENAME = "theme.toml"
LOG_FILENAME = "provision.log"


def _xdg_home(env_var: str, fallback: str) -> Path:
    # Empty values count as unset
    base = os.environ.get(env_var)
    root = Path(base) if base else Path.home() / fallback
    return root / APP_NAME


def get_config_dir() -> Path:
    """Directory holding provision.toml and theme overrides."""
    return _xdg_home("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    """Directory holding the provisioning log."""
    return _xdg_home("XDG_STATE_HOME", ".local/state")


def get_config_path() -> Path:
    return get_config_dir() / CONFIG_FILENAME


def get_theme_path() -> Path:
    return get_config_dir() / THEME_FILENAME


def get_log_path() -> Path:
    return get_state_dir() / LOG_FILENAME


def _ensure_dir(path: Path, kind: str) -> Path:
    """Create a directory and its parents.

    Args:
        path: Directory to create.
        kind: Label used in the error message ("config", "state").

    Returns:
        The directory path.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        reason = "Permission denied" if isinstance(e, PermissionError) else str(e)
        msg = f"Cannot create {kind} directory {path}: {reason}"
        raise RuntimeError(msg) from e
    return path


def ensure_config_dir() -> Path:
    """Create the config directory if needed."""
    return _ensure_dir(get_config_dir(), "config")


def ensure_state_dir() -> Path:
    """Create the state directory if needed."""
    return _ensure_dir(get_state_dir(), "state")
