"""XDG-compliant path management for clean-repo.

XDG defaults:
- Config: ~/.config/clean-repo/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "clean-repo"

CONFIG_ENV_VAR = "CLEAN_REPO_CONFIG"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/clean-repo/ (or XDG_CONFIG_HOME/clean-repo/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the settings file path.

    CLEAN_REPO_CONFIG, when set, names the file directly.

    Returns:
        Path to ~/.config/clean-repo/config.toml.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_config_dir() / "config.toml"
