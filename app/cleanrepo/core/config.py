"""User settings for clean-repo.

Settings live in a TOML file (``~/.config/clean-repo/config.toml`` by
default)::

    [clean]
    exclude = ["*.env", ".venv"]
    progress_threshold = 10

    [colors]
    info = "#0ec1c8"

A missing file means defaults. A file that cannot be read, parsed, or
validated is an error: silently dropping configured exclusions could
delete files the user asked to keep.
"""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cleanrepo.core.paths import get_config_path
from cleanrepo.errors import ConfigError
from cleanrepo.patterns import validate_pattern

logger = logging.getLogger(__name__)

DEFAULT_PROGRESS_THRESHOLD = 10


class CleanSettings(BaseModel):
    """Settings for the cleanup run.

    Attributes:
        exclude: Exclusion patterns applied on every run, before any
            patterns given on the command line.
        progress_threshold: Minimum number of candidates for which a
            progress bar is shown while deleting.
    """

    model_config = ConfigDict(extra="forbid")

    exclude: list[str] = Field(default_factory=list)
    progress_threshold: int = Field(default=DEFAULT_PROGRESS_THRESHOLD, ge=0)


class Settings(BaseModel):
    """Top-level settings file model."""

    model_config = ConfigDict(extra="forbid")

    clean: CleanSettings = Field(default_factory=CleanSettings)
    colors: dict[str, str] = Field(default_factory=dict)


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Settings file. Defaults to :func:`get_config_path`.

    Returns:
        Validated Settings; defaults if the file does not exist.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML,
            or does not match the settings schema.
        InvalidPatternError: If a configured exclusion pattern is malformed.
    """
    if path is None:
        path = get_config_path()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        logger.debug("No settings file at %s, using defaults", path)
        return Settings()
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse settings file {path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Failed to read settings file {path}: {e}"
        raise ConfigError(msg) from e

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid settings file {path}: {e}"
        raise ConfigError(msg) from e

    for pattern in settings.clean.exclude:
        validate_pattern(pattern)

    logger.debug("Loaded settings from %s", path)
    return settings
