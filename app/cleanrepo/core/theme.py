"""Theme management for clean-repo output.

Colors come from the ``[colors]`` table of the settings file, layered
over built-in defaults and validated as hex codes.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

logger = logging.getLogger(__name__)


class ThemeColors(BaseModel):
    """Color configuration for clean-repo output.

    All colors must be valid hex codes (#RRGGBB or #RGB).
    """

    model_config = ConfigDict(extra="forbid")

    # Base colors
    text: str = "#ffffff"
    muted: str = "#b2bec3"

    # Semantic colors
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    debug: str = "#0e8ac8"

    # Path listings
    candidate: str = "#0ec1c8"
    excluded: str = "#faf870"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Validate that all color values are valid hex codes."""
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        if not color.startswith("#"):
            msg = f"{info.field_name}: color must start with '#'"
            raise ValueError(msg)
        color_part = color[1:]
        if len(color_part) not in (3, 6):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        try:
            int(color_part, 16)
        except ValueError:
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg) from None
        return color


def load_theme_colors(overrides: dict[str, str] | None = None) -> ThemeColors:
    """Build theme colors from user overrides.

    Invalid overrides are reported and the defaults are used instead,
    since colors never affect what gets deleted.

    Args:
        overrides: Color name to hex value, typically the ``[colors]``
            table of the settings file.

    Returns:
        Validated ThemeColors.
    """
    if not overrides:
        return ThemeColors()

    try:
        return ThemeColors(**overrides)
    except ValidationError as e:
        logger.warning("Theme validation failed, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert ThemeColors to a Rich Theme.

    Args:
        colors: ThemeColors instance to convert. Defaults to built-in colors.

    Returns:
        Rich Theme instance configured with the color scheme.
    """
    if colors is None:
        colors = ThemeColors()

    styles: dict[str, str] = {
        "text": colors.text,
        "muted": colors.muted,
        "success": colors.success,
        "warning": colors.warning,
        "error": f"bold {colors.error}",
        "info": colors.info,
        "debug": colors.debug,
        "candidate": colors.candidate,
        "excluded": colors.excluded,
        # Convenience styles
        "dim": colors.muted,
        "progress.description": colors.text,
    }

    return Theme(styles)
