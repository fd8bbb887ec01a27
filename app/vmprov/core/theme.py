"""Output colors.

The bundled data/theme.toml provides the defaults; a theme.toml in the
config directory may override any subset of them.
"""

import logging
import re
import tomllib
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from vmprov.core.paths import get_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) used by the console styles."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    # Per-package status lines
    installed: str = "#69B9A1"
    missing: str = "#f5b332"
    version: str = "#b2bec3"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object) -> str:
        """Accept only #RGB and #RRGGBB strings."""
        if not isinstance(v, str):
            msg = "color must be a string"
            raise ValueError(msg)
        color = v.strip()
        if not color.startswith("#") or len(color) not in (4, 7):
            msg = f"color must be #RGB or #RRGGBB format, got {color!r}"
            raise ValueError(msg)
        if not _HEX_COLOR.fullmatch(color):
            msg = f"invalid hex color '{color}'"
            raise ValueError(msg)
        return color


def get_bundled_theme_path() -> Path:
    """Path of the theme file shipped inside the package."""
    return Path(str(resources.files("vmprov.data").joinpath("theme.toml")))


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Read the [colors] table of a theme file.

    Returns None when the file is missing or unusable; non-string values
    are dropped.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return None

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", path)
        return None
    return {key: value for key, value in colors.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Merge the user theme over the bundled one.

    Falls back to the built-in defaults if the merged colors don't validate.
    """
    merged = _load_toml_colors(get_bundled_theme_path()) or {}
    overrides = _load_toml_colors(get_theme_path())
    if overrides is not None:
        logger.debug("Applying theme overrides from %s", get_theme_path())
        merged.update(overrides)

    try:
        return ThemeColors(**merged)
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme behind the shared consoles."""
    c = colors or load_theme()
    return Theme(
        {
            "text": c.text,
            "muted": c.muted,
            "header": f"bold {c.header}",
            "success": c.success,
            "warning": c.warning,
            "error": f"bold {c.error}",
            "info": c.info,
            "package.installed": f"bold {c.installed}",
            "package.missing": c.missing,
            "package.version": c.version,
        }
    )
