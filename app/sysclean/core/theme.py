"""Color theme for the sysclean CLI.

The bundled ``data/theme.toml`` supplies the defaults; a ``[colors]`` table
in the user's ``theme.toml`` overrides any subset of them.
"""

import functools
import logging
import re
import tomllib
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from sysclean.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")

# Styles rendered bold on top of their base color
_BOLD_STYLES = ("error", "size")


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) of every style the CLI prints with."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    size: str = "#faf870"
    path: str = "#69B9A1"
    spinner: str = "#0ec1c8"
    metric: str = "#c1ff62"

    @field_validator("*", mode="before")
    @classmethod
    def _check_hex(cls, v: object) -> str:
        if not isinstance(v, str) or not _HEX_COLOR.fullmatch(v.strip()):
            msg = f"invalid hex color {v!r}"
            raise ValueError(msg)
        return v.strip()


def _parse_colors(text: str, source: str) -> dict[str, object]:
    """Return the ``[colors]`` table of a theme file, or {} if unusable."""
    try:
        colors = tomllib.loads(text).get("colors", {})
    except tomllib.TOMLDecodeError as e:
        logger.warning("Failed to parse theme file %s: %s", source, e)
        return {}
    if not isinstance(colors, dict):
        logger.warning("Invalid 'colors' section in %s", source)
        return {}
    return colors


def _user_colors(path: Path) -> dict[str, object]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as e:
        logger.warning("Failed to read theme file %s: %s", path, e)
        return {}
    logger.debug("Loaded user theme overrides from %s", path)
    return _parse_colors(text, str(path))


def load_theme() -> ThemeColors:
    """Merge the user's overrides into the bundled colors.

    An invalid merged theme is logged and replaced by the defaults.
    """
    bundled = resources.files("sysclean.data").joinpath("theme.toml").read_text(encoding="utf-8")
    colors = {**_parse_colors(bundled, "bundled theme"), **_user_colors(get_user_theme_path())}
    try:
        return ThemeColors.model_validate(colors)
    except ValidationError as e:
        logger.warning("Theme validation failed, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors) -> Theme:
    """Build the Rich theme, including the ``bold_header`` and ``dim`` aliases."""
    styles = {
        name: f"bold {color}" if name in _BOLD_STYLES else color
        for name, color in colors.model_dump().items()
    }
    styles["bold_header"] = f"bold {colors.header}"
    styles["dim"] = colors.muted
    return Theme(styles)


@functools.cache
def get_theme() -> Theme:
    """Load the theme once per process."""
    return get_rich_theme(load_theme())
