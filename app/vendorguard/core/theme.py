"""Color theme for vendorguard output.

Colors come from the bundled data/theme.toml. A theme.toml in the user
config directory may override any subset of them; an override that does
not validate is ignored as a whole.
"""

import logging
import re
import tomllib
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, ValidationError
from rich.theme import Theme

from vendorguard.core.paths import get_config_dir

logger = logging.getLogger(__name__)

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _check_hex(value: str) -> str:
    color = value.strip()
    if not _HEX_COLOR_RE.match(color):
        msg = f"'{value}' is not a #RGB or #RRGGBB color"
        raise ValueError(msg)
    return color


HexColor = Annotated[str, AfterValidator(_check_hex)]


class ThemeColors(BaseModel):
    """Colors used by status lines, tables and messages."""

    model_config = ConfigDict(extra="forbid")

    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"
    muted: HexColor = "#b2bec3"

    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"

    # Status stream
    info: HexColor = "#0ec1c8"
    comment: HexColor = "#faf870"

    # Cleanup outcomes in the results table
    removed: HexColor = "#c1ff62"
    absent: HexColor = "#b2bec3"


def get_user_theme_path() -> Path:
    """Get the user theme override path (~/.config/vendorguard/theme.toml)."""
    return get_config_dir() / "theme.toml"


def _read_colors(source: Path | Traversable) -> dict[str, str]:
    """Return the [colors] table of a theme file, or {} if it is unusable."""
    try:
        with source.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", source, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", source)
        return {}
    return {name: value for name, value in colors.items() if isinstance(value, str)}


def load_theme(user_path: Path | None = None) -> ThemeColors:
    """Load the bundled colors merged with the user's overrides.

    Args:
        user_path: Override file. Defaults to get_user_theme_path().

    Returns:
        Validated ThemeColors.
    """
    bundled = _read_colors(resources.files("vendorguard.data").joinpath("theme.toml"))
    overrides = _read_colors(user_path or get_user_theme_path())
    if not overrides:
        return ThemeColors.model_validate(bundled)

    try:
        return ThemeColors.model_validate({**bundled, **overrides})
    except ValidationError as e:
        logger.warning("Invalid theme override, using bundled colors: %s", e)
        return ThemeColors.model_validate(bundled)


def build_rich_theme(colors: ThemeColors) -> Theme:
    """Map theme colors to the style names used in Rich markup."""
    return Theme(
        {
            "header": f"bold {colors.header}",
            "border": colors.border,
            "muted": colors.muted,
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "info": colors.info,
            "comment": colors.comment,
            "removed": colors.removed,
            "absent": colors.absent,
            "package.name": "bold",
            "package.path": colors.muted,
        }
    )
