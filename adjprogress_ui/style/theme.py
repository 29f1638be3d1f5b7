from __future__ import annotations

from dataclasses import asdict, dataclass
import math
from pathlib import Path
import tomllib
from typing import Any, Mapping

from .fill import is_hex_color


@dataclass(frozen=True)
class ThemeTokens:
    """Token set supplying the indicator's default colors and lengths."""

    progress_tip: str = "#FFFFFF"
    progress_fill: str = "#6750A4"
    progress_track: str = "#E7E0EC"
    progress_tip_width_dp: float = 3.0
    progress_corner_radius_dp: float = 0.0
    density: float = 1.0


DEFAULT_TOKENS = ThemeTokens()

_COLOR_TOKENS = ("progress_tip", "progress_fill", "progress_track")


def validate_theme_tokens(overrides: Mapping[str, Any] | None = None) -> ThemeTokens:
    """Validate and merge user token overrides against the defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_TOKENS)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown theme token: {key}")
            raw[key] = value

    for key in _COLOR_TOKENS:
        if not is_hex_color(raw[key]):
            raise ValueError(f"Token `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    for key in ("progress_tip_width_dp", "progress_corner_radius_dp"):
        if not _is_number(raw[key]) or float(raw[key]) < 0:
            raise ValueError(f"Token `{key}` must be a non-negative number")

    if not _is_number(raw["density"]) or float(raw["density"]) <= 0:
        raise ValueError("Token `density` must be a positive number")

    return ThemeTokens(
        progress_tip=str(raw["progress_tip"]),
        progress_fill=str(raw["progress_fill"]),
        progress_track=str(raw["progress_track"]),
        progress_tip_width_dp=float(raw["progress_tip_width_dp"]),
        progress_corner_radius_dp=float(raw["progress_corner_radius_dp"]),
        density=float(raw["density"]),
    )


def load_theme_file(path: str | Path) -> ThemeTokens:
    """Load token overrides from a TOML file.

    Tokens may sit at the top level or under a `[theme]` table.
    """

    theme_path = Path(path)
    if not theme_path.exists():
        raise FileNotFoundError(f"theme file not found: {theme_path}")
    with theme_path.open("rb") as f:
        raw = tomllib.load(f)
    table = raw.get("theme", raw)
    if not isinstance(table, dict):
        raise ValueError("`theme` must be a table")
    return validate_theme_tokens(table)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(float(value))
