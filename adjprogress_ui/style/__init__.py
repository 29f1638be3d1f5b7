"""Fill styles and theme tokens for adjprogress UI."""

from .fill import (
    Fill,
    GradientStop,
    LinearGradientBrush,
    RGBA,
    SolidColor,
    coerce_fill,
    parse_hex_rgba,
)
from .theme import DEFAULT_TOKENS, ThemeTokens, load_theme_file, validate_theme_tokens

__all__ = [
    "DEFAULT_TOKENS",
    "Fill",
    "GradientStop",
    "LinearGradientBrush",
    "RGBA",
    "SolidColor",
    "ThemeTokens",
    "coerce_fill",
    "load_theme_file",
    "parse_hex_rgba",
    "validate_theme_tokens",
]
