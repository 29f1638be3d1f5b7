"""First-party UI contracts and components for adjprogress."""

from .component_schema import (
    BoundingBox,
    ComponentBase,
    CoordinatePoint,
    DisplayableArea,
    parse_coordinate_notation,
)
from .progress import (
    AdjLinearProgressIndicator,
    ProgressGeometry,
    RoundRectGeometry,
    RoundRectRenderBatch,
    RoundRectRenderCommand,
    RoundRectRenderer,
    compute_progress_geometry,
)
from .style import (
    DEFAULT_TOKENS,
    Fill,
    GradientStop,
    LinearGradientBrush,
    SolidColor,
    ThemeTokens,
    load_theme_file,
    validate_theme_tokens,
)

__all__ = [
    "AdjLinearProgressIndicator",
    "BoundingBox",
    "ComponentBase",
    "CoordinatePoint",
    "DEFAULT_TOKENS",
    "DisplayableArea",
    "Fill",
    "GradientStop",
    "LinearGradientBrush",
    "ProgressGeometry",
    "RoundRectGeometry",
    "RoundRectRenderBatch",
    "RoundRectRenderCommand",
    "RoundRectRenderer",
    "SolidColor",
    "ThemeTokens",
    "compute_progress_geometry",
    "load_theme_file",
    "parse_coordinate_notation",
    "validate_theme_tokens",
]
