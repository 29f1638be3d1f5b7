"""Linear progress indicator geometry, render contract and component."""

from .component import AdjLinearProgressIndicator
from .geometry import (
    SURFACE_HEIGHT_DP,
    SURFACE_WIDTH_DP,
    ProgressGeometry,
    RoundRectGeometry,
    clamp_progress,
    compute_progress_geometry,
    progress_fraction,
)
from .renderer import LayerName, RoundRectRenderBatch, RoundRectRenderCommand, RoundRectRenderer

__all__ = [
    "AdjLinearProgressIndicator",
    "LayerName",
    "ProgressGeometry",
    "RoundRectGeometry",
    "RoundRectRenderBatch",
    "RoundRectRenderCommand",
    "RoundRectRenderer",
    "SURFACE_HEIGHT_DP",
    "SURFACE_WIDTH_DP",
    "clamp_progress",
    "compute_progress_geometry",
    "progress_fraction",
]
