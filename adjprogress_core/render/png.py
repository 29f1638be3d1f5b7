from __future__ import annotations

import logging
import math
from pathlib import Path

import numpy as np
import torch
from PIL import Image

from adjprogress_ui.component_schema import DisplayableArea
from adjprogress_ui.progress.component import AdjLinearProgressIndicator
from adjprogress_ui.progress.geometry import SURFACE_HEIGHT_DP, SURFACE_WIDTH_DP

from .matrix_renderer import MatrixRoundRectRenderer

LOGGER = logging.getLogger(__name__)


def frame_to_image(frame: torch.Tensor) -> Image.Image:
    if frame.ndim != 3 or frame.shape[2] != 4:
        raise ValueError(f"frame must be HxWx4, got {tuple(frame.shape)}")
    array = np.ascontiguousarray(frame.to(torch.uint8).cpu().numpy())
    return Image.fromarray(array)


def save_frame_png(frame: torch.Tensor, path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    frame_to_image(frame).save(out, format="PNG")
    return out


def render_indicator_frame(
    indicator: AdjLinearProgressIndicator,
    *,
    density: float | None = None,
    clear_color: tuple[int, int, int, int] = (0, 0, 0, 0),
) -> torch.Tensor:
    """Render one indicator into a frame just large enough to hold it."""

    density = indicator.theme.density if density is None else float(density)
    width = math.ceil(max(0.0, indicator.position.x) + SURFACE_WIDTH_DP * density)
    height = math.ceil(max(0.0, indicator.position.y) + SURFACE_HEIGHT_DP * density)
    display = DisplayableArea(content_width_px=width, content_height_px=height, density=density)
    renderer = MatrixRoundRectRenderer()
    renderer.begin_frame(display, clear_color=clear_color)
    indicator.render(renderer, display)
    return renderer.end_frame()


def render_indicator_png(
    indicator: AdjLinearProgressIndicator,
    path: str | Path,
    *,
    density: float | None = None,
    clear_color: tuple[int, int, int, int] = (0, 0, 0, 0),
) -> Path:
    frame = render_indicator_frame(indicator, density=density, clear_color=clear_color)
    out = save_frame_png(frame, path)
    LOGGER.info("wrote %dx%d indicator frame to %s", frame.shape[1], frame.shape[0], out)
    return out
