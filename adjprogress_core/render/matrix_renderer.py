from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
import math

import torch

from adjprogress_ui.component_schema import DisplayableArea
from adjprogress_ui.progress.renderer import RoundRectRenderBatch, RoundRectRenderCommand
from adjprogress_ui.style.fill import Fill, LinearGradientBrush, SolidColor

LOGGER = logging.getLogger(__name__)


@dataclass
class MatrixRoundRectRenderer:
    """Torch-first rounded-rectangle renderer writing into an RGBA matrix."""

    _display: DisplayableArea | None = None
    _frame: torch.Tensor | None = None
    _grid_x: torch.Tensor | None = None
    _grid_y: torch.Tensor | None = None

    def begin_frame(self, display: DisplayableArea, clear_color: tuple[int, int, int, int]) -> None:
        self._display = display
        width = int(round(display.viewport_width_px or display.content_width_px))
        height = int(round(display.viewport_height_px or display.content_height_px))
        if width <= 0 or height <= 0:
            raise ValueError("frame dimensions must be > 0")
        self._frame = torch.zeros((height, width, 4), dtype=torch.uint8)
        self._frame[:, :, 0] = clear_color[0]
        self._frame[:, :, 1] = clear_color[1]
        self._frame[:, :, 2] = clear_color[2]
        self._frame[:, :, 3] = clear_color[3]
        # Pixel centers.
        self._grid_x = torch.arange(width, dtype=torch.float32).add(0.5).unsqueeze(0).expand(height, width)
        self._grid_y = torch.arange(height, dtype=torch.float32).add(0.5).unsqueeze(1).expand(height, width)

    def draw_round_rect_batch(self, batch: RoundRectRenderBatch) -> None:
        if self._frame is None or self._grid_x is None or self._grid_y is None:
            raise RuntimeError("begin_frame must be called before draw_round_rect_batch")
        for command in batch.commands:
            self._draw_round_rect(command)

    def end_frame(self) -> torch.Tensor:
        if self._frame is None:
            raise RuntimeError("begin_frame must be called before end_frame")
        out = self._frame.clone()
        self._display = None
        self._frame = None
        self._grid_x = None
        self._grid_y = None
        return out

    def _draw_round_rect(self, command: RoundRectRenderCommand) -> None:
        if self._frame is None or self._grid_x is None or self._grid_y is None:
            return
        if command.width <= 0 or command.height <= 0:
            LOGGER.debug("skipping empty `%s` layer of %s", command.layer, command.component_id)
            return
        left = float(command.x)
        top = float(command.y)
        right = left + float(command.width)
        bottom = top + float(command.height)

        x0 = max(0, int(math.floor(left)))
        y0 = max(0, int(math.floor(top)))
        x1 = min(self._frame.shape[1], int(math.ceil(right)))
        y1 = min(self._frame.shape[0], int(math.ceil(bottom)))
        if x1 <= x0 or y1 <= y0:
            return

        radius = min(float(command.corner_radius), command.width / 2.0, command.height / 2.0)
        if radius < command.corner_radius:
            LOGGER.debug(
                "clamped corner radius %.3f -> %.3f for `%s` layer", command.corner_radius, radius, command.layer
            )
        radius = max(0.0, radius)

        gx = self._grid_x[y0:y1, x0:x1]
        gy = self._grid_y[y0:y1, x0:x1]
        # Distance from each pixel center to the rectangle shrunk by the radius.
        qx = torch.clamp(gx, left + radius, right - radius)
        qy = torch.clamp(gy, top + radius, bottom - radius)
        inside = (gx >= left) & (gx <= right) & (gy >= top) & (gy <= bottom)
        mask = inside & (((gx - qx) ** 2 + (gy - qy) ** 2) <= radius * radius)

        colors = self._fill_colors(command.fill, gx, gy, command)
        self._blend_mask(mask, colors, x=x0, y=y0)

    def _fill_colors(
        self,
        fill: Fill,
        gx: torch.Tensor,
        gy: torch.Tensor,
        command: RoundRectRenderCommand,
    ) -> torch.Tensor:
        h, w = gx.shape
        if isinstance(fill, SolidColor):
            return torch.tensor(fill.rgba, dtype=torch.float32).view(1, 1, 4).expand(h, w, 4)
        if isinstance(fill, LinearGradientBrush):
            return _linear_gradient_colors(fill, gx, gy, command)
        raise TypeError(f"unsupported fill: {fill!r}")

    def _blend_mask(self, mask: torch.Tensor, colors: torch.Tensor, *, x: int, y: int) -> None:
        if self._frame is None:
            return
        h, w = mask.shape
        if h <= 0 or w <= 0 or not bool(mask.any()):
            return
        # Source-over on straight (non-premultiplied) alpha.
        region = self._frame[y : y + h, x : x + w]
        src_alpha = colors[:, :, 3] / 255.0
        dst_alpha = region[:, :, 3].to(torch.float32) / 255.0
        dst_rgb = region[:, :, :3].to(torch.float32)

        out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
        out_rgb_num = colors[:, :, :3] * src_alpha.unsqueeze(-1) + dst_rgb * (dst_alpha * (1.0 - src_alpha)).unsqueeze(-1)
        safe = torch.where(out_alpha > 1e-6, out_alpha, torch.ones_like(out_alpha))
        out_rgb = torch.where(
            (out_alpha > 1e-6).unsqueeze(-1),
            out_rgb_num / safe.unsqueeze(-1),
            torch.zeros_like(out_rgb_num),
        )

        rgb_u8 = torch.clamp(out_rgb, 0, 255).round().to(torch.uint8)
        alpha_u8 = torch.clamp(out_alpha * 255.0, 0, 255).round().to(torch.uint8)
        region[:, :, :3] = torch.where(mask.unsqueeze(-1), rgb_u8, region[:, :, :3])
        region[:, :, 3] = torch.where(mask, alpha_u8, region[:, :, 3])


_GRADIENT_TABLE_SIZE = 1024


@lru_cache(maxsize=64)
def _gradient_table(brush: LinearGradientBrush) -> torch.Tensor:
    last = _GRADIENT_TABLE_SIZE - 1
    return torch.tensor([brush.color_at(i / last) for i in range(_GRADIENT_TABLE_SIZE)], dtype=torch.float32)


def _linear_gradient_colors(
    brush: LinearGradientBrush,
    gx: torch.Tensor,
    gy: torch.Tensor,
    command: RoundRectRenderCommand,
) -> torch.Tensor:
    (sx, sy), (ex, ey) = brush.resolve_endpoints(command.width)
    sx += command.x
    sy += command.y
    ex += command.x
    ey += command.y
    dx = ex - sx
    dy = ey - sy
    length_sq = dx * dx + dy * dy
    if length_sq <= 0:
        t = torch.zeros_like(gx)
    else:
        t = torch.clamp(((gx - sx) * dx + (gy - sy) * dy) / length_sq, 0.0, 1.0)

    index = torch.round(t * (_GRADIENT_TABLE_SIZE - 1)).to(torch.long)
    return _gradient_table(brush)[index]
