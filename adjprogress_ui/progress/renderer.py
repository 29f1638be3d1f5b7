from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

from adjprogress_ui.style.fill import Fill


LayerName = Literal["background", "tip", "progress"]


@dataclass(frozen=True)
class RoundRectRenderCommand:
    """Backend-agnostic rounded-rectangle draw instruction.

    `x`/`y` place the rectangle's top-left corner in `frame`; all lengths are
    px. Gradient fills resolve their points relative to (`x`, `y`).
    """

    component_id: str
    layer: LayerName
    x: float
    y: float
    width: float
    height: float
    corner_radius: float
    fill: Fill
    frame: str


@dataclass(frozen=True)
class RoundRectRenderBatch:
    """Render list for a single pass; backends draw commands in order."""

    commands: tuple[RoundRectRenderCommand, ...]


class RoundRectRenderer(Protocol):
    """Drawing surface capability consumed by the progress indicator."""

    def draw_round_rect_batch(self, batch: RoundRectRenderBatch) -> None:
        ...
