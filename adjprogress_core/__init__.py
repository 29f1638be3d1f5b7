"""Host rendering for adjprogress components."""

from .render import (
    MatrixRoundRectRenderer,
    frame_to_image,
    render_indicator_frame,
    render_indicator_png,
    save_frame_png,
)

__all__ = [
    "MatrixRoundRectRenderer",
    "frame_to_image",
    "render_indicator_frame",
    "render_indicator_png",
    "save_frame_png",
]
