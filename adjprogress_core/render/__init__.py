from .matrix_renderer import MatrixRoundRectRenderer
from .png import frame_to_image, render_indicator_frame, render_indicator_png, save_frame_png

__all__ = [
    "MatrixRoundRectRenderer",
    "frame_to_image",
    "render_indicator_frame",
    "render_indicator_png",
    "save_frame_png",
]
