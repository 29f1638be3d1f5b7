from __future__ import annotations

from dataclasses import dataclass
import math


SURFACE_WIDTH_DP = 240.0
SURFACE_HEIGHT_DP = 4.0


@dataclass(frozen=True)
class RoundRectGeometry:
    """Rounded rectangle anchored at the surface origin, in px."""

    width: float
    height: float
    corner_radius: float


@dataclass(frozen=True)
class ProgressGeometry:
    """Derived extents of the three indicator layers, back to front."""

    progression: float
    background: RoundRectGeometry
    tip: RoundRectGeometry
    progress: RoundRectGeometry

    def layers(self) -> tuple[tuple[str, RoundRectGeometry], ...]:
        return (
            ("background", self.background),
            ("tip", self.tip),
            ("progress", self.progress),
        )


def clamp_progress(progress: float, total_progress: float) -> float:
    check_progress_inputs(progress, total_progress)
    return max(0.0, min(float(progress), float(total_progress)))


def progress_fraction(progress: float, total_progress: float) -> float:
    return clamp_progress(progress, total_progress) / float(total_progress)


def compute_progress_geometry(
    progress: float,
    total_progress: float,
    *,
    surface_width_px: float,
    surface_height_px: float,
    tip_width_px: float,
    corner_radius_px: float,
) -> ProgressGeometry:
    """Clamp, normalize and scale progress into the three layer rectangles.

    The tip layer spans everything up to the progress edge and the progress
    layer stops `tip_width_px` short of it, leaving the tip visible as a thin
    leading strip once the progress layer is painted over it.
    """

    if tip_width_px < 0:
        raise ValueError("tip width must be >= 0")
    if corner_radius_px < 0:
        raise ValueError("corner radius must be >= 0")
    if surface_width_px < 0 or surface_height_px < 0:
        raise ValueError("surface size must be >= 0")

    progression = progress_fraction(progress, total_progress) * float(surface_width_px)
    height = float(surface_height_px)
    radius = float(corner_radius_px)
    return ProgressGeometry(
        progression=progression,
        background=RoundRectGeometry(width=float(surface_width_px), height=height, corner_radius=radius),
        tip=RoundRectGeometry(width=progression, height=height, corner_radius=radius),
        progress=RoundRectGeometry(
            width=max(0.0, progression - float(tip_width_px)),
            height=height,
            corner_radius=radius,
        ),
    )


def check_progress_inputs(progress: float, total_progress: float) -> None:
    if not math.isfinite(total_progress) or total_progress <= 0:
        raise ValueError(f"total_progress must be a finite number > 0, got {total_progress}")
    if math.isnan(progress):
        raise ValueError("progress must not be NaN")
