from __future__ import annotations

from dataclasses import dataclass
import math


DEFAULT_FRAME = "screen_tl"


@dataclass(frozen=True)
class CoordinatePoint:
    x: float
    y: float
    frame: str | None = None


@dataclass(frozen=True)
class BoundingBox:
    x: float
    y: float
    width: float
    height: float
    frame: str | None = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("BoundingBox width/height must be >= 0")

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height


@dataclass(frozen=True)
class DisplayableArea:
    """Displayable content area plus its pixel density (px per dp)."""

    content_width_px: float
    content_height_px: float
    viewport_width_px: float | None = None
    viewport_height_px: float | None = None
    density: float = 1.0

    def __post_init__(self) -> None:
        if self.content_width_px <= 0 or self.content_height_px <= 0:
            raise ValueError("content dimensions must be > 0")
        if not math.isfinite(self.density) or self.density <= 0:
            raise ValueError("density must be a finite number > 0")

    def to_px(self, dp: float) -> float:
        return float(dp) * self.density


def parse_coordinate_notation(notation: str, default_frame: str | None = None) -> CoordinatePoint:
    """Parse `x,y` or `frame:x,y` into a CoordinatePoint."""

    raw = notation.strip()
    if not raw:
        raise ValueError("coordinate notation must be non-empty")
    frame: str | None = default_frame
    coords = raw
    if ":" in raw:
        maybe_frame, maybe_coords = raw.split(":", 1)
        if not maybe_frame.strip():
            raise ValueError("coordinate frame name must be non-empty")
        frame = maybe_frame.strip()
        coords = maybe_coords
    parts = [p.strip() for p in coords.split(",")]
    if len(parts) != 2:
        raise ValueError("coordinates must use `x,y` format")
    return CoordinatePoint(x=float(parts[0]), y=float(parts[1]), frame=frame)


@dataclass
class ComponentBase:
    """Shared schema for adjprogress UI components.

    Visual bounds define how a component is painted. Components are stateless
    between renders; every layout is recomputed from the current fields.
    """

    component_id: str
    default_frame: str = DEFAULT_FRAME

    def visual_bounds(self) -> BoundingBox:
        raise NotImplementedError

    def hit_test(self, point: CoordinatePoint) -> bool:
        bounds = self.visual_bounds()
        source_frame = point.frame or self.default_frame
        target_frame = bounds.frame or self.default_frame
        if source_frame != target_frame:
            raise ValueError(f"cannot hit-test point in frame `{source_frame}` against `{target_frame}`")
        return bounds.contains(point.x, point.y)
