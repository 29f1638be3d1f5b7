from __future__ import annotations

from dataclasses import dataclass, field, replace

from adjprogress_ui.component_schema import BoundingBox, ComponentBase, CoordinatePoint, DisplayableArea
from adjprogress_ui.style.fill import Fill, SolidColor, coerce_fill
from adjprogress_ui.style.theme import DEFAULT_TOKENS, ThemeTokens

from .geometry import (
    SURFACE_HEIGHT_DP,
    SURFACE_WIDTH_DP,
    ProgressGeometry,
    check_progress_inputs,
    compute_progress_geometry,
)
from .renderer import RoundRectRenderBatch, RoundRectRenderCommand, RoundRectRenderer


@dataclass
class AdjLinearProgressIndicator(ComponentBase):
    """Adjustable determinate linear progress indicator.

    Accepts progress values above 1.0: `progress` is clamped into
    `[0, total_progress]` and scaled across a fixed 240x4 dp surface.

    - Paints background, tip and progress layers in that order.
    - The progress layer is `tip_width_dp` shorter than the tip layer, so the
      tip shows as a strip at the leading edge.
    - `corner_radius_dp` applies to every layer. Colors left as `None` come
      from `theme`.
    """

    progress: float = 0.0
    total_progress: float = 1.0
    tip_width_dp: float | None = None
    tip_color: SolidColor | str | None = None
    progress_fill: Fill | str | None = None
    background_fill: Fill | str | None = None
    corner_radius_dp: float | None = None
    position: CoordinatePoint = field(default_factory=lambda: CoordinatePoint(0.0, 0.0, None))
    theme: ThemeTokens = DEFAULT_TOKENS

    def __post_init__(self) -> None:
        check_progress_inputs(self.progress, self.total_progress)
        if self.resolved_tip_width_dp() < 0:
            raise ValueError("AdjLinearProgressIndicator tip_width_dp must be >= 0")
        if self.resolved_corner_radius_dp() < 0:
            raise ValueError("AdjLinearProgressIndicator corner_radius_dp must be >= 0")
        if not isinstance(self.resolved_tip_fill(), SolidColor):
            raise ValueError("AdjLinearProgressIndicator tip_color must be a solid color")
        self.resolved_progress_fill()
        self.resolved_background_fill()

    @classmethod
    def with_colors(
        cls,
        component_id: str,
        *,
        progress: float,
        total_progress: float,
        tip_width_dp: float | None = None,
        tip_color: SolidColor | str | None = None,
        progress_color: SolidColor | str | None = None,
        background_color: SolidColor | str | None = None,
        corner_radius_dp: float | None = None,
        position: CoordinatePoint | None = None,
        theme: ThemeTokens = DEFAULT_TOKENS,
    ) -> "AdjLinearProgressIndicator":
        for name, value in (("progress_color", progress_color), ("background_color", background_color)):
            if value is not None and not isinstance(value, (SolidColor, str)):
                raise TypeError(f"{name} must be a solid color")
        return cls(
            component_id=component_id,
            progress=progress,
            total_progress=total_progress,
            tip_width_dp=tip_width_dp,
            tip_color=tip_color,
            progress_fill=progress_color,
            background_fill=background_color,
            corner_radius_dp=corner_radius_dp,
            position=position or CoordinatePoint(0.0, 0.0, None),
            theme=theme,
        )

    @classmethod
    def with_brushes(
        cls,
        component_id: str,
        *,
        progress: float,
        total_progress: float,
        progress_brush: Fill | str,
        background_brush: Fill | str,
        tip_width_dp: float | None = None,
        tip_color: SolidColor | str | None = None,
        corner_radius_dp: float | None = None,
        position: CoordinatePoint | None = None,
        theme: ThemeTokens = DEFAULT_TOKENS,
    ) -> "AdjLinearProgressIndicator":
        return cls(
            component_id=component_id,
            progress=progress,
            total_progress=total_progress,
            tip_width_dp=tip_width_dp,
            tip_color=tip_color,
            progress_fill=progress_brush,
            background_fill=background_brush,
            corner_radius_dp=corner_radius_dp,
            position=position or CoordinatePoint(0.0, 0.0, None),
            theme=theme,
        )

    def with_progress(self, progress: float) -> "AdjLinearProgressIndicator":
        return replace(self, progress=progress)

    def resolved_tip_width_dp(self) -> float:
        return self.theme.progress_tip_width_dp if self.tip_width_dp is None else float(self.tip_width_dp)

    def resolved_corner_radius_dp(self) -> float:
        if self.corner_radius_dp is None:
            return self.theme.progress_corner_radius_dp
        return float(self.corner_radius_dp)

    def resolved_tip_fill(self) -> Fill:
        return coerce_fill(self.tip_color if self.tip_color is not None else self.theme.progress_tip)

    def resolved_progress_fill(self) -> Fill:
        return coerce_fill(self.progress_fill if self.progress_fill is not None else self.theme.progress_fill)

    def resolved_background_fill(self) -> Fill:
        if self.background_fill is not None:
            return coerce_fill(self.background_fill)
        return coerce_fill(self.theme.progress_track)

    def _default_display(self) -> DisplayableArea:
        density = self.theme.density
        return DisplayableArea(
            content_width_px=SURFACE_WIDTH_DP * density,
            content_height_px=SURFACE_HEIGHT_DP * density,
            density=density,
        )

    def _resolved_frame(self) -> str:
        return self.position.frame or self.default_frame

    def geometry(self, display: DisplayableArea | None = None) -> ProgressGeometry:
        display = display or self._default_display()
        return compute_progress_geometry(
            self.progress,
            self.total_progress,
            surface_width_px=display.to_px(SURFACE_WIDTH_DP),
            surface_height_px=display.to_px(SURFACE_HEIGHT_DP),
            tip_width_px=display.to_px(self.resolved_tip_width_dp()),
            corner_radius_px=display.to_px(self.resolved_corner_radius_dp()),
        )

    def layout(self, display: DisplayableArea | None = None) -> tuple[RoundRectRenderBatch, BoundingBox]:
        display = display or self._default_display()
        geometry = self.geometry(display)
        frame = self._resolved_frame()
        fills = {
            "background": self.resolved_background_fill(),
            "tip": self.resolved_tip_fill(),
            "progress": self.resolved_progress_fill(),
        }
        commands = tuple(
            RoundRectRenderCommand(
                component_id=self.component_id,
                layer=layer,
                x=self.position.x,
                y=self.position.y,
                width=rect.width,
                height=rect.height,
                corner_radius=rect.corner_radius,
                fill=fills[layer],
                frame=frame,
            )
            for layer, rect in geometry.layers()
        )
        bounds = BoundingBox(
            x=self.position.x,
            y=self.position.y,
            width=geometry.background.width,
            height=geometry.background.height,
            frame=frame,
        )
        return RoundRectRenderBatch(commands=commands), bounds

    def render(self, renderer: RoundRectRenderer, display: DisplayableArea | None = None) -> RoundRectRenderBatch:
        batch, _ = self.layout(display)
        renderer.draw_round_rect_batch(batch)
        return batch

    def visual_bounds(self) -> BoundingBox:
        _, bounds = self.layout()
        return bounds
