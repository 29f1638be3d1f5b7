from __future__ import annotations

import unittest

from adjprogress_ui.component_schema import CoordinatePoint, DisplayableArea
from adjprogress_ui.progress.component import AdjLinearProgressIndicator
from adjprogress_ui.progress.renderer import RoundRectRenderBatch, RoundRectRenderer
from adjprogress_ui.style.fill import LinearGradientBrush, SolidColor
from adjprogress_ui.style.theme import DEFAULT_TOKENS, validate_theme_tokens


class _CaptureRoundRectRenderer(RoundRectRenderer):
    def __init__(self) -> None:
        self.batches: list[RoundRectRenderBatch] = []

    def draw_round_rect_batch(self, batch: RoundRectRenderBatch) -> None:
        self.batches.append(batch)


class AdjLinearProgressIndicatorTests(unittest.TestCase):
    def test_render_issues_three_commands_in_draw_order(self) -> None:
        renderer = _CaptureRoundRectRenderer()
        indicator = AdjLinearProgressIndicator.with_colors(
            "download",
            progress=50.0,
            total_progress=100.0,
            tip_color="#FFFFFF",
            progress_color="#FF0000",
            background_color="#0000FF",
        )
        batch = indicator.render(renderer)

        self.assertEqual(len(renderer.batches), 1)
        self.assertEqual([c.layer for c in batch.commands], ["background", "tip", "progress"])
        self.assertEqual([c.width for c in batch.commands], [240.0, 120.0, 117.0])
        self.assertTrue(all(c.height == 4.0 for c in batch.commands))
        self.assertTrue(all((c.x, c.y) == (0.0, 0.0) for c in batch.commands))
        self.assertEqual(batch.commands[0].fill, SolidColor((0, 0, 255, 255)))
        self.assertEqual(batch.commands[1].fill, SolidColor((255, 255, 255, 255)))
        self.assertEqual(batch.commands[2].fill, SolidColor((255, 0, 0, 255)))

    def test_theme_supplies_default_colors_and_lengths(self) -> None:
        indicator = AdjLinearProgressIndicator(component_id="p", progress=1.0, total_progress=2.0)
        batch, _ = indicator.layout()
        fills = [c.fill for c in batch.commands]
        self.assertEqual(fills[0], SolidColor.from_hex(DEFAULT_TOKENS.progress_track))
        self.assertEqual(fills[1], SolidColor.from_hex(DEFAULT_TOKENS.progress_tip))
        self.assertEqual(fills[2], SolidColor.from_hex(DEFAULT_TOKENS.progress_fill))
        self.assertEqual(batch.commands[2].width, 117.0)
        self.assertEqual(batch.commands[0].corner_radius, 0.0)

    def test_density_converts_dp_lengths_to_px(self) -> None:
        indicator = AdjLinearProgressIndicator(
            component_id="p",
            progress=25.0,
            total_progress=100.0,
            corner_radius_dp=2.0,
        )
        display = DisplayableArea(content_width_px=480, content_height_px=8, density=2.0)
        batch, bounds = indicator.layout(display)
        self.assertEqual([c.width for c in batch.commands], [480.0, 120.0, 114.0])
        self.assertEqual(batch.commands[0].height, 8.0)
        self.assertEqual(batch.commands[0].corner_radius, 4.0)
        self.assertEqual((bounds.width, bounds.height), (480.0, 8.0))

    def test_theme_density_is_used_without_display(self) -> None:
        theme = validate_theme_tokens({"density": 3.0, "progress_tip_width_dp": 1.0})
        indicator = AdjLinearProgressIndicator(component_id="p", progress=1.0, total_progress=1.0, theme=theme)
        batch, _ = indicator.layout()
        self.assertEqual([c.width for c in batch.commands], [720.0, 720.0, 717.0])

    def test_brush_variant_keeps_solid_tip(self) -> None:
        progress_brush = LinearGradientBrush.horizontal(["#000000", "#FFFFFF"])
        background_brush = LinearGradientBrush.horizontal(["#111111", "#222222", "#333333"])
        indicator = AdjLinearProgressIndicator.with_brushes(
            "brushed",
            progress=3.0,
            total_progress=2.0,
            progress_brush=progress_brush,
            background_brush=background_brush,
        )
        batch, _ = indicator.layout()
        self.assertIs(batch.commands[0].fill, background_brush)
        self.assertIsInstance(batch.commands[1].fill, SolidColor)
        self.assertIs(batch.commands[2].fill, progress_brush)
        self.assertEqual(batch.commands[1].width, 240.0)

    def test_solid_variant_rejects_brushes(self) -> None:
        with self.assertRaises(TypeError):
            AdjLinearProgressIndicator.with_colors(
                "p",
                progress=1.0,
                total_progress=2.0,
                progress_color=LinearGradientBrush.horizontal(["#000000", "#FFFFFF"]),  # type: ignore[arg-type]
            )

    def test_tip_must_be_solid(self) -> None:
        with self.assertRaisesRegex(ValueError, "solid color"):
            AdjLinearProgressIndicator(
                component_id="p",
                tip_color=LinearGradientBrush.horizontal(["#000000", "#FFFFFF"]),  # type: ignore[arg-type]
            )

    def test_position_offsets_commands_and_bounds(self) -> None:
        indicator = AdjLinearProgressIndicator(
            component_id="p",
            progress=0.5,
            total_progress=1.0,
            position=CoordinatePoint(10.0, 20.0, "screen_tl"),
        )
        batch, bounds = indicator.layout()
        self.assertTrue(all((c.x, c.y, c.frame) == (10.0, 20.0, "screen_tl") for c in batch.commands))
        self.assertEqual((bounds.x, bounds.y), (10.0, 20.0))
        self.assertTrue(indicator.hit_test(CoordinatePoint(100.0, 22.0)))
        self.assertFalse(indicator.hit_test(CoordinatePoint(5.0, 22.0)))

    def test_render_is_idempotent(self) -> None:
        renderer = _CaptureRoundRectRenderer()
        indicator = AdjLinearProgressIndicator(component_id="p", progress=0.3, total_progress=1.0)
        first = indicator.render(renderer)
        second = indicator.render(renderer)
        self.assertEqual(first, second)

    def test_with_progress_returns_updated_copy(self) -> None:
        indicator = AdjLinearProgressIndicator(component_id="p", progress=0.0, total_progress=10.0)
        moved = indicator.with_progress(5.0)
        self.assertEqual(indicator.geometry().progression, 0.0)
        self.assertEqual(moved.geometry().progression, 120.0)

    def test_rejects_invalid_inputs(self) -> None:
        with self.assertRaisesRegex(ValueError, "total_progress"):
            AdjLinearProgressIndicator(component_id="p", progress=1.0, total_progress=0.0)
        with self.assertRaisesRegex(ValueError, "tip_width_dp"):
            AdjLinearProgressIndicator(component_id="p", tip_width_dp=-1.0)
        with self.assertRaisesRegex(ValueError, "corner_radius_dp"):
            AdjLinearProgressIndicator(component_id="p", corner_radius_dp=-0.5)
        with self.assertRaisesRegex(ValueError, "RRGGBB"):
            AdjLinearProgressIndicator(component_id="p", progress_fill="red")


if __name__ == "__main__":
    unittest.main()
