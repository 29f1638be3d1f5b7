from __future__ import annotations

import argparse
from dataclasses import asdict
import json
import logging
from pathlib import Path
from typing import Sequence

from adjprogress_core.render import render_indicator_png
from adjprogress_ui.component_schema import DEFAULT_FRAME, parse_coordinate_notation
from adjprogress_ui.progress import AdjLinearProgressIndicator
from adjprogress_ui.style import (
    DEFAULT_TOKENS,
    LinearGradientBrush,
    ThemeTokens,
    load_theme_file,
    parse_hex_rgba,
    validate_theme_tokens,
)

LOGGER = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="adjprogress")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a progress indicator to a PNG file.")
    render.add_argument("out", type=Path)
    _add_indicator_args(render)
    render.add_argument(
        "--clear-color",
        default="#00000000",
        help="Frame color behind the indicator (#RRGGBB or #RRGGBBAA).",
    )

    geometry = sub.add_parser("geometry", help="Print the three layer rectangles as JSON.")
    _add_indicator_args(geometry)
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    theme = load_theme_file(args.theme) if args.theme is not None else DEFAULT_TOKENS
    if args.density is not None:
        theme = validate_theme_tokens({**asdict(theme), "density": args.density})
    indicator = _build_indicator(args, theme)

    if args.command == "render":
        out = render_indicator_png(indicator, args.out, clear_color=parse_hex_rgba(args.clear_color))
        print(f"wrote {out}")
        return

    if args.command == "geometry":
        result = indicator.geometry()
        payload = {
            "position": {"x": indicator.position.x, "y": indicator.position.y, "frame": indicator.position.frame},
            "progression": result.progression,
            "layers": [
                {"layer": layer, "width": rect.width, "height": rect.height, "corner_radius": rect.corner_radius}
                for layer, rect in result.layers()
            ],
        }
        print(json.dumps(payload, indent=2))
        return

    raise RuntimeError(f"unsupported command: {args.command}")


def _add_indicator_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--progress", type=float, required=True)
    parser.add_argument("--total", type=float, required=True, help="Progress value that fills the bar.")
    parser.add_argument("--tip-width", type=float, default=None, help="Tip width in dp. Default: theme.")
    parser.add_argument("--corner-radius", type=float, default=None, help="Corner radius in dp. Default: theme.")
    parser.add_argument("--density", type=float, default=None, help="Pixels per dp. Default: theme.")
    parser.add_argument("--tip-color", default=None)
    parser.add_argument("--progress-color", default=None)
    parser.add_argument("--background-color", default=None)
    parser.add_argument(
        "--progress-gradient",
        default=None,
        help="Comma-separated hex colors; replaces --progress-color with a horizontal gradient.",
    )
    parser.add_argument(
        "--background-gradient",
        default=None,
        help="Comma-separated hex colors; replaces --background-color with a horizontal gradient.",
    )
    parser.add_argument(
        "--position",
        default="0,0",
        help="Top-left corner in px as `x,y` or `frame:x,y`. Default: 0,0.",
    )
    parser.add_argument("--theme", type=Path, default=None, help="TOML file with theme token overrides.")
    parser.add_argument("--verbose", action="store_true")


def _build_indicator(args: argparse.Namespace, theme: ThemeTokens) -> AdjLinearProgressIndicator:
    position = parse_coordinate_notation(args.position, default_frame=DEFAULT_FRAME)
    if args.progress_gradient is not None or args.background_gradient is not None:
        progress_brush = _parse_gradient(args.progress_gradient) or args.progress_color or theme.progress_fill
        background_brush = _parse_gradient(args.background_gradient) or args.background_color or theme.progress_track
        LOGGER.debug("building brush indicator")
        return AdjLinearProgressIndicator.with_brushes(
            "cli",
            progress=args.progress,
            total_progress=args.total,
            progress_brush=progress_brush,
            background_brush=background_brush,
            tip_width_dp=args.tip_width,
            tip_color=args.tip_color,
            corner_radius_dp=args.corner_radius,
            position=position,
            theme=theme,
        )
    return AdjLinearProgressIndicator.with_colors(
        "cli",
        progress=args.progress,
        total_progress=args.total,
        tip_width_dp=args.tip_width,
        tip_color=args.tip_color,
        progress_color=args.progress_color,
        background_color=args.background_color,
        corner_radius_dp=args.corner_radius,
        position=position,
        theme=theme,
    )


def _parse_gradient(raw: str | None) -> LinearGradientBrush | None:
    if raw is None:
        return None
    colors = [part.strip() for part in raw.split(",") if part.strip()]
    return LinearGradientBrush.horizontal(colors)


if __name__ == "__main__":
    main()
