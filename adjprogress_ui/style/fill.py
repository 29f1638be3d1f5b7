from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Sequence, Union

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

RGBA = tuple[int, int, int, int]


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and _HEX_COLOR.match(value) is not None


def parse_hex_rgba(hex_color: str) -> RGBA:
    value = hex_color.strip()
    if not _HEX_COLOR.match(value):
        raise ValueError(f"color must be #RRGGBB or #RRGGBBAA, got `{hex_color}`")
    raw = value[1:]
    r = int(raw[0:2], 16)
    g = int(raw[2:4], 16)
    b = int(raw[4:6], 16)
    a = int(raw[6:8], 16) if len(raw) == 8 else 255
    return (r, g, b, a)


def _check_rgba(rgba: RGBA) -> None:
    if len(rgba) != 4:
        raise ValueError("rgba must have 4 channels")
    for channel in rgba:
        if not isinstance(channel, int) or channel < 0 or channel > 255:
            raise ValueError("rgba channels must be ints in [0, 255]")


@dataclass(frozen=True)
class SolidColor:
    """Flat fill."""

    rgba: RGBA

    def __post_init__(self) -> None:
        _check_rgba(self.rgba)

    @classmethod
    def from_hex(cls, hex_color: str) -> "SolidColor":
        return cls(parse_hex_rgba(hex_color))


@dataclass(frozen=True)
class GradientStop:
    offset: float
    rgba: RGBA

    def __post_init__(self) -> None:
        if self.offset < 0.0 or self.offset > 1.0:
            raise ValueError("GradientStop offset must be in [0, 1]")
        _check_rgba(self.rgba)


@dataclass(frozen=True)
class LinearGradientBrush:
    """Linear gradient between two surface-local points.

    `end=None` stretches the gradient across the drawn shape from its left edge
    to its right edge, so each rectangle painted with the brush shows the whole
    color ramp.
    """

    stops: tuple[GradientStop, ...]
    start: tuple[float, float] = (0.0, 0.0)
    end: tuple[float, float] | None = None

    def __post_init__(self) -> None:
        if len(self.stops) < 2:
            raise ValueError("LinearGradientBrush needs at least two stops")
        offsets = [stop.offset for stop in self.stops]
        if offsets != sorted(offsets):
            raise ValueError("LinearGradientBrush stops must be sorted by offset")

    @classmethod
    def horizontal(
        cls,
        colors: Sequence[str | RGBA],
        *,
        start_x: float = 0.0,
        end_x: float | None = None,
    ) -> "LinearGradientBrush":
        if len(colors) < 2:
            raise ValueError("horizontal gradient needs at least two colors")
        step = 1.0 / (len(colors) - 1)
        stops = tuple(
            GradientStop(
                offset=min(1.0, i * step),
                rgba=parse_hex_rgba(color) if isinstance(color, str) else tuple(color),
            )
            for i, color in enumerate(colors)
        )
        end = None if end_x is None else (float(end_x), 0.0)
        return cls(stops=stops, start=(float(start_x), 0.0), end=end)

    def resolve_endpoints(self, shape_width: float) -> tuple[tuple[float, float], tuple[float, float]]:
        if self.end is not None:
            return self.start, self.end
        return self.start, (float(shape_width), self.start[1])

    def color_at(self, t: float) -> RGBA:
        t = max(0.0, min(1.0, float(t)))
        stops = self.stops
        if t <= stops[0].offset:
            return stops[0].rgba
        if t >= stops[-1].offset:
            return stops[-1].rgba
        for lo, hi in zip(stops, stops[1:]):
            if lo.offset <= t <= hi.offset:
                span = hi.offset - lo.offset
                if span <= 0:
                    return hi.rgba
                k = (t - lo.offset) / span
                return tuple(int(round(a + (b - a) * k)) for a, b in zip(lo.rgba, hi.rgba))  # type: ignore[return-value]
        return stops[-1].rgba


Fill = Union[SolidColor, LinearGradientBrush]


def coerce_fill(value: Fill | str) -> Fill:
    if isinstance(value, (SolidColor, LinearGradientBrush)):
        return value
    if isinstance(value, str):
        return SolidColor.from_hex(value)
    raise TypeError(f"unsupported fill: {value!r}")
