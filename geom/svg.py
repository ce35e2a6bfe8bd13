"""SVG transform factory and path formatting helpers."""
from typing import Callable
from .types import Point, BBox

# Default drawing size of one diagram (points)
W, H = 220, 180


def svg_scale(frame: BBox, width: float = W, height: float = H) -> float:
    """SVG points per board unit; one uniform scale keeps the aspect ratio."""
    return min(width / (frame.x_max - frame.x_min), height / (frame.y_max - frame.y_min))


def make_svg_transform(
    frame: BBox, width: float = W, height: float = H,
) -> Callable[[float, float], tuple[float, float]]:
    """Create to_svg closure mapping board coordinates (y up) into SVG (y down).

    The frame is centred in the drawing along the axis with spare room.
    """
    s = svg_scale(frame, width, height)
    px = (width - (frame.x_max - frame.x_min) * s) / 2 - frame.x_min * s
    py = (height - (frame.y_max - frame.y_min) * s) / 2 + frame.y_max * s
    def to_svg(x: float, y: float) -> tuple[float, float]:
        return (px + x * s, py - y * s)
    return to_svg


def fmt_points(points: list[Point], to_svg) -> str:
    """SVG points attribute for a polygon/polyline."""
    return " ".join(f"{to_svg(*p)[0]:.1f},{to_svg(*p)[1]:.1f}" for p in points)
