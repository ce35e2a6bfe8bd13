"""Shared type definitions for the diagram geometry packages."""
from typing import Literal, NamedTuple

Point = tuple[float, float]

class BBox(NamedTuple):
    """Axis-aligned box in board order (x_min, y_max, x_max, y_min)."""
    x_min: float; y_max: float; x_max: float; y_min: float

class Segment(NamedTuple):
    start: Point; end: Point
    role: Literal["height", "hash"]
