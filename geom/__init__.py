"""Shared types, vector math, angle arcs, and SVG utilities."""

from .types import Point, BBox, Segment
from .vectors import (
    add, subtract, scale, length, distance, midpoint,
    normalize, perpendicular, left_norm, offset_point,
    rotate, centroid, bbox_center,
)
from .arcs import AngleArc, normalize_angle, arc_at, mid_angle, interior_arcs
from .svg import make_svg_transform, svg_scale, fmt_points, W, H
