"""Build shape vertices from fixed visual dimensions and an orientation."""
import math
import numbers

from geom.types import Point, Segment
from geom.vectors import midpoint, subtract, perpendicular, offset_point
from diagram.types import (
    ShapeKind, ShapeSpec, ShapeGeometry,
    InvalidDimension, UnsupportedShape,
)
from diagram.orientation import resolve_orientation, apply_orientation
from diagram.constants import HASH_MARK_RATIO

# ============================================================
# Canonical poses
# ============================================================

def _right_triangle(w: float, h: float) -> list[Point]:
    """[right angle, base end, height end]; right angle at the origin."""
    return [(0.0, 0.0), (w, 0.0), (0.0, h)]


def _isosceles_triangle(w: float, h: float) -> list[Point]:
    """[apex, left base, right base]; base along the x axis."""
    return [(w/2, h), (0.0, 0.0), (w, 0.0)]


def _square(w: float, centered: bool) -> list[Point]:
    """[bottom left, bottom right, top right, top left]; height is ignored."""
    o = -w/2 if centered else 0.0
    return [(o, o), (o+w, o), (o+w, o+w), (o, o+w)]

# ============================================================
# Extra segments
# ============================================================

def hash_mark(p1: Point, p2: Point, mark_len: float) -> Segment:
    """Short segment across the middle of p1-p2, perpendicular to it."""
    m = midpoint(p1, p2)
    n = perpendicular(subtract(p2, p1))
    return Segment(offset_point(m, n, mark_len/2), offset_point(m, n, -mark_len/2), "hash")


def _isosceles_segments(v: list[Point], spec: ShapeSpec) -> list[Segment]:
    segs = []
    if spec.show_height:
        segs.append(Segment(v[0], midpoint(v[1], v[2]), "height"))
    if spec.show_equal_side_marks:
        mark_len = min(spec.fixed_width, spec.fixed_height) * HASH_MARK_RATIO
        segs.append(hash_mark(v[0], v[1], mark_len))
        segs.append(hash_mark(v[0], v[2], mark_len))
    return segs

# ============================================================
# Main entry point
# ============================================================

def check_dimensions(spec: ShapeSpec) -> None:
    """Raise InvalidDimension unless both fixed dimensions are positive and finite."""
    for name in ("fixed_width", "fixed_height"):
        val = getattr(spec, name)
        if isinstance(val, bool) or not isinstance(val, numbers.Real):
            raise InvalidDimension(f"{name} must be a number, got {val!r}")
        if not math.isfinite(val) or val <= 0:
            raise InvalidDimension(f"{name} must be positive: {name}={val}")


def check_kind(kind) -> ShapeKind:
    """Return kind as a ShapeKind, or raise UnsupportedShape."""
    try:
        return ShapeKind(kind)
    except ValueError:
        raise UnsupportedShape(f"Unknown shape kind: {kind!r}") from None


def build_shape(spec: ShapeSpec) -> ShapeGeometry:
    """Vertices, polygon order, and auxiliary segments for spec.

    Canonical pose -> orientation about the bbox centre -> position offset.
    Raises InvalidDimension/UnsupportedShape before computing anything.
    """
    kind = check_kind(spec.kind)
    check_dimensions(spec)
    orientation = resolve_orientation(kind, spec.orientation)
    w, h = float(spec.fixed_width), float(spec.fixed_height)

    if kind == ShapeKind.RIGHT_TRIANGLE:
        canonical = _right_triangle(w, h)
    elif kind == ShapeKind.ISOSCELES_TRIANGLE:
        canonical = _isosceles_triangle(w, h)
    else:
        canonical = _square(w, spec.square_anchor == "center")

    dx, dy = spec.position_offset
    verts = [(x+dx, y+dy) for x, y in apply_orientation(canonical, orientation)]

    segs = _isosceles_segments(verts, spec) if kind == ShapeKind.ISOSCELES_TRIANGLE else []
    return ShapeGeometry(
        vertices=verts,
        polygon_indices=list(range(len(verts))),
        extra_segments=segs,
        orientation=orientation,
    )
