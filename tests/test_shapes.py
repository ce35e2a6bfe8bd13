"""Tests for diagram/shapes.py."""
import math
import pytest
from diagram.types import (
    ShapeKind, Orientation, ShapeSpec, InvalidDimension, UnsupportedShape,
)
from diagram.shapes import build_shape, hash_mark, check_dimensions
from geom.vectors import distance, midpoint
from conftest import all_kind_orientations, std_spec


# --- arity ---

@pytest.mark.parametrize("kind,orientation", all_kind_orientations())
def test_vertex_count_matches_arity(kind, orientation):
    geo = build_shape(std_spec(kind, orientation))
    n = 4 if kind == ShapeKind.SQUARE else 3
    assert len(geo.vertices) == n
    assert geo.polygon_indices == list(range(n))


@pytest.mark.parametrize("kind,orientation", all_kind_orientations())
def test_build_is_idempotent(kind, orientation):
    spec = std_spec(kind, orientation, show_height=True, show_equal_side_marks=True)
    assert build_shape(spec) == build_shape(spec)


# --- canonical poses ---

def test_right_triangle_default(right_geo):
    assert right_geo.vertices == [(0.0, 0.0), (6.0, 0.0), (0.0, 5.0)]
    assert right_geo.extra_segments == []


def test_right_triangle_rotate90(right_spec):
    geo = build_shape(right_spec._replace(orientation=Orientation.ROTATE_90))
    for got, want in zip(geo.vertices, [(5.5, -0.5), (5.5, 5.5), (0.5, -0.5)]):
        assert abs(got[0] - want[0]) < 1e-9
        assert abs(got[1] - want[1]) < 1e-9


def test_isosceles_default():
    geo = build_shape(ShapeSpec(ShapeKind.ISOSCELES_TRIANGLE, 6, 5))
    assert geo.vertices == [(3.0, 5.0), (0.0, 0.0), (6.0, 0.0)]
    assert abs(distance(*geo.vertices[:2]) - distance(geo.vertices[0], geo.vertices[2])) < 1e-12


def test_square_corner_and_center():
    corner = build_shape(ShapeSpec(ShapeKind.SQUARE, 4, 99))
    assert corner.vertices == [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0)]
    centred = build_shape(ShapeSpec(ShapeKind.SQUARE, 4, 4, square_anchor="center"))
    assert centred.vertices == [(-2.0, -2.0), (2.0, -2.0), (2.0, 2.0), (-2.0, 2.0)]


def test_square_unsupported_orientation_falls_back():
    geo = build_shape(ShapeSpec(ShapeKind.SQUARE, 5, 5, orientation=Orientation.ROTATE_90))
    assert geo.orientation is Orientation.DEFAULT
    assert geo.vertices[0] == (0.0, 0.0)


def test_position_offset_applied_after_orientation(right_spec):
    base = build_shape(right_spec._replace(orientation=Orientation.FLIP))
    moved = build_shape(right_spec._replace(orientation=Orientation.FLIP, position_offset=(-1, 2)))
    for p, q in zip(base.vertices, moved.vertices):
        assert abs(q[0] - (p[0] - 1)) < 1e-12
        assert abs(q[1] - (p[1] + 2)) < 1e-12


def test_accepts_string_kind_and_int_dims():
    geo = build_shape(ShapeSpec("right_triangle", 3, 2))
    assert geo.vertices == [(0.0, 0.0), (3.0, 0.0), (0.0, 2.0)]


# --- extra segments ---

def test_isosceles_height_segment(iso_spec):
    geo = build_shape(iso_spec)
    height = [s for s in geo.extra_segments if s.role == "height"]
    assert len(height) == 1
    assert height[0].start == (3.0, 5.0)
    assert height[0].end == (3.0, 0.0)


def test_isosceles_hash_marks(iso_spec):
    geo = build_shape(iso_spec)
    marks = [s for s in geo.extra_segments if s.role == "hash"]
    assert len(marks) == 2
    v = geo.vertices
    for mark, (a, b) in zip(marks, [(v[0], v[1]), (v[0], v[2])]):
        # centred on the leg, length min(w, h) * 0.1
        assert distance(midpoint(mark.start, mark.end), midpoint(a, b)) < 1e-12
        assert abs(distance(mark.start, mark.end) - 0.5) < 1e-12


@pytest.mark.parametrize("o", list(Orientation))
def test_isosceles_height_foot_follows_orientation(iso_spec, o):
    geo = build_shape(iso_spec._replace(orientation=o))
    v = geo.vertices
    height = next(s for s in geo.extra_segments if s.role == "height")
    assert height.start == v[0]
    assert distance(height.end, midpoint(v[1], v[2])) < 1e-12


def test_no_segments_by_default():
    geo = build_shape(ShapeSpec(ShapeKind.ISOSCELES_TRIANGLE, 6, 5))
    assert geo.extra_segments == []


def test_hash_mark_perpendicular():
    m = hash_mark((0, 0), (4, 0), 1.0)
    assert m.start == (2.0, 0.5)
    assert m.end == (2.0, -0.5)


# --- errors ---

@pytest.mark.parametrize("w,h", [(0, 5), (6, -1), (math.inf, 5), (6, math.nan), ("6", 5), (True, 5)])
def test_invalid_dimension(w, h):
    with pytest.raises(InvalidDimension):
        build_shape(ShapeSpec(ShapeKind.RIGHT_TRIANGLE, w, h))


def test_invalid_dimension_message():
    with pytest.raises(InvalidDimension, match="fixed_width"):
        check_dimensions(ShapeSpec(ShapeKind.SQUARE, 0, 5))


def test_unsupported_shape():
    with pytest.raises(UnsupportedShape, match="pentagon"):
        build_shape(ShapeSpec("pentagon", 6, 5))


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        build_shape(ShapeSpec(ShapeKind.SQUARE, -5, 5))
