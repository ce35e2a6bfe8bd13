"""Tests for diagram/orientation.py."""
import logging
import pytest
from diagram.types import ShapeKind, Orientation, UnsupportedOrientation
from diagram.orientation import (
    SUPPORTED_ORIENTATIONS, check_orientation, resolve_orientation, apply_orientation,
)

TRI = [(0.0, 0.0), (6.0, 0.0), (0.0, 5.0)]


def close(a, b, tol=1e-9):
    return all(abs(p[0] - q[0]) < tol and abs(p[1] - q[1]) < tol for p, q in zip(a, b))


# --- apply_orientation ---

def test_default_is_identity():
    assert apply_orientation(TRI, Orientation.DEFAULT) == TRI


def test_rotate90_golden():
    out = apply_orientation(TRI, Orientation.ROTATE_90)
    assert close(out, [(5.5, -0.5), (5.5, 5.5), (0.5, -0.5)])


def test_rotate90_four_times_closes():
    pts = [(0.3, -1.2), (4.7, 2.2), (-2.0, 3.9), (1.1, 1.1)]
    out = pts
    for _ in range(4):
        out = apply_orientation(out, Orientation.ROTATE_90)
    assert close(out, pts)


def test_rotate180_equals_two_quarter_turns():
    twice = apply_orientation(apply_orientation(TRI, Orientation.ROTATE_90), Orientation.ROTATE_90)
    assert close(twice, apply_orientation(TRI, Orientation.ROTATE_180))


def test_rotate270_inverts_rotate90():
    back = apply_orientation(apply_orientation(TRI, Orientation.ROTATE_90), Orientation.ROTATE_270)
    assert close(back, TRI)


def test_flip_mirrors_left_right():
    assert close(apply_orientation(TRI, Orientation.FLIP), [(6, 0), (0, 0), (6, 5)])


def test_flip_vertical_mirrors_top_bottom():
    assert close(apply_orientation(TRI, Orientation.FLIP_VERTICAL), [(0, 5), (6, 5), (0, 0)])


@pytest.mark.parametrize("o", list(Orientation))
def test_bbox_centre_preserved(o):
    out = apply_orientation(TRI, o)
    xs = [p[0] for p in out]; ys = [p[1] for p in out]
    assert abs((min(xs) + max(xs)) / 2 - 3.0) < 1e-9
    assert abs((min(ys) + max(ys)) / 2 - 2.5) < 1e-9


def test_returns_plain_floats():
    out = apply_orientation(TRI, Orientation.ROTATE_90)
    assert all(type(c) is float for p in out for c in p)


# --- check / resolve ---

def test_square_supports_default_only():
    assert SUPPORTED_ORIENTATIONS[ShapeKind.SQUARE] == (Orientation.DEFAULT,)
    with pytest.raises(UnsupportedOrientation, match="rotate90"):
        check_orientation(ShapeKind.SQUARE, Orientation.ROTATE_90)


def test_check_unknown_orientation():
    with pytest.raises(UnsupportedOrientation, match="Unknown orientation"):
        check_orientation(ShapeKind.RIGHT_TRIANGLE, "sideways")


def test_check_accepts_string_value():
    assert check_orientation(ShapeKind.ISOSCELES_TRIANGLE, "flip") is Orientation.FLIP


def test_resolve_falls_back_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="diagram.orientation"):
        o = resolve_orientation(ShapeKind.SQUARE, Orientation.FLIP)
    assert o is Orientation.DEFAULT
    assert "using default orientation" in caplog.text
