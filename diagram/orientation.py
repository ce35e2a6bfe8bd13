"""Orientation transforms about a vertex set's bounding-box centre."""
import logging

import numpy as np

from geom.types import Point
from diagram.types import ShapeKind, Orientation, UnsupportedOrientation

logger = logging.getLogger(__name__)

# 2x2 matrices acting on (x, y) column vectors, y axis pointing up.
_MATRICES = {
    Orientation.DEFAULT:       np.array([[1, 0], [0, 1]]),
    Orientation.ROTATE_90:     np.array([[0, -1], [1, 0]]),
    Orientation.ROTATE_180:    np.array([[-1, 0], [0, -1]]),
    Orientation.ROTATE_270:    np.array([[0, 1], [-1, 0]]),
    Orientation.FLIP:          np.array([[-1, 0], [0, 1]]),
    Orientation.FLIP_VERTICAL: np.array([[1, 0], [0, -1]]),
    Orientation.FLIP_BOTH:     np.array([[-1, 0], [0, -1]]),
}

SUPPORTED_ORIENTATIONS = {
    ShapeKind.RIGHT_TRIANGLE: tuple(Orientation),
    ShapeKind.ISOSCELES_TRIANGLE: tuple(Orientation),
    ShapeKind.SQUARE: (Orientation.DEFAULT,),
}


def check_orientation(kind: ShapeKind, orientation) -> Orientation:
    """Return orientation as an Orientation, or raise UnsupportedOrientation."""
    kind = ShapeKind(kind)
    try:
        o = Orientation(orientation)
    except ValueError:
        raise UnsupportedOrientation(f"Unknown orientation: {orientation!r}") from None
    if o not in SUPPORTED_ORIENTATIONS.get(kind, ()):
        raise UnsupportedOrientation(f"{o.value} is not defined for {kind.value}")
    return o


def resolve_orientation(kind: ShapeKind, orientation) -> Orientation:
    """Like check_orientation, but falls back to DEFAULT instead of raising."""
    try:
        return check_orientation(kind, orientation)
    except UnsupportedOrientation as e:
        logger.warning("%s; using default orientation", e)
        return Orientation.DEFAULT


def apply_orientation(vertices: list[Point], orientation: Orientation) -> list[Point]:
    """Rotate/mirror vertices about their bounding-box centre.

    Vertex order is preserved, so index i still names the same corner of
    the shape. Mirrors reverse the winding direction.
    """
    orientation = Orientation(orientation)
    if orientation == Orientation.DEFAULT:
        return [(float(x), float(y)) for x, y in vertices]
    pts = np.asarray(vertices, dtype=float)
    c = (pts.min(axis=0) + pts.max(axis=0)) / 2
    out = (pts - c) @ _MATRICES[orientation].T + c
    return [(float(x), float(y)) for x, y in out]
