"""Shape, label, and scene types for diagram construction."""
from enum import Enum
from typing import Literal, NamedTuple

from geom.types import Point, BBox, Segment
from geom.arcs import AngleArc

# ============================================================
# Error Types
# ============================================================
class DiagramError(ValueError):
    """Base class for diagram construction errors."""

class InvalidDimension(DiagramError):
    """Fixed visual width/height is not a positive finite number."""

class UnsupportedShape(DiagramError):
    """Shape kind is not one of ShapeKind."""

class UnsupportedOrientation(DiagramError):
    """Orientation is not defined for the shape kind."""

class UnsupportedSideRole(DiagramError):
    """Side role has no side on the shape kind."""

class InvalidLabelOption(DiagramError):
    """A label placement option is not a positive finite number."""

# ============================================================
# Enumerations
# ============================================================
class ShapeKind(str, Enum):
    RIGHT_TRIANGLE = "right_triangle"
    ISOSCELES_TRIANGLE = "isosceles_triangle"
    SQUARE = "square"


class Orientation(str, Enum):
    DEFAULT = "default"
    ROTATE_90 = "rotate90"
    ROTATE_180 = "rotate180"
    ROTATE_270 = "rotate270"
    FLIP = "flip"                    # mirror left-right
    FLIP_VERTICAL = "flip_vertical"  # mirror top-bottom
    FLIP_BOTH = "flip_both"


class SideRole(str, Enum):
    BASE = "base"
    HEIGHT = "height"
    LEG = "height"                   # alias: the non-base leg of a right triangle
    HYPOTENUSE = "hypotenuse"
    LEFT_LEG = "left_leg"
    RIGHT_LEG = "right_leg"
    HALF_BASE = "half_base"          # isosceles: half the base, shown with the altitude

# ============================================================
# Input
# ============================================================
class ShapeSpec(NamedTuple):
    """One render request.

    fixed_width/fixed_height are visual board units and the only inputs to
    vertex geometry; mathematical values only appear inside label_texts.
    angle_flags/angle_labels are indexed by vertex.
    """
    kind: ShapeKind
    fixed_width: float
    fixed_height: float
    orientation: Orientation = Orientation.DEFAULT
    position_offset: Point = (0.0, 0.0)
    label_texts: dict[SideRole, str] | None = None
    show_height: bool = False
    show_equal_side_marks: bool = False
    show_right_angle: bool = True
    angle_flags: tuple[bool, ...] = ()
    angle_labels: tuple[str, ...] = ()
    square_anchor: Literal["corner", "center"] = "corner"

# ============================================================
# Output
# ============================================================
class ShapeGeometry(NamedTuple):
    """Vertices and auxiliary segments of a built shape."""
    vertices: list[Point]
    polygon_indices: list[int]
    extra_segments: list[Segment]
    orientation: Orientation         # after fallback for unsupported pairs


class LabelAnchor(NamedTuple):
    position: Point
    text: str
    role: SideRole


class Scene(NamedTuple):
    """Renderer-agnostic description of one diagram."""
    kind: ShapeKind
    orientation: Orientation
    vertices: list[Point]
    polygon_indices: list[int]
    extra_segments: list[Segment]
    labels: list[LabelAnchor]
    arcs: list[AngleArc]
    frame: BBox
