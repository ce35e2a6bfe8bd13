"""Side label placement: outward perpendicular offsets from side midpoints.

Side roles are visual. For a right triangle BASE is whichever leg is
horizontal as displayed and HEIGHT the vertical one, so a quarter turn
moves the base label onto the canonical height side. For an isosceles
triangle LEFT_LEG/RIGHT_LEG follow the displayed left and right (the lower
leg counts as left when the legs are stacked vertically).

An isosceles triangle also takes two altitude labels. HEIGHT sits beside
the apex-to-foot segment on its displayed right, and HALF_BASE sits
outside the base under its displayed left half.
"""
import logging
import math
import numbers
from typing import NamedTuple

from geom.types import Point
from geom.vectors import (
    EPS, midpoint, subtract, length, distance, normalize, perpendicular,
    offset_point, centroid,
)
from diagram.types import (
    ShapeKind, Orientation, SideRole, LabelAnchor,
    UnsupportedSideRole, InvalidLabelOption,
)
from diagram.constants import (
    LABEL_PROBE, LABEL_BASE_OFFSETS, LABEL_MIN_VERTEX_DISTANCE,
    LABEL_MEDIUM_CHARS, LABEL_LONG_CHARS, LABEL_MEDIUM_EXTRA, LABEL_LONG_EXTRA,
)

logger = logging.getLogger(__name__)

_O = Orientation
_R = SideRole

# ============================================================
# Side role table: (kind, orientation) -> {role: (i, j)}
# ============================================================
_RT_UPRIGHT = {_R.BASE: (0, 1), _R.HEIGHT: (0, 2), _R.HYPOTENUSE: (1, 2)}
_RT_TURNED = {_R.BASE: (0, 2), _R.HEIGHT: (0, 1), _R.HYPOTENUSE: (1, 2)}
_ISO_LEFT_FIRST = {_R.BASE: (1, 2), _R.LEFT_LEG: (0, 1), _R.RIGHT_LEG: (0, 2)}
_ISO_RIGHT_FIRST = {_R.BASE: (1, 2), _R.LEFT_LEG: (0, 2), _R.RIGHT_LEG: (0, 1)}

SIDE_TABLE: dict[tuple[ShapeKind, Orientation], dict[SideRole, tuple[int, int]]] = {
    (ShapeKind.RIGHT_TRIANGLE, _O.DEFAULT): _RT_UPRIGHT,
    (ShapeKind.RIGHT_TRIANGLE, _O.ROTATE_90): _RT_TURNED,
    (ShapeKind.RIGHT_TRIANGLE, _O.ROTATE_180): _RT_UPRIGHT,
    (ShapeKind.RIGHT_TRIANGLE, _O.ROTATE_270): _RT_TURNED,
    (ShapeKind.RIGHT_TRIANGLE, _O.FLIP): _RT_UPRIGHT,
    (ShapeKind.RIGHT_TRIANGLE, _O.FLIP_VERTICAL): _RT_UPRIGHT,
    (ShapeKind.RIGHT_TRIANGLE, _O.FLIP_BOTH): _RT_UPRIGHT,
    (ShapeKind.ISOSCELES_TRIANGLE, _O.DEFAULT): _ISO_LEFT_FIRST,
    (ShapeKind.ISOSCELES_TRIANGLE, _O.ROTATE_90): _ISO_LEFT_FIRST,
    (ShapeKind.ISOSCELES_TRIANGLE, _O.ROTATE_180): _ISO_RIGHT_FIRST,
    (ShapeKind.ISOSCELES_TRIANGLE, _O.ROTATE_270): _ISO_RIGHT_FIRST,
    (ShapeKind.ISOSCELES_TRIANGLE, _O.FLIP): _ISO_RIGHT_FIRST,
    (ShapeKind.ISOSCELES_TRIANGLE, _O.FLIP_VERTICAL): _ISO_LEFT_FIRST,
    (ShapeKind.ISOSCELES_TRIANGLE, _O.FLIP_BOTH): _ISO_RIGHT_FIRST,
    (ShapeKind.SQUARE, _O.DEFAULT): {_R.BASE: (0, 1), _R.HEIGHT: (3, 0)},
}

# Isosceles labels tied to the altitude rather than a polygon side.
ALTITUDE_ROLES = (SideRole.HEIGHT, SideRole.HALF_BASE)


def side_indices(kind: ShapeKind, orientation: Orientation, role: SideRole) -> tuple[int, int]:
    """Vertex index pair forming the side named by role."""
    kind, orientation = ShapeKind(kind), Orientation(orientation)
    sides = SIDE_TABLE.get((kind, orientation), {})
    try:
        return sides[SideRole(role)]
    except (KeyError, ValueError):
        raise UnsupportedSideRole(
            f"No {getattr(role, 'value', role)} side on {kind.value} ({orientation.value})") from None


def side_roles(kind: ShapeKind, orientation: Orientation) -> list[SideRole]:
    """Roles defined for the shape, in placement order."""
    return list(SIDE_TABLE.get((ShapeKind(kind), Orientation(orientation)), {}))


def label_roles(kind: ShapeKind, orientation: Orientation) -> list[SideRole]:
    """Every role that takes a label: sides first, then altitude labels."""
    roles = side_roles(kind, orientation)
    if ShapeKind(kind) == ShapeKind.ISOSCELES_TRIANGLE:
        roles += list(ALTITUDE_ROLES)
    return roles


def check_role(kind: ShapeKind, orientation: Orientation, role) -> SideRole:
    """Return role as a SideRole, or raise UnsupportedSideRole."""
    kind, orientation = ShapeKind(kind), Orientation(orientation)
    try:
        r = SideRole(role)
    except ValueError:
        r = None
    if r is None or r not in label_roles(kind, orientation):
        raise UnsupportedSideRole(
            f"No {getattr(role, 'value', role)} label on {kind.value} ({orientation.value})")
    return r

# ============================================================
# Offsets
# ============================================================
class LabelOptions(NamedTuple):
    base_offset: float | None = None   # None: per-kind default
    multiplier: float = 1.0
    probe: float = LABEL_PROBE
    min_vertex_distance: float = LABEL_MIN_VERTEX_DISTANCE   # 0 disables the push-back


def _check_positive(name: str, val, allow_zero: bool = False) -> None:
    if isinstance(val, bool) or not isinstance(val, numbers.Real) or not math.isfinite(val):
        raise InvalidLabelOption(f"{name} must be a finite number, got {val!r}")
    if val < 0 or (val == 0 and not allow_zero):
        raise InvalidLabelOption(f"{name} must be positive: {name}={val}")


def check_options(options: LabelOptions) -> None:
    """Raise InvalidLabelOption for options that could put a label on or inside the shape."""
    if options.base_offset is not None:
        _check_positive("base_offset", options.base_offset)
    _check_positive("multiplier", options.multiplier)
    _check_positive("probe", options.probe)
    _check_positive("min_vertex_distance", options.min_vertex_distance, allow_zero=True)


def extra_offset(n_chars: int) -> float:
    """Additional push-out for longer label strings (step function)."""
    if n_chars >= LABEL_LONG_CHARS:
        return LABEL_LONG_EXTRA
    if n_chars >= LABEL_MEDIUM_CHARS:
        return LABEL_MEDIUM_EXTRA
    return 0.0


def label_offset(kind: ShapeKind, text: str, options: LabelOptions) -> float:
    base = options.base_offset
    if base is None:
        base = LABEL_BASE_OFFSETS[ShapeKind(kind).value]
    return (base + extra_offset(len(text))) * options.multiplier


def outward_normal(p1: Point, p2: Point, center: Point, probe: float = LABEL_PROBE) -> Point:
    """Unit normal of p1-p2 pointing away from center; (0, 0) for a zero-length side."""
    _check_positive("probe", probe)
    n = perpendicular(subtract(p2, p1))
    m = midpoint(p1, p2)
    d_pos = distance(offset_point(m, n, probe), center)
    d_neg = distance(offset_point(m, n, -probe), center)
    return n if d_pos >= d_neg else (-n[0], -n[1])


def avoid_vertex_overlap(position: Point, vertices: list[Point], min_distance: float) -> Point:
    """Push position radially out from the first vertex closer than min_distance.

    Moving along the ray from a hull vertex keeps an outside point outside.
    """
    for v in vertices:
        d = distance(position, v)
        if d < EPS:
            logger.debug("Label sits on vertex %s; not moved", v)
            return position
        if d < min_distance:
            return offset_point(v, normalize(subtract(position, v)), min_distance)
    return position

# ============================================================
# Altitude labels (isosceles)
# ============================================================
def _displayed_left(p: Point, q: Point) -> bool:
    """True when p shows left of q, or below it when they share x."""
    if abs(p[0] - q[0]) > 1e-9:
        return p[0] < q[0]
    return p[1] < q[1]


def _altitude_anchor(
    vertices: list[Point], role: SideRole, text: str, kind: ShapeKind, options: LabelOptions,
) -> Point:
    apex, b1, b2 = vertices[0], vertices[1], vertices[2]
    foot = midpoint(b1, b2)
    d = label_offset(kind, text, options)
    if role == SideRole.HEIGHT:
        n = perpendicular(subtract(apex, foot))
        # displayed right of the altitude; below it when the altitude is horizontal
        if n[0] < -1e-9 or (abs(n[0]) <= 1e-9 and n[1] > 0):
            n = (-n[0], -n[1])
        return offset_point(midpoint(apex, foot), n, d)
    left = b1 if _displayed_left(b1, b2) else b2
    n = outward_normal(b1, b2, centroid(vertices), options.probe)
    return avoid_vertex_overlap(offset_point(midpoint(left, foot), n, d), vertices,
                                options.min_vertex_distance)

# ============================================================
# Placement
# ============================================================
def place_label(
    vertices: list[Point], side_role: SideRole, text: str,
    kind: ShapeKind, orientation: Orientation = Orientation.DEFAULT,
    options: LabelOptions | None = None,
) -> LabelAnchor:
    """Anchor for the label of one side, pushed outside the shape.

    Isosceles HEIGHT and HALF_BASE anchor on the altitude instead.
    """
    options = options or LabelOptions()
    check_options(options)
    role = check_role(kind, orientation, side_role)
    if ShapeKind(kind) == ShapeKind.ISOSCELES_TRIANGLE and role in ALTITUDE_ROLES:
        return LabelAnchor(_altitude_anchor(vertices, role, text, kind, options), text, role)

    i, j = side_indices(kind, orientation, role)
    p1, p2 = vertices[i], vertices[j]
    m = midpoint(p1, p2)
    if length(subtract(p2, p1)) < EPS:
        logger.debug("Zero-length %s side; label placed on its midpoint", role)
        return LabelAnchor(m, text, role)
    n = outward_normal(p1, p2, centroid(vertices), options.probe)
    pos = offset_point(m, n, label_offset(kind, text, options))
    return LabelAnchor(avoid_vertex_overlap(pos, vertices, options.min_vertex_distance), text, role)


def place_labels(
    vertices: list[Point], label_texts: dict[SideRole, str],
    kind: ShapeKind, orientation: Orientation = Orientation.DEFAULT,
    options: LabelOptions | None = None,
) -> list[LabelAnchor]:
    """Anchors for every non-empty label text, in role order."""
    texts = {check_role(kind, orientation, r): t for r, t in label_texts.items()}
    return [place_label(vertices, role, texts[role], kind, orientation, options)
            for role in label_roles(kind, orientation) if texts.get(role)]
