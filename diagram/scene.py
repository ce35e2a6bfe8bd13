"""Scene assembly: shape geometry, side labels, angle arcs, and frame."""
from enum import Enum

from geom.arcs import AngleArc, arc_at, interior_arcs
from geom.vectors import midpoint
from diagram.types import ShapeKind, Orientation, SideRole, ShapeSpec, Scene
from diagram.shapes import build_shape
from diagram.labels import ALTITUDE_ROLES, LabelOptions, place_labels
from diagram.frame import frame
from diagram.context import PresentationContext, context_for
from diagram.constants import (
    ANGLE_ARC_RATIO, RIGHT_ANGLE_RATIO, ANGLE_LABEL_GAP, DEFAULT_ANGLE_LABELS, DEFAULT_SECTION,
)


def _right_angle_markers(verts, spec: ShapeSpec, kind: ShapeKind) -> list[AngleArc]:
    """Unlabelled small arcs marking right angles."""
    if not spec.show_right_angle:
        return []
    r = min(spec.fixed_width, spec.fixed_height) * RIGHT_ANGLE_RATIO
    if kind == ShapeKind.RIGHT_TRIANGLE:
        return [arc_at(verts[0], verts[1], verts[2], r, vertex_index=0, role="marker")]
    if kind == ShapeKind.SQUARE:
        return [arc_at(verts[3], verts[0], verts[2], r, vertex_index=3, role="marker")]
    if spec.show_height:
        # foot of the altitude, between the right base vertex and the apex
        foot = midpoint(verts[1], verts[2])
        return [arc_at(foot, verts[2], verts[0], r, role="marker")]
    return []


def _angle_labels(spec: ShapeSpec, kind: ShapeKind, n: int) -> list[str]:
    labels = list(spec.angle_labels)
    if not labels and kind == ShapeKind.RIGHT_TRIANGLE:
        labels = ["", *DEFAULT_ANGLE_LABELS]
    return labels + [""] * (n - len(labels))


def build_scene(
    spec: ShapeSpec, context: PresentationContext | None = None,
    label_options: LabelOptions | None = None, cover_labels: bool = False,
) -> Scene:
    """Full renderer-agnostic scene for spec.

    The frame covers every vertex; with cover_labels it also covers label
    anchors and angle-label positions (before padding).
    """
    context = context or context_for(DEFAULT_SECTION)
    geo = build_shape(spec)
    kind = ShapeKind(spec.kind)
    verts = geo.vertices

    texts = dict(spec.label_texts or {})
    if kind == ShapeKind.ISOSCELES_TRIANGLE and not spec.show_height:
        # altitude labels only accompany a drawn altitude
        texts = {r: t for r, t in texts.items() if r not in ALTITUDE_ROLES}
    labels = place_labels(verts, texts, kind, geo.orientation, label_options)

    arcs = _right_angle_markers(verts, spec, kind)
    radius = min(spec.fixed_width, spec.fixed_height) * ANGLE_ARC_RATIO
    arcs += interior_arcs(verts, list(spec.angle_flags), _angle_labels(spec, kind, len(verts)),
                          radius, ANGLE_LABEL_GAP)

    extra = []
    if cover_labels:
        extra = [a.position for a in labels] + [a.label_position for a in arcs if a.label_text]

    return Scene(
        kind=kind,
        orientation=geo.orientation,
        vertices=verts,
        polygon_indices=geo.polygon_indices,
        extra_segments=geo.extra_segments,
        labels=labels,
        arcs=arcs,
        frame=frame(verts, context, extra),
    )


def spec_for_section(
    kind: ShapeKind, section: str, orientation: Orientation = Orientation.DEFAULT,
    label_texts: dict[SideRole, str] | None = None, **kwargs,
) -> ShapeSpec:
    """ShapeSpec using the section's fixed visual dimensions and offset."""
    ctx = context_for(section)
    w, h = ctx.fixed_dimensions(kind)
    kwargs.setdefault("position_offset", ctx.position_offset)
    return ShapeSpec(kind=ShapeKind(kind), fixed_width=w, fixed_height=h,
                     orientation=orientation, label_texts=label_texts, **kwargs)


def _plain(value):
    """Convert NamedTuples, enums, and containers into JSON-compatible data."""
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "_asdict"):
        return {k: _plain(v) for k, v in value._asdict().items()}
    if isinstance(value, dict):
        return {_plain(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def scene_to_dict(scene: Scene) -> dict:
    """Plain dict/list/number/string form of a scene (json.dumps ready)."""
    return _plain(scene)
