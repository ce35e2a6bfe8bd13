"""Shape diagrams: vertices, side labels, angle arcs, and frames per orientation."""

from .types import (
    DiagramError, InvalidDimension, UnsupportedShape, UnsupportedOrientation, UnsupportedSideRole,
    InvalidLabelOption,
    ShapeKind, Orientation, SideRole, ShapeSpec, ShapeGeometry, LabelAnchor, Scene,
)
from .orientation import SUPPORTED_ORIENTATIONS, check_orientation, resolve_orientation, apply_orientation
from .shapes import build_shape, hash_mark
from .labels import (
    ALTITUDE_ROLES, LabelOptions, side_indices, side_roles, label_roles, check_role,
    avoid_vertex_overlap, place_label, place_labels,
)
from .frame import frame, vertex_bbox
from .context import PresentationContext, Theme, context_for, theme_for
from .scene import build_scene, spec_for_section, scene_to_dict
from .diff import SceneDiff, scene_elements, diff_scenes
from .svg import arc_path, render_svg
