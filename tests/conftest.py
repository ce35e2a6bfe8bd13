"""Shared test fixtures for diagram geometry tests."""
import pytest
from diagram.types import ShapeKind, Orientation, SideRole, ShapeSpec
from diagram.orientation import SUPPORTED_ORIENTATIONS
from diagram.shapes import build_shape
from diagram.scene import build_scene
from diagram.context import context_for


def all_kind_orientations():
    """Every (kind, orientation) pair, supported or not."""
    return [(k, o) for k in ShapeKind for o in Orientation]


def supported_kind_orientations():
    return [(k, o) for k in ShapeKind for o in SUPPORTED_ORIENTATIONS[k]]


def std_spec(kind, orientation=Orientation.DEFAULT, **kw) -> ShapeSpec:
    """Spec with the diagnostic section's standard dimensions."""
    w, h = context_for("diagnostic").fixed_dimensions(kind)
    return ShapeSpec(kind=kind, fixed_width=w, fixed_height=h, orientation=orientation, **kw)


@pytest.fixture(scope="session")
def right_spec():
    """Right triangle 6x5 (base x height), default pose."""
    return ShapeSpec(kind=ShapeKind.RIGHT_TRIANGLE, fixed_width=6, fixed_height=5)


@pytest.fixture(scope="session")
def right_geo(right_spec):
    return build_shape(right_spec)


@pytest.fixture(scope="session")
def iso_spec():
    """Isosceles 6x5 with altitude and equal-side marks."""
    return ShapeSpec(
        kind=ShapeKind.ISOSCELES_TRIANGLE, fixed_width=6, fixed_height=5,
        show_height=True, show_equal_side_marks=True,
        label_texts={SideRole.BASE: "10", SideRole.LEFT_LEG: "13", SideRole.RIGHT_LEG: "13"},
    )


@pytest.fixture(scope="session")
def iso_scene(iso_spec):
    return build_scene(iso_spec)


@pytest.fixture(scope="session")
def right_scene():
    """Right triangle with all three sides labelled and both acute angles marked."""
    spec = ShapeSpec(
        kind=ShapeKind.RIGHT_TRIANGLE, fixed_width=6, fixed_height=4,
        label_texts={SideRole.BASE: "8", SideRole.HEIGHT: "6", SideRole.HYPOTENUSE: "x"},
        angle_flags=(False, True, True),
    )
    return build_scene(spec)


@pytest.fixture(scope="session")
def square_scene():
    spec = ShapeSpec(
        kind=ShapeKind.SQUARE, fixed_width=5, fixed_height=5,
        label_texts={SideRole.BASE: "5 cm"},
    )
    return build_scene(spec)
