"""Tests for diagram/diff.py."""
from diagram.types import ShapeKind, Orientation, SideRole, ShapeSpec
from diagram.scene import build_scene
from diagram.diff import scene_elements, diff_scenes


def test_element_ids_right_triangle(right_scene):
    assert set(scene_elements(right_scene)) == {
        "polygon", "label:base", "label:height", "label:hypotenuse", "marker:0", "arc:1", "arc:2",
    }


def test_element_ids_isosceles(iso_scene):
    ids = set(scene_elements(iso_scene))
    assert {"marker:foot", "segment:height", "segment:hash:0", "segment:hash:1",
            "label:left_leg", "label:right_leg"} <= ids


def test_first_render_adds_everything(square_scene):
    d = diff_scenes(None, square_scene)
    assert set(d.added) == set(scene_elements(square_scene))
    assert d.removed == [] and d.changed == {}


def test_same_scene_is_empty(iso_scene):
    assert diff_scenes(iso_scene, iso_scene).empty


def test_label_text_change(right_spec):
    old = build_scene(right_spec._replace(label_texts={SideRole.BASE: "6"}))
    new = build_scene(right_spec._replace(label_texts={SideRole.BASE: "7"}))
    d = diff_scenes(old, new)
    assert list(d.changed) == ["label:base"]
    assert d.changed["label:base"]["text"] == "7"
    assert not d.added and not d.removed


def test_label_removed_and_added(right_spec):
    old = build_scene(right_spec._replace(label_texts={SideRole.BASE: "6"}))
    new = build_scene(right_spec._replace(label_texts={SideRole.HYPOTENUSE: "x"}))
    d = diff_scenes(old, new)
    assert d.removed == ["label:base"]
    assert list(d.added) == ["label:hypotenuse"]


def test_orientation_change_moves_polygon(iso_spec):
    old = build_scene(iso_spec)
    new = build_scene(iso_spec._replace(orientation=Orientation.ROTATE_180))
    d = diff_scenes(old, new)
    assert "polygon" in d.changed
    assert "segment:height" in d.changed


def test_marker_and_angle_arc_share_vertex():
    scene = build_scene(ShapeSpec(ShapeKind.RIGHT_TRIANGLE, 6, 4, angle_flags=(True, True, True)))
    els = scene_elements(scene)
    arc_ids = sorted(k for k in els if k.startswith(("arc:", "marker:")))
    assert len(scene.arcs) == 4
    assert arc_ids == ["arc:0", "arc:1", "arc:2", "marker:0"]
    assert els["marker:0"]["type"] == "marker"


def test_adding_marker_is_reported():
    spec = ShapeSpec(ShapeKind.SQUARE, 5, 5, angle_flags=(False, False, False, True),
                     show_right_angle=False)
    old = build_scene(spec)
    new = build_scene(spec._replace(show_right_angle=True))
    d = diff_scenes(old, new)
    assert list(d.added) == ["marker:3"]
    assert not d.removed and not d.changed
