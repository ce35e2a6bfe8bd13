"""Keyed scene elements and scene-to-scene diffs for incremental renderers.

Every drawable piece of a scene gets a stable id, so a host that already
drew one scene can update only what changed when the next one arrives.
"""
from typing import NamedTuple

from diagram.types import Scene

# Coordinates are compared after rounding to this many decimals.
_DIGITS = 9


def _pt(p) -> list[float]:
    return [round(p[0], _DIGITS), round(p[1], _DIGITS)]


def scene_elements(scene: Scene) -> dict[str, dict]:
    """Map element id -> plain element dict.

    Ids: polygon, label:<role>, arc:<vertex index> for angle arcs,
    marker:<vertex index> for right-angle markers (marker:foot at the
    altitude foot), segment:height, segment:hash:<n>.
    """
    els = {"polygon": {
        "type": "polygon",
        "points": [_pt(scene.vertices[i]) for i in scene.polygon_indices],
    }}
    for a in scene.labels:
        els[f"label:{a.role.value}"] = {"type": "label", "position": _pt(a.position), "text": a.text}
    for arc in scene.arcs:
        key = "foot" if arc.vertex_index is None else arc.vertex_index
        prefix = "marker" if arc.role == "marker" else "arc"
        els[f"{prefix}:{key}"] = {
            "type": prefix, "start": _pt(arc.start), "end": _pt(arc.end),
            "sweep_flag": arc.sweep_flag, "radius": round(arc.radius, _DIGITS),
            "label_position": _pt(arc.label_position), "label_text": arc.label_text,
        }
    n_hash = 0
    for seg in scene.extra_segments:
        if seg.role == "hash":
            key = f"segment:hash:{n_hash}"; n_hash += 1
        else:
            key = f"segment:{seg.role}"
        els[key] = {"type": "segment", "role": seg.role, "start": _pt(seg.start), "end": _pt(seg.end)}
    return els


class SceneDiff(NamedTuple):
    added: dict[str, dict]
    removed: list[str]
    changed: dict[str, dict]     # id -> new element

    @property
    def empty(self) -> bool:
        return not (self.added or self.removed or self.changed)


def diff_scenes(old: Scene | None, new: Scene) -> SceneDiff:
    """Elements added, removed, and changed going from old to new.

    old=None (first render) reports every element of new as added.
    """
    new_els = scene_elements(new)
    if old is None:
        return SceneDiff(added=new_els, removed=[], changed={})
    old_els = scene_elements(old)
    added = {k: v for k, v in new_els.items() if k not in old_els}
    removed = [k for k in old_els if k not in new_els]
    changed = {k: v for k, v in new_els.items() if k in old_els and old_els[k] != v}
    return SceneDiff(added=added, removed=removed, changed=changed)
