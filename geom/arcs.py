"""Interior-angle arcs at polygon vertices.

An arc is described by its two end points on a circle around the vertex and
a sweep flag giving the drawing direction. The angular difference between
the two sides is normalised into (-pi, pi], so the shorter way around is
always taken. For a convex polygon that is the interior angle.
"""
import math
from typing import Literal, NamedTuple

from .types import Point


class AngleArc(NamedTuple):
    """Arc marking the angle at one vertex."""
    vertex_index: int | None   # None for markers not on a polygon vertex
    start: Point               # on the ray towards adjacent1
    end: Point                 # on the ray towards adjacent2
    sweep_flag: int            # 1: start -> end runs CCW (y up), 0: CW
    label_position: Point
    label_text: str
    radius: float
    sweep_angle: float         # signed, |sweep_angle| < pi
    role: Literal["angle", "marker"] = "angle"   # marker: right-angle box, never labelled


def normalize_angle(diff: float) -> float:
    """Wrap an angle difference into (-pi, pi]."""
    if diff > math.pi:
        diff -= 2*math.pi
    elif diff <= -math.pi:
        diff += 2*math.pi
    return diff


def arc_at(
    vertex: Point, adjacent1: Point, adjacent2: Point, radius: float,
    label_gap: float = 0.0, label_text: str = "", vertex_index: int | None = None,
    role: str = "angle",
) -> AngleArc:
    """Arc of the given radius spanning the angle adjacent1-vertex-adjacent2.

    A zero-length side gives atan2(0, 0) == 0, so degenerate input yields a
    deterministic arc instead of NaN.
    """
    a1 = math.atan2(adjacent1[1]-vertex[1], adjacent1[0]-vertex[0])
    a2 = math.atan2(adjacent2[1]-vertex[1], adjacent2[0]-vertex[0])
    diff = normalize_angle(a2 - a1)
    sweep = 1 if diff > 0 else 0
    start = (vertex[0]+radius*math.cos(a1), vertex[1]+radius*math.sin(a1))
    end = (vertex[0]+radius*math.cos(a2), vertex[1]+radius*math.sin(a2))
    mid = a1 + diff/2
    lr = radius + label_gap
    label = (vertex[0]+lr*math.cos(mid), vertex[1]+lr*math.sin(mid))
    return AngleArc(vertex_index, start, end, sweep, label, label_text, radius, diff, role)


def mid_angle(arc: AngleArc, vertex: Point) -> float:
    """Direction (radians) of the arc's angular midpoint as seen from vertex."""
    a1 = math.atan2(arc.start[1]-vertex[1], arc.start[0]-vertex[0])
    return a1 + arc.sweep_angle/2


def interior_arcs(
    vertices: list[Point], flags: list[bool], labels: list[str],
    radius: float, label_gap: float,
) -> list[AngleArc]:
    """One arc per flagged vertex, spanning to its two polygon neighbours."""
    n = len(vertices)
    arcs = []
    for i in range(n):
        if i >= len(flags) or not flags[i]:
            continue
        text = labels[i] if i < len(labels) else ""
        arcs.append(arc_at(vertices[i], vertices[(i+1)%n], vertices[(i-1)%n],
                           radius, label_gap, text, i))
    return arcs
