"""Viewport framing around a built shape."""
from geom.types import Point, BBox
from diagram.context import PresentationContext


def vertex_bbox(points: list[Point]) -> BBox:
    """Tight bounding box of the points."""
    xs = [p[0] for p in points]; ys = [p[1] for p in points]
    return BBox(x_min=min(xs), y_max=max(ys), x_max=max(xs), y_min=min(ys))


def frame(
    vertices: list[Point], context: PresentationContext, extra_points: list[Point] = (),
) -> BBox:
    """Frame for the host renderer.

    An explicit context.frame is returned unchanged. Otherwise the bounding
    box of the vertices (and any extra_points, e.g. label anchors the caller
    wants covered) grown by context.padding on every side.
    """
    if context.frame is not None:
        return context.frame
    b = vertex_bbox(list(vertices) + list(extra_points))
    p = context.padding
    return BBox(x_min=b.x_min - p, y_max=b.y_max + p, x_max=b.x_max + p, y_min=b.y_min - p)
