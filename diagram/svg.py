"""SVG rendering of a built scene."""
from html import escape

from geom.svg import make_svg_transform, svg_scale, fmt_points, W
from geom.arcs import AngleArc
from diagram.types import Scene
from diagram.context import PresentationContext, Theme, context_for, theme_for
from diagram.constants import FILL_OPACITY, STROKE_WIDTH, DEFAULT_SECTION

# ============================================================
# SVG Helpers
# ============================================================

def arc_path(arc: AngleArc, to_svg, scale: float) -> str:
    """Path data for an angle arc.

    Board y points up and SVG y points down, which reverses the drawing
    direction, so the SVG sweep flag is the complement of arc.sweep_flag.
    """
    x1, y1 = to_svg(*arc.start); x2, y2 = to_svg(*arc.end)
    r = arc.radius * scale
    return f"M {x1:.1f} {y1:.1f} A {r:.1f} {r:.1f} 0 0 {1 - arc.sweep_flag} {x2:.1f} {y2:.1f}"


def text_el(out, pos, text, size, color, to_svg):
    """Centred text at a board position."""
    x, y = to_svg(*pos)
    out.append(f'<text x="{x:.1f}" y="{y:.1f}" text-anchor="middle" dominant-baseline="middle"'
               f' font-family="Arial" font-size="{size}" fill="{color}">{escape(text)}</text>')

# ============================================================
# Main entry point
# ============================================================

def render_svg(
    scene: Scene, context: PresentationContext | None = None, theme: Theme | None = None,
    width: float = W, height: float | None = None,
) -> str:
    """Complete <svg> document for scene, framed by scene.frame.

    height defaults to the section's container height.
    """
    context = context or context_for(DEFAULT_SECTION)
    height = height or context.container_height
    theme = theme or theme_for(context.section)
    to_svg = make_svg_transform(scene.frame, width, height)
    s = svg_scale(scene.frame, width, height)

    out = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}"'
           f' viewBox="0 0 {width} {height}">']
    poly = [scene.vertices[i] for i in scene.polygon_indices]
    out.append(f'<polygon points="{fmt_points(poly, to_svg)}" fill="{theme.fill}"'
               f' fill-opacity="{FILL_OPACITY}" stroke="{theme.stroke}" stroke-width="{STROKE_WIDTH}"/>')

    for seg in scene.extra_segments:
        x1, y1 = to_svg(*seg.start); x2, y2 = to_svg(*seg.end)
        dash = ' stroke-dasharray="4,3"' if seg.role == "height" else ""
        out.append(f'<line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}"'
                   f' stroke="{theme.stroke}" stroke-width="1.5"{dash}/>')

    for arc in scene.arcs:
        out.append(f'<path d="{arc_path(arc, to_svg, s)}" fill="none"'
                   f' stroke="{theme.stroke}" stroke-width="1.5"/>')
        if arc.label_text:
            text_el(out, arc.label_position, arc.label_text, context.label_size, theme.stroke, to_svg)

    for a in scene.labels:
        text_el(out, a.position, a.text, context.label_size, "#333", to_svg)

    out.append('</svg>')
    return "\n".join(out)
