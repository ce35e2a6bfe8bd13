"""Generate a gallery SVG of every shape kind in every supported orientation.

Usage: python -m diagram.gen_diagrams [section]
"""
import os, sys, datetime

from geom.svg import W, H
from diagram.types import ShapeKind, SideRole
from diagram.orientation import SUPPORTED_ORIENTATIONS
from diagram.scene import build_scene, spec_for_section
from diagram.context import context_for, theme_for
from diagram.svg import render_svg

_LABELS = {
    ShapeKind.RIGHT_TRIANGLE: {SideRole.BASE: "6 cm", SideRole.HEIGHT: "4 cm", SideRole.HYPOTENUSE: "x"},
    ShapeKind.ISOSCELES_TRIANGLE: {SideRole.BASE: "10", SideRole.LEFT_LEG: "13", SideRole.RIGHT_LEG: "13",
                                  SideRole.HEIGHT: "h = 12", SideRole.HALF_BASE: "5"},
    ShapeKind.SQUARE: {SideRole.BASE: "5", SideRole.HEIGHT: "5"},
}

_OPTIONS = {
    ShapeKind.RIGHT_TRIANGLE: {"angle_flags": (False, True, True)},
    ShapeKind.ISOSCELES_TRIANGLE: {"show_height": True, "show_equal_side_marks": True},
    ShapeKind.SQUARE: {},
}

COLS = 4
_CAPTION = 16


def build_gallery(section: str = "learn"):
    """[(caption, scene)] for every kind x supported orientation."""
    ctx = context_for(section)
    items = []
    for kind in ShapeKind:
        for o in SUPPORTED_ORIENTATIONS[kind]:
            spec = spec_for_section(kind, section, o, _LABELS[kind], **_OPTIONS[kind])
            items.append((f"{kind.value} / {o.value}", build_scene(spec, ctx, cover_labels=True)))
    return items


def render_gallery(items, section: str = "learn") -> str:
    ctx = context_for(section)
    theme = theme_for(ctx.section)
    rows = (len(items) + COLS - 1) // COLS
    cell_h = H + _CAPTION
    total_w, total_h = COLS * W, rows * cell_h + 30

    out = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{total_w}" height="{total_h}"'
           f' viewBox="0 0 {total_w} {total_h}">']
    out.append(f'<rect width="{total_w}" height="{total_h}" fill="white"/>')
    for k, (caption, scene) in enumerate(items):
        x, y = (k % COLS) * W, (k // COLS) * cell_h
        out.append(f'<g transform="translate({x},{y})">')
        out.append(f'<text x="{W/2:.1f}" y="12" text-anchor="middle" font-family="Arial"'
                   f' font-size="10" fill="#666">{caption}</text>')
        out.append(f'<g transform="translate(0,{_CAPTION})">')
        out.append(render_svg(scene, ctx, theme, W, H))
        out.append('</g>')
        out.append('</g>')
    _now = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    out.append(f'<text x="{total_w/2:.1f}" y="{total_h-10}" text-anchor="middle" font-family="Arial"'
               f' font-size="8" fill="#999">section {ctx.section}, generated {_now}</text>')
    out.append('</svg>')
    return "\n".join(out)

# ============================================================
# Main entry point
# ============================================================

if __name__ == "__main__":
    section = sys.argv[1] if len(sys.argv) > 1 else "learn"
    items = build_gallery(section)
    svg_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "diagrams.svg")
    with open(svg_path, "w") as f:
        f.write(render_gallery(items, section))

    print(f"Gallery written to {svg_path}")
    print(f"Section: {section}, {len(items)} diagrams")
    print()
    for caption, scene in items:
        fr = scene.frame
        print(f"  {caption:<36s} frame ({fr.x_min:6.2f}, {fr.y_max:6.2f}, {fr.x_max:6.2f}, {fr.y_min:6.2f})"
              f"  labels {len(scene.labels)}  arcs {len(scene.arcs)}")
