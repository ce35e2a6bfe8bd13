"""Named constants for diagram geometry, labels, and presentation sections.

All lengths are in board units (the coordinate system of the vertices)
unless noted.
"""

# Standard visual dimensions per shape kind (before section scaling)
RIGHT_TRIANGLE_DIMS = (6.0, 4.0)     # width (base), height
ISOSCELES_DIMS = (6.0, 5.0)          # width (base), height (apex)
SQUARE_SIDE = 5.0

# Label placement
LABEL_PROBE = 0.1                    # probe distance for the outward test
LABEL_BASE_OFFSETS = {
    "right_triangle": 0.6,
    "isosceles_triangle": 0.7,
    "square": 0.5,
}
LABEL_MEDIUM_CHARS = 3               # len(text) >= 3 gets the medium extra offset
LABEL_LONG_CHARS = 5                 # len(text) >= 5 gets the long extra offset
LABEL_MEDIUM_EXTRA = 0.25
LABEL_LONG_EXTRA = 0.5
LABEL_MIN_VERTEX_DISTANCE = 0.5     # labels are pushed at least this far from any vertex

# Hash marks on equal sides
HASH_MARK_RATIO = 0.1                # mark length = min(w, h) * ratio

# Angle arcs
ANGLE_ARC_RATIO = 0.2                # arc radius = min(w, h) * ratio
RIGHT_ANGLE_RATIO = 0.15             # right-angle marker radius = min(w, h) * ratio
ANGLE_LABEL_GAP = 0.35               # label sits this far beyond the arc
DEFAULT_ANGLE_LABELS = ("θ", "φ")    # names for the two acute angles

# Sections: scale of the standard dimensions, frame padding, label font size
# (SVG points) and container height (SVG points).
SECTION_SIZES = {
    "starter":    {"scale": 0.9, "padding": 1.5, "label_size": 12, "container_height": 140},
    "diagnostic": {"scale": 1.0, "padding": 2.0, "label_size": 13, "container_height": 220},
    "learn":      {"scale": 1.0, "padding": 3.0, "label_size": 14, "container_height": 460},
    "examples":   {"scale": 1.2, "padding": 2.5, "label_size": 14, "container_height": 300},
    "challenge":  {"scale": 1.3, "padding": 2.5, "label_size": 14, "container_height": 320},
}
DEFAULT_SECTION = "diagnostic"
STARTER_OFFSET = (-1.0, 0.0)         # starter diagrams sit left of centre

# Section colour themes
SECTION_THEMES = {
    "starter":    {"fill": "#e0f2fe", "stroke": "#0284c7"},
    "diagnostic": {"fill": "#f3e8ff", "stroke": "#9333ea"},
    "learn":      {"fill": "#dcfce7", "stroke": "#16a34a"},
    "examples":   {"fill": "#ffedd5", "stroke": "#f97316"},
    "challenge":  {"fill": "#fee2e2", "stroke": "#dc2626"},
}
FILL_OPACITY = 0.2
STROKE_WIDTH = 2
