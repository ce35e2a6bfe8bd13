"""Presentation contexts: per-section sizing, padding, and themes."""
import logging
from typing import NamedTuple

from geom.types import Point, BBox
from diagram.types import ShapeKind
from diagram.constants import (
    RIGHT_TRIANGLE_DIMS, ISOSCELES_DIMS, SQUARE_SIDE,
    SECTION_SIZES, SECTION_THEMES, DEFAULT_SECTION, STARTER_OFFSET,
)

logger = logging.getLogger(__name__)

_STANDARD_DIMS = {
    ShapeKind.RIGHT_TRIANGLE: RIGHT_TRIANGLE_DIMS,
    ShapeKind.ISOSCELES_TRIANGLE: ISOSCELES_DIMS,
    ShapeKind.SQUARE: (SQUARE_SIDE, SQUARE_SIDE),
}


class PresentationContext(NamedTuple):
    """Section-level presentation settings passed explicitly into the engine."""
    section: str
    scale: float
    padding: float
    label_size: float
    container_height: float
    position_offset: Point = (0.0, 0.0)
    frame: BBox | None = None        # explicit frame overrides the computed one

    def fixed_dimensions(self, kind: ShapeKind) -> tuple[float, float]:
        """Visual (width, height) for kind in this section."""
        w, h = _STANDARD_DIMS[ShapeKind(kind)]
        return (w * self.scale, h * self.scale)


class Theme(NamedTuple):
    fill: str
    stroke: str


def context_for(section: str) -> PresentationContext:
    """Context for a section name; unknown sections use the diagnostic sizing."""
    if section not in SECTION_SIZES:
        logger.warning("Unknown section %r; using %s", section, DEFAULT_SECTION)
        section = DEFAULT_SECTION
    sz = SECTION_SIZES[section]
    offset = STARTER_OFFSET if section == "starter" else (0.0, 0.0)
    return PresentationContext(
        section=section, scale=sz["scale"], padding=sz["padding"],
        label_size=sz["label_size"], container_height=sz["container_height"],
        position_offset=offset,
    )


def theme_for(section: str) -> Theme:
    """Fill/stroke colours for a section; unknown sections use the learn theme."""
    t = SECTION_THEMES.get(section, SECTION_THEMES["learn"])
    return Theme(fill=t["fill"], stroke=t["stroke"])
