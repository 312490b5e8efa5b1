"""
Solid features of the vent adapter.

Supports:
- Mounting plate with rounded corners
- Fan screw clearance holes
- Hexagonal vent grille (or a plain opening)
- Conical transition between fan opening and pipe
- Pipe sleeve

Every feature sits on the Z axis with the plate's underside at Z=0.
"""

import logging
import math
from typing import List, Sequence

from build123d import (
    Part, Cylinder, Cone, Align, Pos,
    Rectangle, RectangleRounded, RegularPolygon, extrude,
)

from ..calculator.hex_grid import Point

logger = logging.getLogger(__name__)

# Cutting tools overshoot the solid by this much at each end
CUT_OVERSHOOT_MM = 1.0

_BASE_ALIGN = (Align.CENTER, Align.CENTER, Align.MIN)


def create_plate(size: float, thickness: float, corner_radius: float = 0.0) -> Part:
    """
    Create the square mounting plate.

    Args:
        size: Side length in mm (the fan frame size)
        thickness: Plate thickness in mm
        corner_radius: Radius of the vertical corner edges (0 for sharp)

    Returns:
        Plate from Z=0 to Z=thickness, centred on the Z axis
    """
    if corner_radius > 0:
        outline = RectangleRounded(size, size, corner_radius)
    else:
        outline = Rectangle(size, size)
    return extrude(outline, amount=thickness)


def create_screw_holes(
    part: Part,
    positions: Sequence[Point],
    diameter: float,
    thickness: float
) -> Part:
    """
    Cut through-holes for the fan screws.

    Args:
        part: Plate to drill
        positions: (x, y) hole centres
        diameter: Clearance hole diameter in mm
        thickness: Plate thickness in mm

    Returns:
        Plate with screw holes cut
    """
    result = part
    for x, y in positions:
        hole = Pos(x, y, -CUT_OVERSHOOT_MM) * Cylinder(
            radius=diameter / 2,
            height=thickness + 2 * CUT_OVERSHOOT_MM,
            align=_BASE_ALIGN
        )
        result = result - hole
    return result


def create_hex_prism(flat_to_flat: float, height: float) -> Part:
    """Flat-topped hexagonal prism standing on Z=0 (vertices on the X axis)."""
    hexagon = RegularPolygon(radius=flat_to_flat / 2, side_count=6, major_radius=False)
    return extrude(hexagon, amount=height)


def create_hex_grille(
    part: Part,
    points: Sequence[Point],
    hole_width: float,
    thickness: float
) -> Part:
    """
    Cut the hexagonal vent holes through the plate.

    All cutters are subtracted in a single boolean operation.

    Args:
        part: Plate to perforate
        points: Hole centres, as produced by hex_grid.tile()
        hole_width: Flat-to-flat width of each hole in mm
        thickness: Plate thickness in mm

    Returns:
        Perforated plate; unchanged if there are no points
    """
    if not points or hole_width <= 0:
        logger.warning("Vent grille has no holes; the fan opening stays closed")
        return part

    prism = create_hex_prism(hole_width, thickness + 2 * CUT_OVERSHOOT_MM)
    cutters: List[Part] = [Pos(x, y, -CUT_OVERSHOOT_MM) * prism for x, y in points]
    logger.debug(f"Cutting {len(cutters)} vent holes ({hole_width:.2f}mm across flats)")
    return part - cutters


def create_opening(part: Part, diameter: float, thickness: float) -> Part:
    """Cut a plain round fan opening through the plate (no grille)."""
    opening = Pos(0, 0, -CUT_OVERSHOOT_MM) * Cylinder(
        radius=diameter / 2,
        height=thickness + 2 * CUT_OVERSHOOT_MM,
        align=_BASE_ALIGN
    )
    return part - opening


def _frustum(bottom_radius: float, top_radius: float, height: float) -> Part:
    """Solid cone frustum standing on Z=0; a cylinder when the radii match."""
    if math.isclose(bottom_radius, top_radius):
        return Cylinder(radius=bottom_radius, height=height, align=_BASE_ALIGN)
    return Cone(
        bottom_radius=bottom_radius,
        top_radius=top_radius,
        height=height,
        align=_BASE_ALIGN
    )


def create_transition(
    bottom_radii: Sequence[float],
    top_radii: Sequence[float],
    height: float,
    z_offset: float = 0.0
) -> Part:
    """
    Create the hollow funnel joining the fan opening to the sleeve.

    Args:
        bottom_radii: (inner, outer) radius at the bottom in mm
        top_radii: (inner, outer) radius at the top in mm
        height: Funnel height in mm
        z_offset: Z of the funnel's bottom face

    Returns:
        Hollow frustum from z_offset to z_offset + height
    """
    bottom_inner, bottom_outer = bottom_radii
    top_inner, top_outer = top_radii

    outer = _frustum(bottom_outer, top_outer, height)

    # Bore keeps the same taper but overshoots both end faces
    slope = (top_inner - bottom_inner) / height
    bore = Pos(0, 0, -CUT_OVERSHOOT_MM) * _frustum(
        bottom_inner - slope * CUT_OVERSHOOT_MM,
        top_inner + slope * CUT_OVERSHOOT_MM,
        height + 2 * CUT_OVERSHOOT_MM
    )

    return Pos(0, 0, z_offset) * (outer - bore)


def create_sleeve(
    inner_diameter: float,
    outer_diameter: float,
    length: float,
    z_offset: float = 0.0
) -> Part:
    """
    Create the tube that mates with the pipe.

    Args:
        inner_diameter: Sleeve bore in mm
        outer_diameter: Sleeve outside diameter in mm
        length: Sleeve length in mm
        z_offset: Z of the sleeve's bottom face

    Returns:
        Tube from z_offset to z_offset + length
    """
    tube = Cylinder(radius=outer_diameter / 2, height=length, align=_BASE_ALIGN)
    bore = Pos(0, 0, -CUT_OVERSHOOT_MM) * Cylinder(
        radius=inner_diameter / 2,
        height=length + 2 * CUT_OVERSHOOT_MM,
        align=_BASE_ALIGN
    )
    return Pos(0, 0, z_offset) * (tube - bore)
