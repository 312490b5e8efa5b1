"""Derived dimensions for the vent adapter.

These are pure calculation functions that don't depend on build123d geometry.
Used by validation and by the geometry front end.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, TYPE_CHECKING

from ..enums import PipeFit
from .constants import (
    FAN_HOLE_SPACING_MM,
    FAN_OPENING_RIM_MM,
    TRANSITION_MIN_HEIGHT_MM,
)
from .hex_grid import Point, tile

SQRT3_HALF = math.sqrt(3.0) / 2

if TYPE_CHECKING:
    from ..io.loaders import AdapterParams


def standard_hole_spacing(fan_size_mm: float) -> Optional[float]:
    """
    Look up the screw hole spacing for a standard fan frame.

    Returns:
        Spacing in mm, or None if the size isn't a known form factor
    """
    if not float(fan_size_mm).is_integer():
        return None
    return FAN_HOLE_SPACING_MM.get(int(fan_size_mm))


def default_opening_diameter(fan_size_mm: float) -> float:
    return fan_size_mm - FAN_OPENING_RIM_MM


def grille_radius(opening_diameter: float) -> float:
    return opening_diameter / 2


def hole_width(cell_width: float, web_width: float) -> float:
    """Flat-to-flat width of a vent hole: the cell minus the web around it."""
    return max(cell_width - web_width, 0.0)


def hexagon_area(flat_to_flat: float) -> float:
    return SQRT3_HALF * flat_to_flat ** 2


def open_area_ratio(hole_count: int, hole_flat_to_flat: float, opening_diameter: float) -> float:
    """Fraction of the fan opening left open by the vent holes (0-1)."""
    if opening_diameter <= 0:
        return 0.0
    opening_area = math.pi * (opening_diameter / 2) ** 2
    return hole_count * hexagon_area(hole_flat_to_flat) / opening_area


def grille_points(params: "AdapterParams") -> List[Point]:
    """
    Vent hole centres for the configured grille.

    Empty when the grille is disabled. Computed once per design and shared
    by validation and the dimension calculation.
    """
    grille = params.grille
    if not grille.enabled:
        return []
    opening = params.fan.opening_diameter_mm
    if opening is None:
        opening = default_opening_diameter(params.fan.size_mm)
    return tile(grille.cell_width_mm, grille_radius(opening))


def screw_positions(hole_spacing: float) -> List[Point]:
    """Four screw hole centres on a square of side ``hole_spacing``."""
    half = hole_spacing / 2
    return [(half, half), (-half, half), (-half, -half), (half, -half)]


def sleeve_diameters(
    pipe_diameter: float,
    fit: PipeFit,
    wall_thickness: float,
    clearance: float
) -> Tuple[float, float]:
    """
    Inner and outer diameter of the sleeve that mates with the pipe.

    For PipeFit.INSIDE the pipe diameter is the pipe's bore and the sleeve's
    outside is reduced by the clearance; for PipeFit.OUTSIDE it is the pipe's
    outside and the sleeve's bore is enlarged by it.

    Returns:
        Tuple of (inner_diameter, outer_diameter) in mm
    """
    if fit == PipeFit.INSIDE:
        outer = pipe_diameter - 2 * clearance
        return (outer - 2 * wall_thickness, outer)
    inner = pipe_diameter + 2 * clearance
    return (inner, inner + 2 * wall_thickness)


def transition_height(bottom_radius: float, top_radius: float, max_overhang_deg: float) -> float:
    """
    Height of the cone joining two radii without exceeding an overhang angle.

    The overhang is measured from vertical, so a 45 degree limit gives a
    height equal to the change in radius. Never below TRANSITION_MIN_HEIGHT_MM.
    """
    delta = abs(top_radius - bottom_radius)
    height = delta / math.tan(math.radians(max_overhang_deg))
    return max(height, TRANSITION_MIN_HEIGHT_MM)


@dataclass
class AdapterDimensions:
    """Every derived dimension the geometry needs (all in mm)."""
    plate_size: float
    plate_thickness: float
    hole_spacing: float
    screw_hole_diameter: float
    screw_positions: List[Point]
    opening_diameter: float
    grille_radius: float
    cell_width: float
    hole_width: float
    sleeve_inner_diameter: float
    sleeve_outer_diameter: float
    sleeve_length: float
    wall_thickness: float
    transition_height: float
    hex_points: List[Point] = field(default_factory=list)
    open_area_ratio: float = 1.0

    @property
    def transition_bottom_radii(self) -> Tuple[float, float]:
        """(inner, outer) radius where the transition meets the plate."""
        inner = self.opening_diameter / 2
        return (inner, inner + self.wall_thickness)

    @property
    def transition_top_radii(self) -> Tuple[float, float]:
        """(inner, outer) radius where the transition meets the sleeve."""
        return (self.sleeve_inner_diameter / 2, self.sleeve_outer_diameter / 2)

    @property
    def total_height(self) -> float:
        return self.plate_thickness + self.transition_height + self.sleeve_length


def calculate_adapter_dimensions(
    params: "AdapterParams",
    hex_points: Optional[List[Point]] = None
) -> AdapterDimensions:
    """
    Derive all adapter dimensions from the configuration.

    Args:
        params: Adapter configuration
        hex_points: Vent hole centres from grille_points(), if already computed

    Returns:
        AdapterDimensions

    Raises:
        ValueError: If hole spacing isn't given and the fan size isn't standard
    """
    fan = params.fan
    hole_spacing = fan.hole_spacing_mm
    if hole_spacing is None:
        hole_spacing = standard_hole_spacing(fan.size_mm)
        if hole_spacing is None:
            raise ValueError(
                f"No standard hole spacing for {fan.size_mm}mm fans. "
                f"Known sizes: {sorted(FAN_HOLE_SPACING_MM)}; set fan.hole_spacing_mm."
            )

    opening = fan.opening_diameter_mm
    if opening is None:
        opening = default_opening_diameter(fan.size_mm)

    pipe = params.pipe
    sleeve_inner, sleeve_outer = sleeve_diameters(
        pipe.diameter_mm, pipe.fit, pipe.wall_thickness_mm, pipe.clearance_mm
    )

    grille = params.grille
    radius = grille_radius(opening)
    hole = hole_width(grille.cell_width_mm, grille.web_width_mm)
    if grille.enabled:
        points = hex_points if hex_points is not None else grille_points(params)
        ratio = open_area_ratio(len(points), hole, opening)
    else:
        points = []
        ratio = 1.0

    height = transition_height(opening / 2, sleeve_inner / 2, params.transition_max_overhang_deg)

    return AdapterDimensions(
        plate_size=fan.size_mm,
        plate_thickness=params.plate.thickness_mm,
        hole_spacing=hole_spacing,
        screw_hole_diameter=fan.screw_hole_diameter_mm,
        screw_positions=screw_positions(hole_spacing),
        opening_diameter=opening,
        grille_radius=radius,
        cell_width=grille.cell_width_mm,
        hole_width=hole,
        sleeve_inner_diameter=sleeve_inner,
        sleeve_outer_diameter=sleeve_outer,
        sleeve_length=pipe.sleeve_length_mm,
        wall_thickness=pipe.wall_thickness_mm,
        transition_height=height,
        hex_points=points,
        open_area_ratio=ratio,
    )
