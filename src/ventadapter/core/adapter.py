"""
Vent adapter geometry generation using build123d.

Stacks three sections along +Z:
1. Mounting plate: fan-sized square with screw holes and a hexagonal vent grille
2. Transition: hollow cone from the fan opening to the sleeve
3. Sleeve: tube that pushes into (or slips over) the pipe
"""

import logging
from typing import Optional

from build123d import Part

from ..io.loaders import AdapterParams
from ..calculator.dimensions import AdapterDimensions, calculate_adapter_dimensions, grille_points
from ..calculator.validation import ValidationResult, validate_adapter
from .geometry_base import BaseGeometry
from .features import (
    create_plate,
    create_screw_holes,
    create_hex_grille,
    create_opening,
    create_transition,
    create_sleeve,
)

logger = logging.getLogger(__name__)


class VentAdapterGeometry(BaseGeometry):
    """
    Generates 3D geometry for a fan-to-pipe vent adapter.

    The plate's underside (fan side) is at Z=0; the sleeve ends at
    Z=dimensions.total_height.
    """

    _part_name = "vent adapter"

    def __init__(self, params: Optional[AdapterParams] = None, validate: bool = True):
        """
        Initialize vent adapter geometry generator.

        Args:
            params: Adapter configuration (defaults: 80mm fan, 75mm pipe)
            validate: If True, refuse to build designs with validation errors

        Raises:
            ValueError: If validate is True and the design has errors
        """
        super().__init__()
        self.params = params if params is not None else AdapterParams()
        self.validation: Optional[ValidationResult] = None
        hex_points = grille_points(self.params)

        if validate:
            self.validation = validate_adapter(self.params, hex_points)
            for msg in self.validation.warnings:
                logger.warning(f"{msg.code}: {msg.message}")
            if not self.validation.valid:
                details = "; ".join(f"{m.code}: {m.message}" for m in self.validation.errors)
                raise ValueError(f"Invalid vent adapter design - {details}")

        self.dimensions: AdapterDimensions = calculate_adapter_dimensions(self.params, hex_points)

    def _build(self) -> Part:
        """
        Build the complete adapter.

        Returns:
            build123d Part object ready for export
        """
        dims = self.dimensions

        plate = create_plate(dims.plate_size, dims.plate_thickness, self.params.fan.corner_radius_mm)
        plate = create_screw_holes(
            plate, dims.screw_positions, dims.screw_hole_diameter, dims.plate_thickness
        )

        if self.params.grille.enabled:
            logger.info(
                f"Vent grille: {len(dims.hex_points)} holes, "
                f"{dims.open_area_ratio * 100:.0f}% open area"
            )
            plate = create_hex_grille(plate, dims.hex_points, dims.hole_width, dims.plate_thickness)
        else:
            plate = create_opening(plate, dims.opening_diameter, dims.plate_thickness)

        transition = create_transition(
            dims.transition_bottom_radii,
            dims.transition_top_radii,
            dims.transition_height,
            z_offset=dims.plate_thickness,
        )
        sleeve = create_sleeve(
            dims.sleeve_inner_diameter,
            dims.sleeve_outer_diameter,
            dims.sleeve_length,
            z_offset=dims.plate_thickness + dims.transition_height,
        )

        return plate + transition + sleeve
