"""
Ventadapter Calculator - hex tiling, derived dimensions, and validation.

Pure Python; no build123d dependency.

Example:
    >>> from ventadapter.calculator import tile, validate_adapter
    >>> from ventadapter.io import AdapterParams
    >>>
    >>> len(tile(width=3.6, radius=38.5)) > 0
    True
    >>> validate_adapter(AdapterParams()).valid
    True
"""

from .hex_grid import (
    Cube,
    Offset,
    Point,
    ORIGIN,
    DIRECTIONS,
    cube_add,
    cube_scale,
    neighbor,
    hex_distance,
    to_offset,
    to_planar,
    ring,
    spiral,
    estimate_ring_count,
    required_ring_count,
    tile,
)

from .dimensions import (
    AdapterDimensions,
    calculate_adapter_dimensions,
    grille_points,
    standard_hole_spacing,
    default_opening_diameter,
    grille_radius,
    hole_width,
    open_area_ratio,
    screw_positions,
    sleeve_diameters,
    transition_height,
)

from .validation import (
    Severity,
    ValidationMessage,
    ValidationResult,
    validate_adapter,
)

__all__ = [
    # Hex tiling
    "Cube",
    "Offset",
    "Point",
    "ORIGIN",
    "DIRECTIONS",
    "cube_add",
    "cube_scale",
    "neighbor",
    "hex_distance",
    "to_offset",
    "to_planar",
    "ring",
    "spiral",
    "estimate_ring_count",
    "required_ring_count",
    "tile",

    # Dimensions
    "AdapterDimensions",
    "calculate_adapter_dimensions",
    "grille_points",
    "standard_hole_spacing",
    "default_opening_diameter",
    "grille_radius",
    "hole_width",
    "open_area_ratio",
    "screw_positions",
    "sleeve_diameters",
    "transition_height",

    # Validation
    "Severity",
    "ValidationMessage",
    "ValidationResult",
    "validate_adapter",
]
