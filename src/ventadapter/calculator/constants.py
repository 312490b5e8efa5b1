"""
Design constants for vent adapter calculations.

This module centralizes all numerical constants used by the dimension
calculator and validation modules. Each constant is documented with its
source (fan form-factor convention or FDM printing practice).

MODIFICATION GUIDELINES:
- Fan form-factor constants follow manufacturer datasheets; don't adjust
- Printing practice constants may be tuned for a given printer/nozzle
- Always include units in constant names (_MM, _DEG, _PERCENT)
"""

from typing import Dict

# =============================================================================
# Fan form factors
# =============================================================================

# Screw hole spacing (centre to centre, along one side) by fan frame size
# Values from common axial fan datasheets (40-140mm frames)
FAN_HOLE_SPACING_MM: Dict[int, float] = {
    40: 32.0,
    50: 40.0,
    60: 50.0,
    70: 60.0,
    80: 71.5,
    92: 82.5,
    120: 105.0,
    140: 124.5,
}

# Opening diameter = frame size minus this rim (80mm fan -> 77mm opening)
FAN_OPENING_RIM_MM: float = 3.0

# Clearance hole for the M4 / #6 self-tapping fan screws
SCREW_HOLE_DIAMETER_DEFAULT_MM: float = 4.4

# Space a screw head plus driver tip needs above the plate
SCREW_HEAD_CLEARANCE_DIAMETER_MM: float = 8.0

DEFAULT_FAN_SIZE_MM: float = 80.0
PLATE_CORNER_RADIUS_DEFAULT_MM: float = 4.0

# =============================================================================
# Vent grille
# =============================================================================

# Hexagonal cell pitch and web between neighbouring holes
HEX_CELL_WIDTH_DEFAULT_MM: float = 3.6
HEX_WEB_WIDTH_DEFAULT_MM: float = 0.8

# Below this fraction of the opening the grille chokes airflow
OPEN_AREA_WARNING_PERCENT: float = 40.0

# =============================================================================
# FDM printing practice
# =============================================================================

# Two perimeters of a 0.4mm nozzle
MIN_PRINTABLE_WALL_MM: float = 0.8

# Steepest overhang (from vertical) printable without supports
MAX_SUPPORT_FREE_OVERHANG_DEG: float = 45.0

PLATE_THICKNESS_DEFAULT_MM: float = 3.0
WALL_THICKNESS_DEFAULT_MM: float = 1.2

# Transition never gets shorter than this, even between equal diameters
TRANSITION_MIN_HEIGHT_MM: float = 5.0

# =============================================================================
# Pipe
# =============================================================================

PIPE_DIAMETER_DEFAULT_MM: float = 75.0
SLEEVE_LENGTH_DEFAULT_MM: float = 20.0

# Radial play between sleeve and pipe
PIPE_FIT_CLEARANCE_MM: float = 0.3
