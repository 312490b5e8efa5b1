"""
Vent Adapter - Validation Rules

Design checks based on:
- Fan form-factor conventions
- FDM printing constraints (minimum walls, support-free overhangs)
- Airflow through the vent grille

Each rule returns a list of ValidationMessage; validate_adapter() collects
them. Rules read the configuration directly so that a design whose
dimensions can't be derived still gets a full report.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, TYPE_CHECKING

from .constants import (
    FAN_HOLE_SPACING_MM,
    MIN_PRINTABLE_WALL_MM,
    MAX_SUPPORT_FREE_OVERHANG_DEG,
    OPEN_AREA_WARNING_PERCENT,
    SCREW_HEAD_CLEARANCE_DIAMETER_MM,
)
from .dimensions import (
    default_opening_diameter,
    grille_points,
    hole_width,
    open_area_ratio,
    sleeve_diameters,
    standard_hole_spacing,
)
from .hex_grid import Point, estimate_ring_count, required_ring_count

if TYPE_CHECKING:
    from ..io.loaders import AdapterParams

logger = logging.getLogger(__name__)


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


def validate_adapter(
    params: "AdapterParams",
    hex_points: Optional[List[Point]] = None
) -> ValidationResult:
    """
    Validate a vent adapter configuration.

    Args:
        params: Adapter configuration
        hex_points: Vent hole centres from grille_points(), if already computed

    Returns:
        ValidationResult with all findings; valid is False if any ERROR
    """
    messages = []
    messages.extend(_validate_fan(params))
    messages.extend(_validate_screw_holes(params))
    messages.extend(_validate_grille(params, hex_points))
    messages.extend(_validate_pipe(params))
    messages.extend(_validate_transition(params))

    result = ValidationResult(
        valid=not any(m.severity == Severity.ERROR for m in messages),
        messages=messages,
    )
    logger.debug(
        f"Validation: {len(result.errors)} errors, {len(result.warnings)} warnings, "
        f"{len(result.infos)} infos"
    )
    return result


def _opening_diameter(params: "AdapterParams") -> float:
    if params.fan.opening_diameter_mm is not None:
        return params.fan.opening_diameter_mm
    return default_opening_diameter(params.fan.size_mm)


def _hole_spacing(params: "AdapterParams") -> Optional[float]:
    if params.fan.hole_spacing_mm is not None:
        return params.fan.hole_spacing_mm
    return standard_hole_spacing(params.fan.size_mm)


def _validate_fan(params: "AdapterParams") -> List[ValidationMessage]:
    """Opening must fit the plate; the rounded corners can't exceed half the plate."""
    messages = []
    fan = params.fan
    opening = _opening_diameter(params)

    if opening >= fan.size_mm:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="OPENING_TOO_LARGE",
            message=f"Opening {opening:.1f}mm doesn't fit a {fan.size_mm:.0f}mm plate",
            suggestion="Reduce fan.opening_diameter_mm below the fan size"
        ))
    elif opening / 2 + params.pipe.wall_thickness_mm > fan.size_mm / 2:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="TRANSITION_EXCEEDS_PLATE",
            message="Transition wall overhangs the plate edge at the flats",
            suggestion="Reduce the opening or the wall thickness"
        ))

    if fan.corner_radius_mm * 2 >= fan.size_mm:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="CORNER_RADIUS_TOO_LARGE",
            message=f"Corner radius {fan.corner_radius_mm}mm is too large for a {fan.size_mm:.0f}mm plate",
        ))

    return messages


def _validate_screw_holes(params: "AdapterParams") -> List[ValidationMessage]:
    """Screw holes need a known spacing, must stay on the plate and clear of the opening."""
    messages = []
    fan = params.fan
    spacing = _hole_spacing(params)

    if spacing is None:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="HOLE_SPACING_UNKNOWN",
            message=f"No standard screw hole spacing for a {fan.size_mm}mm fan",
            suggestion=f"Set fan.hole_spacing_mm, or use one of {sorted(FAN_HOLE_SPACING_MM)}"
        ))
        return messages

    hole_radius = fan.screw_hole_diameter_mm / 2
    if spacing / 2 + hole_radius >= fan.size_mm / 2:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="SCREW_OFF_PLATE",
            message=f"Screw holes at {spacing}mm spacing break out of the plate edge",
        ))

    # Corner holes sit on the diagonal
    screw_distance = spacing / 2 * math.sqrt(2)
    opening_radius = _opening_diameter(params) / 2

    if screw_distance - hole_radius < opening_radius:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="SCREW_IN_OPENING",
            message="Screw holes cut into the fan opening",
            suggestion="Reduce fan.opening_diameter_mm"
        ))

    _, outer = sleeve_diameters(
        params.pipe.diameter_mm, params.pipe.fit,
        params.pipe.wall_thickness_mm, params.pipe.clearance_mm
    )
    widest = max(opening_radius + params.pipe.wall_thickness_mm, outer / 2)
    if widest > screw_distance - SCREW_HEAD_CLEARANCE_DIAMETER_MM / 2:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="SCREW_ACCESS_BLOCKED",
            message="Transition or sleeve overhangs the screw holes",
            suggestion="Fit the screws before mounting the pipe, or use a smaller pipe"
        ))

    return messages


def _validate_grille(
    params: "AdapterParams",
    hex_points: Optional[List[Point]] = None
) -> List[ValidationMessage]:
    """Vent holes must be printable and leave enough open area."""
    messages = []
    grille = params.grille
    if not grille.enabled:
        return messages

    if grille.web_width_mm < MIN_PRINTABLE_WALL_MM:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="WEB_TOO_THIN",
            message=f"Grille web {grille.web_width_mm}mm is below the printable {MIN_PRINTABLE_WALL_MM}mm",
            suggestion=f"Set grille.web_width_mm to at least {MIN_PRINTABLE_WALL_MM}"
        ))

    hole = hole_width(grille.cell_width_mm, grille.web_width_mm)
    if hole <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="HOLE_WIDTH_NONPOSITIVE",
            message=f"Cell width {grille.cell_width_mm}mm leaves no hole inside a {grille.web_width_mm}mm web",
            suggestion="Increase grille.cell_width_mm"
        ))
        return messages

    opening = _opening_diameter(params)
    radius = opening / 2
    points = hex_points if hex_points is not None else grille_points(params)

    if not points:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="GRILLE_EMPTY",
            message=f"No {grille.cell_width_mm}mm cell fits the {opening:.1f}mm opening; it will be closed",
            suggestion="Reduce grille.cell_width_mm or disable the grille"
        ))
        return messages

    ratio = open_area_ratio(len(points), hole, opening)
    if ratio * 100 < OPEN_AREA_WARNING_PERCENT:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="OPEN_AREA_LOW",
            message=f"Grille leaves only {ratio * 100:.0f}% of the opening open",
            suggestion="Use a thinner web or larger cells"
        ))

    estimated = estimate_ring_count(grille.cell_width_mm, radius)
    required = required_ring_count(grille.cell_width_mm, radius)
    messages.append(ValidationMessage(
        severity=Severity.INFO,
        code="RING_ESTIMATE",
        message=f"{len(points)} vent holes; generated {estimated} rings, {required} needed",
    ))

    return messages


def _validate_pipe(params: "AdapterParams") -> List[ValidationMessage]:
    """Sleeve walls must be printable and leave a bore."""
    messages = []
    pipe = params.pipe

    if pipe.wall_thickness_mm < MIN_PRINTABLE_WALL_MM:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="WALL_TOO_THIN",
            message=f"Wall {pipe.wall_thickness_mm}mm is below the printable {MIN_PRINTABLE_WALL_MM}mm",
            suggestion=f"Set pipe.wall_thickness_mm to at least {MIN_PRINTABLE_WALL_MM}"
        ))

    inner, outer = sleeve_diameters(
        pipe.diameter_mm, pipe.fit, pipe.wall_thickness_mm, pipe.clearance_mm
    )
    if inner <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="SLEEVE_NO_BORE",
            message=f"A {pipe.diameter_mm}mm pipe leaves no bore inside the sleeve",
        ))
    elif inner < _opening_diameter(params) / 2:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="PIPE_RESTRICTS_FLOW",
            message=f"Sleeve bore {inner:.1f}mm is under half the fan opening",
        ))

    return messages


def _validate_transition(params: "AdapterParams") -> List[ValidationMessage]:
    """The funnel should print without supports."""
    messages = []
    angle = params.transition_max_overhang_deg

    if angle > MAX_SUPPORT_FREE_OVERHANG_DEG:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="OVERHANG_STEEP",
            message=f"Transition overhang {angle}° exceeds {MAX_SUPPORT_FREE_OVERHANG_DEG}° and may need supports",
            suggestion=f"Set transition_max_overhang_deg to {MAX_SUPPORT_FREE_OVERHANG_DEG} or less"
        ))

    return messages
