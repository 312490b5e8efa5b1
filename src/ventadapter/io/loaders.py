"""
Typed configuration for the vent adapter.

Uses Pydantic for automatic validation and enum coercion. Models convert
to and from plain dicts (as parsed from JSON/TOML by the caller); nothing
here touches the filesystem.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..enums import PipeFit
from ..calculator.constants import (
    DEFAULT_FAN_SIZE_MM,
    SCREW_HOLE_DIAMETER_DEFAULT_MM,
    PLATE_CORNER_RADIUS_DEFAULT_MM,
    HEX_CELL_WIDTH_DEFAULT_MM,
    HEX_WEB_WIDTH_DEFAULT_MM,
    PLATE_THICKNESS_DEFAULT_MM,
    WALL_THICKNESS_DEFAULT_MM,
    MAX_SUPPORT_FREE_OVERHANG_DEG,
    PIPE_DIAMETER_DEFAULT_MM,
    SLEEVE_LENGTH_DEFAULT_MM,
    PIPE_FIT_CLEARANCE_MM,
)

SCHEMA_VERSION = "1.0"


class FanParams(BaseModel):
    """Fan frame the plate bolts to."""
    model_config = ConfigDict(extra='ignore')

    size_mm: float = Field(DEFAULT_FAN_SIZE_MM, gt=0)
    hole_spacing_mm: Optional[float] = Field(None, gt=0)  # Standard spacing for size_mm if None
    screw_hole_diameter_mm: float = Field(SCREW_HOLE_DIAMETER_DEFAULT_MM, gt=0)
    opening_diameter_mm: Optional[float] = Field(None, gt=0)  # size_mm - rim if None
    corner_radius_mm: float = Field(PLATE_CORNER_RADIUS_DEFAULT_MM, ge=0)


class GrilleParams(BaseModel):
    """Hexagonal vent grille across the fan opening."""
    model_config = ConfigDict(extra='ignore')

    enabled: bool = True
    cell_width_mm: float = Field(HEX_CELL_WIDTH_DEFAULT_MM, gt=0)  # Cell pitch
    web_width_mm: float = Field(HEX_WEB_WIDTH_DEFAULT_MM, ge=0)  # Material between holes


class PipeParams(BaseModel):
    """Round pipe the sleeve mates with."""
    model_config = ConfigDict(extra='ignore')

    diameter_mm: float = Field(PIPE_DIAMETER_DEFAULT_MM, gt=0)
    fit: PipeFit = PipeFit.INSIDE
    wall_thickness_mm: float = Field(WALL_THICKNESS_DEFAULT_MM, gt=0)
    sleeve_length_mm: float = Field(SLEEVE_LENGTH_DEFAULT_MM, gt=0)
    clearance_mm: float = Field(PIPE_FIT_CLEARANCE_MM, ge=0)

    @field_validator('fit', mode='before')
    @classmethod
    def coerce_fit(cls, v):
        if isinstance(v, str):
            return PipeFit(v.lower())
        return v


class PlateParams(BaseModel):
    """Mounting plate."""
    model_config = ConfigDict(extra='ignore')

    thickness_mm: float = Field(PLATE_THICKNESS_DEFAULT_MM, gt=0)


class AdapterParams(BaseModel):
    """Complete vent adapter configuration."""
    model_config = ConfigDict(extra='ignore')

    fan: FanParams = Field(default_factory=FanParams)
    grille: GrilleParams = Field(default_factory=GrilleParams)
    pipe: PipeParams = Field(default_factory=PipeParams)
    plate: PlateParams = Field(default_factory=PlateParams)
    transition_max_overhang_deg: float = Field(MAX_SUPPORT_FREE_OVERHANG_DEG, gt=0, lt=90)


def adapter_from_dict(data: Dict[str, Any]) -> AdapterParams:
    """
    Parse adapter configuration from a plain dict.

    Missing sections and fields take their defaults, so ``{}`` yields the
    stock 80mm fan adapter.

    Args:
        data: Parsed configuration; may be wrapped in an 'adapter' key

    Returns:
        AdapterParams

    Raises:
        pydantic.ValidationError: If a field has the wrong type or is out of range
    """
    if 'adapter' in data:
        data = data['adapter']
    return AdapterParams.model_validate(data)


def adapter_to_dict(params: AdapterParams) -> Dict[str, Any]:
    """Convert configuration to a JSON-compatible dict with schema version."""
    data = params.model_dump(mode='json', exclude_none=True)
    data['schema_version'] = SCHEMA_VERSION
    return data
