"""
Ventadapter IO - typed configuration models.

Example:
    >>> from ventadapter.io import adapter_from_dict, adapter_to_dict
    >>>
    >>> params = adapter_from_dict({"fan": {"size_mm": 120}, "pipe": {"diameter_mm": 100}})
    >>> params.fan.size_mm
    120.0
    >>> adapter_to_dict(params)["schema_version"]
    '1.0'
"""

from .loaders import (
    SCHEMA_VERSION,
    FanParams,
    GrilleParams,
    PipeParams,
    PlateParams,
    AdapterParams,
    adapter_from_dict,
    adapter_to_dict,
)

__all__ = [
    "SCHEMA_VERSION",
    "FanParams",
    "GrilleParams",
    "PipeParams",
    "PlateParams",
    "AdapterParams",
    "adapter_from_dict",
    "adapter_to_dict",
]
