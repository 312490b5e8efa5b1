"""
Ventadapter Core - 3D geometry generation engine.

This module builds the adapter solid using build123d.

Example:
    >>> from ventadapter.core import VentAdapterGeometry
    >>> from ventadapter.io import adapter_from_dict
    >>>
    >>> params = adapter_from_dict({"fan": {"size_mm": 120}, "pipe": {"diameter_mm": 100}})
    >>> part = VentAdapterGeometry(params).build()
    >>> part.volume > 0
    True
"""

# Geometry classes require build123d - make import conditional
# This allows the calculator to be used where build123d isn't installed
try:
    from .adapter import VentAdapterGeometry
    from .features import (
        create_plate,
        create_screw_holes,
        create_hex_prism,
        create_hex_grille,
        create_opening,
        create_transition,
        create_sleeve,
    )

    __all__ = [
        "VentAdapterGeometry",
        "create_plate",
        "create_screw_holes",
        "create_hex_prism",
        "create_hex_grille",
        "create_opening",
        "create_transition",
        "create_sleeve",
    ]
except ImportError:
    __all__ = []
