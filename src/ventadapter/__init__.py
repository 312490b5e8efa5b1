"""
Ventadapter - Parametric 3D-printable fan-to-pipe vent adapter.

Example:
    >>> from ventadapter import AdapterParams, VentAdapterGeometry, tile
    >>>
    >>> # Vent hole layout on its own
    >>> points = tile(width=3.6, radius=38.5)
    >>>
    >>> # Complete adapter solid
    >>> part = VentAdapterGeometry(AdapterParams()).build()

Note: All imports are lazy-loaded for fast startup. The calculator can be
imported without triggering geometry (build123d) imports.
"""

__version__ = "1.0.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"PipeFit"}

_CALCULATOR = {
    "Cube",
    "neighbor",
    "hex_distance",
    "to_planar",
    "ring",
    "spiral",
    "estimate_ring_count",
    "tile",
    "AdapterDimensions",
    "calculate_adapter_dimensions",
    "validate_adapter",
    "Severity",
    "ValidationResult",
}

_IO = {
    "FanParams",
    "GrilleParams",
    "PipeParams",
    "PlateParams",
    "AdapterParams",
    "adapter_from_dict",
    "adapter_to_dict",
}

_CORE = {
    "VentAdapterGeometry",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    if name in _CORE:
        if "core" not in _modules:
            from . import core
            _modules["core"] = core
        return getattr(_modules["core"], name)

    raise AttributeError(f"module 'ventadapter' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Geometry (lazy loaded from core)
    "VentAdapterGeometry",

    # Enums (lazy loaded from enums)
    "PipeFit",

    # Calculator (lazy loaded from calculator)
    "Cube",
    "neighbor",
    "hex_distance",
    "to_planar",
    "ring",
    "spiral",
    "estimate_ring_count",
    "tile",
    "AdapterDimensions",
    "calculate_adapter_dimensions",
    "validate_adapter",
    "Severity",
    "ValidationResult",

    # Configuration (lazy loaded from io)
    "FanParams",
    "GrilleParams",
    "PipeParams",
    "PlateParams",
    "AdapterParams",
    "adapter_from_dict",
    "adapter_to_dict",
]
