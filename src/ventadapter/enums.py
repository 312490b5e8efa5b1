"""Type-safe enums for the vent adapter."""

from enum import Enum


class PipeFit(Enum):
    """How the sleeve mates with the pipe"""
    INSIDE = "inside"  # Sleeve pushes into the pipe (pipe diameter is its bore)
    OUTSIDE = "outside"  # Sleeve slips over the pipe (pipe diameter is its outside)
