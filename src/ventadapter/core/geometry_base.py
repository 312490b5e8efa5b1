"""
Base class for ventadapter geometry classes.

Provides build caching and the build summary log shared by geometry
generators.
"""

import logging

logger = logging.getLogger(__name__)


class BaseGeometry:
    """Base class providing build caching for geometry classes.

    Subclasses must:
    - Call super().__init__() (sets self._part = None)
    - Implement _build() -> Part
    - Set _part_name class attribute for log messages
    """

    _part_name: str = "part"

    def __init__(self):
        # Cache for built geometry
        self._part = None

    def _build(self):
        raise NotImplementedError

    def build(self):
        """Build the geometry (cached after the first call)."""
        if self._part is not None:
            return self._part

        self._part = self._build()
        logger.info(f"Built {self._part_name}: volume={self._part.volume:.2f} mm³")
        return self._part

    @property
    def part(self):
        """Built geometry (builds if not already built)."""
        return self.build()

    @property
    def volume(self) -> float:
        return self.part.volume
