"""
Hexagonal vent-hole tiling.

Lays out hexagonal cells inside a circular boundary using cube coordinates
(q + r + s = 0). Cells are visited in spiral order (centre first, then
rings of increasing radius), converted to planar centres through an
even-q offset form, and clipped to the disk.

These are pure calculation functions that don't depend on build123d geometry.

Example:
    >>> points = tile(width=3.6, radius=38.5)
    >>> points[0]
    (0.0, 0.0)
"""

import logging
import math
from typing import List, NamedTuple, Tuple

logger = logging.getLogger(__name__)

Point = Tuple[float, float]

SQRT3 = math.sqrt(3.0)


class _CubeFields(NamedTuple):
    q: int
    r: int
    s: int


class Cube(_CubeFields):
    """Cube coordinate of a hexagonal cell."""

    __slots__ = ()

    def __new__(cls, q: int, r: int, s: int):
        if q + r + s != 0:
            raise ValueError(f"Cube coordinate must sum to zero, got ({q}, {r}, {s})")
        return super().__new__(cls, q, r, s)


class Offset(NamedTuple):
    """Even-q offset coordinate (intermediate form for planar placement)."""
    col: int
    row: int


ORIGIN = Cube(0, 0, 0)

# Fixed direction order; ring() walks these in sequence
DIRECTIONS: Tuple[Cube, ...] = (
    Cube(1, -1, 0),
    Cube(1, 0, -1),
    Cube(0, 1, -1),
    Cube(-1, 1, 0),
    Cube(-1, 0, 1),
    Cube(0, -1, 1),
)

# Index of the direction the first cell of every ring lies in
RING_START_DIRECTION = 4


def cube_add(a: Cube, b: Cube) -> Cube:
    return Cube(a.q + b.q, a.r + b.r, a.s + b.s)


def cube_scale(cc: Cube, k: int) -> Cube:
    return Cube(cc.q * k, cc.r * k, cc.s * k)


def neighbor(cc: Cube, direction: int) -> Cube:
    """
    Adjacent cell in one of the six fixed directions.

    Args:
        cc: Cell to step from
        direction: Index into DIRECTIONS (0-5)

    Raises:
        IndexError: If direction is outside 0-5
    """
    if not 0 <= direction < len(DIRECTIONS):
        raise IndexError(f"Direction must be in 0-5, got {direction}")
    return cube_add(cc, DIRECTIONS[direction])


def hex_distance(a: Cube, b: Cube) -> int:
    """Number of cell steps between two cells."""
    return max(abs(a.q - b.q), abs(a.r - b.r), abs(a.s - b.s))


def to_offset(cc: Cube) -> Offset:
    """Convert cube to even-q offset: col = q, row = s + floor(q / 2)."""
    return Offset(cc.q, cc.s + math.floor(cc.q / 2))


def to_planar(cc: Cube, width: float) -> Point:
    """
    Convert a cell to the planar position of its centre.

    Cells are flat-topped and stacked in columns. ``width`` is the cell
    pitch: the flat-to-flat width of a cell, which is also the distance
    between the centres of two neighbouring cells.

    Args:
        cc: Cell to place
        width: Cell pitch in mm

    Returns:
        (x, y) in mm
    """
    col, row = to_offset(cc)
    x = col * width * SQRT3 / 2
    # Odd columns sit half a cell higher (Python % keeps this 0/1 for negative columns)
    y = (row + (col % 2) / 2) * width
    return (x, y)


def ring(center: Cube, radius: int) -> List[Cube]:
    """
    All cells at exactly ``radius`` steps from ``center``, in angular order.

    Starts ``radius`` steps out in RING_START_DIRECTION and walks the ring,
    turning to the next direction every ``radius`` steps.

    Returns:
        [center] for radius 0, an empty list for negative radius,
        otherwise exactly 6 * radius distinct cells
    """
    if radius < 0:
        return []
    if radius == 0:
        return [center]

    cells = []
    cell = cube_add(center, cube_scale(DIRECTIONS[RING_START_DIRECTION], radius))
    for direction in range(len(DIRECTIONS)):
        for _ in range(radius):
            cells.append(cell)
            cell = neighbor(cell, direction)
    return cells


def spiral(center: Cube, max_radius: int) -> List[Cube]:
    """Centre followed by rings 1..max_radius; 1 + 3N(N+1) cells."""
    cells = [center]
    for radius in range(1, max_radius + 1):
        cells.extend(ring(center, radius))
    return cells


def estimate_ring_count(width: float, radius: float) -> int:
    """
    Number of rings to generate so the spiral covers a disk of ``radius``.

    Overshoots: ring k never comes closer to the centre than
    k * width * sqrt(3) / 2, so the exact requirement is below
    1.155 * radius / width while this returns ceil(1.333 * radius / width).
    """
    if width <= 0 or radius <= 0:
        return 0
    return math.ceil(radius / (width * 1.5) * 2)


def _fit_limit(width: float, radius: float) -> float:
    # A cell of the given width centred closer than this stays off the boundary
    return radius - width / 2


def tile(width: float, radius: float) -> List[Point]:
    """
    Centres of hexagonal cells of pitch ``width`` that fit inside a disk.

    Args:
        width: Cell pitch in mm
        radius: Disk radius in mm

    Returns:
        Planar centres in spiral order (origin first). Empty for
        non-positive width or radius, or when no cell fits.
    """
    if width <= 0 or radius <= 0:
        return []

    limit = _fit_limit(width, radius)
    max_radius = estimate_ring_count(width, radius)

    points = []
    for cc in spiral(ORIGIN, max_radius):
        x, y = to_planar(cc, width)
        if math.hypot(x, y) < limit:
            points.append((x, y))

    logger.debug(
        f"Tiled {len(points)} cells (width={width}, radius={radius}, rings={max_radius})"
    )
    return points


def required_ring_count(width: float, radius: float) -> int:
    """
    Smallest ring count whose spiral contains every cell that fits the disk.

    Walks rings outward until one full ring lies beyond the fit limit; every
    further ring is farther still. Used to check estimate_ring_count().
    """
    if width <= 0 or radius <= 0:
        return 0

    limit = _fit_limit(width, radius)
    k = 1
    while min(math.hypot(*to_planar(cc, width)) for cc in ring(ORIGIN, k)) < limit:
        k += 1
    return k - 1
