"""
Hexagonal coordinate system mathematics for Honeycomb.

This module implements the hex coordinate operations used by the grid and
the pathfinding layer. It supports:
- Distance calculations between hexes
- Finding adjacent hexes
- Finding all hexes within a range
- Converting hexes to and from continuous 2D points

Coordinate Systems:
-------------------
We use two coordinate systems:

1. Axial Coordinates (q, r) - for storage and representation
   - q: column coordinate
   - r: row coordinate
   - Compact: only 2 values needed
   - Used in HexCoord dataclass

2. Cube Coordinates (q, r, s) - for rounding and distance calculations
   - three coordinates with constraint q + r + s = 0
   - s is never stored, it is always derived as s = -q - r

Layout:
-------
Hexes are laid out pointy-top with unit size. The centre of (q, r) sits at:

    x = sqrt(3) * (r / 2 + q)
    y = -1.5 * r

so increasing r moves "down" the y axis. ``cube_round`` together with
``point_to_fractional_cube`` is the exact inverse of this mapping.

References:
-----------
Based on the excellent guide at: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

import math
from dataclasses import dataclass

SQRT3 = math.sqrt(3.0)
COS30 = SQRT3 / 2.0


@dataclass(frozen=True, slots=True)
class CartesianPoint:
    """A point in continuous 2D space.

    Plain value type with vector addition and subtraction; it carries no grid
    semantics of its own.

    Example:
        >>> CartesianPoint(1.0, 2.0) + CartesianPoint(0.5, -1.0)
        CartesianPoint(x=1.5, y=1.0)
    """

    x: float
    y: float

    def __add__(self, other: CartesianPoint) -> CartesianPoint:
        return CartesianPoint(self.x + other.x, self.y + other.y)

    def __sub__(self, other: CartesianPoint) -> CartesianPoint:
        return CartesianPoint(self.x - other.x, self.y - other.y)


@dataclass(frozen=True, slots=True)
class HexCoord:
    """
    A hexagonal coordinate using axial coordinate system.

    Attributes:
        q: Column coordinate (horizontal axis)
        r: Row coordinate (diagonal axis)

    The implicit third cube coordinate is available as ``s``. Instances are
    immutable and hash by ``(q, r)`` so they can be used as dict keys for
    per-cell attribute maps.

    Example:
        >>> origin = HexCoord(q=0, r=0)
        >>> neighbor = HexCoord(q=1, r=0)
        >>> origin.distance(neighbor)
        1
    """

    q: int
    r: int

    def __hash__(self) -> int:
        """Make HexCoord hashable for use in sets and dicts."""
        return hash((self.q, self.r))

    def __add__(self, other: HexCoord) -> HexCoord:
        return HexCoord(q=self.q + other.q, r=self.r + other.r)

    def __sub__(self, other: HexCoord) -> HexCoord:
        return HexCoord(q=self.q - other.q, r=self.r - other.r)

    @classmethod
    def origin(cls) -> HexCoord:
        """Return the (0, 0) hex."""
        return cls(q=0, r=0)

    @property
    def s(self) -> int:
        """Third cube coordinate, always ``-q - r``."""
        return -self.q - self.r

    def neighbors(self) -> list[HexCoord]:
        """Return the 6 adjacent hexes in the fixed direction order."""
        return [self + direction for direction in HEX_DIRECTIONS]

    def distance(self, other: HexCoord) -> int:
        """Return the number of hex steps between this hex and ``other``."""
        return hex_distance(self, other)

    def to_point(self) -> CartesianPoint:
        """
        Return the centre of this hex in world space (pointy-top, unit size).

        Example:
            >>> HexCoord(q=1, r=-2).to_point()
            CartesianPoint(x=0.0, y=3.0)
        """
        x = SQRT3 * (self.r / 2.0 + self.q)
        y = -1.5 * self.r
        return CartesianPoint(x, y)

    def vertex_locations(self) -> list[CartesianPoint]:
        """
        Return the 6 corners of this hex, clockwise starting from the top.

        Useful for renderers drawing the hex outline.
        """
        center = self.to_point()
        x, y = center.x, center.y
        return [
            CartesianPoint(x, y + 1.0),
            CartesianPoint(x + COS30, y + 0.5),
            CartesianPoint(x + COS30, y - 0.5),
            CartesianPoint(x, y - 1.0),
            CartesianPoint(x - COS30, y - 0.5),
            CartesianPoint(x - COS30, y + 0.5),
        ]


# Direction vectors for the 6 neighbors in axial coordinates.
# The order is the tie-break order for every search in the package.
HEX_DIRECTIONS: tuple[HexCoord, ...] = (
    HexCoord(q=1, r=0),  # East
    HexCoord(q=1, r=-1),  # Northeast
    HexCoord(q=0, r=-1),  # Northwest
    HexCoord(q=-1, r=0),  # West
    HexCoord(q=-1, r=1),  # Southwest
    HexCoord(q=0, r=1),  # Southeast
)


def axial_to_cube(coord: HexCoord) -> tuple[int, int, int]:
    """
    Convert axial coordinates (q, r) to cube coordinates (q, r, s).

    Args:
        coord: A hex coordinate in axial system

    Returns:
        A tuple (q, r, s) with q + r + s == 0

    Example:
        >>> axial_to_cube(HexCoord(q=1, r=2))
        (1, 2, -3)
    """
    return coord.q, coord.r, coord.s


def cube_to_axial(q: int, r: int, s: int) -> HexCoord:  # noqa: ARG001
    """
    Convert cube coordinates back to axial coordinates.

    The s parameter is accepted for symmetry with :func:`axial_to_cube` but
    is redundant (s = -q - r).

    Example:
        >>> cube_to_axial(1, 2, -3)
        HexCoord(q=1, r=2)
    """
    return HexCoord(q=q, r=r)


def hex_distance(a: HexCoord, b: HexCoord) -> int:
    """
    Calculate the distance between two hexes.

    The distance is the minimum number of hex steps to move from hex a to hex b:
        distance = (|dq| + |dr| + |dq + dr|) / 2

    The sum is always even, so the integer division is exact.

    Args:
        a: First hex coordinate
        b: Second hex coordinate

    Returns:
        The distance between the two hexes (non-negative integer)

    Example:
        >>> hex_distance(HexCoord(q=0, r=0), HexCoord(q=2, r=1))
        3
    """
    dq = a.q - b.q
    dr = a.r - b.r
    return (abs(dq) + abs(dr) + abs(dq + dr)) // 2


def hex_neighbors(coord: HexCoord) -> list[HexCoord]:
    """
    Find all 6 adjacent hexes to the given hex.

    Args:
        coord: The center hex coordinate

    Returns:
        A list of 6 HexCoord objects in direction order
        (East, Northeast, Northwest, West, Southwest, Southeast)
    """
    return coord.neighbors()


def hexes_in_range(center: HexCoord, n: int) -> list[HexCoord]:
    """
    Find all hexes within range n of the center hex (inclusive).

    This returns all hexes where distance(center, hex) <= n, ordered by
    ascending q offset and then ascending r offset.
    The number of hexes follows the formula: 3n^2 + 3n + 1

    Args:
        center: The center hex coordinate
        n: The maximum distance (range)

    Returns:
        A list of HexCoord objects within the range

    Raises:
        ValueError: If n is negative

    Example:
        >>> len(hexes_in_range(HexCoord(q=0, r=0), n=1))
        7
    """
    if n < 0:
        msg = f"Range n must be non-negative, got {n}"
        raise ValueError(msg)

    hexes = []
    for dq in range(-n, n + 1):
        for dr in range(max(-n, -dq - n), min(n, -dq + n) + 1):
            hexes.append(HexCoord(q=center.q + dq, r=center.r + dr))
    return hexes


def point_to_fractional_cube(point: CartesianPoint) -> tuple[float, float, float]:
    """
    Invert :meth:`HexCoord.to_point` into fractional cube coordinates.

    Args:
        point: A point in world space

    Returns:
        A tuple (frac_q, frac_r, frac_s) summing to zero (up to float error)
    """
    frac_q = SQRT3 / 3.0 * point.x + point.y / 3.0
    frac_r = -2.0 / 3.0 * point.y
    frac_s = -frac_q - frac_r
    return frac_q, frac_r, frac_s


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def cube_round(frac_q: float, frac_r: float, frac_s: float) -> HexCoord:
    """
    Round fractional cube coordinates to the nearest hex.

    Each component is rounded to the nearest integer (halves away from zero).
    If the rounded values do not sum to zero, the component with the largest
    rounding error is recomputed from the other two. When two errors are
    equal, q is corrected before r, and r before s.

    Args:
        frac_q: Fractional q
        frac_r: Fractional r
        frac_s: Fractional s

    Returns:
        The nearest HexCoord

    Example:
        >>> cube_round(0.9, -0.4, -0.5)
        HexCoord(q=1, r=0)
    """
    q = _round_half_away(frac_q)
    r = _round_half_away(frac_r)
    s = _round_half_away(frac_s)

    if q + r + s != 0:
        dq = abs(q - frac_q)
        dr = abs(r - frac_r)
        ds = abs(s - frac_s)

        if dq >= dr and dq >= ds:
            q = -r - s
        elif dr >= ds:
            r = -q - s

    return HexCoord(q=q, r=r)
