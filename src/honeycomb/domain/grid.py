"""Bounded hexagonal grid.

A :class:`HexGrid` is a hexagon of cells centred on the origin. It owns the
grid structure only (membership, point location and bounded neighbours);
per-cell data lives in a separate caller-owned mapping.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

from honeycomb.config import Settings, get_settings
from honeycomb.utils.hex_math import (
    CartesianPoint,
    HexCoord,
    cube_round,
    hex_distance,
    hexes_in_range,
    point_to_fractional_cube,
)


class HexGrid:
    """An immutable hexagon of radius ``radius`` centred at the origin.

    Cells are enumerated q-major, r-ascending, which is the order renderers
    draw them in. Membership tests are O(1).

    Example:
        >>> grid = HexGrid(1)
        >>> len(grid)
        7
        >>> HexCoord(q=1, r=-1) in grid
        True
    """

    __slots__ = ("_cells", "_members", "_radius")

    def __init__(self, radius: int) -> None:
        """Build the grid.

        Args:
            radius: Non-negative grid radius

        Raises:
            ValueError: If radius is negative
        """
        if radius < 0:
            msg = f"Grid radius must be non-negative, got {radius}"
            raise ValueError(msg)

        self._radius = radius
        self._cells: tuple[HexCoord, ...] = tuple(hexes_in_range(HexCoord.origin(), radius))
        self._members: frozenset[HexCoord] = frozenset(self._cells)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> HexGrid:
        """Build a grid using the configured radius."""
        if settings is None:
            settings = get_settings()
        return cls(settings.grid_radius)

    @property
    def radius(self) -> int:
        return self._radius

    @property
    def cells(self) -> tuple[HexCoord, ...]:
        return self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[HexCoord]:
        return iter(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._members

    def __repr__(self) -> str:
        return f"HexGrid(radius={self._radius})"

    def contains(self, cell: HexCoord) -> bool:
        """Return True if ``cell`` is a member of this grid."""
        return cell in self._members

    def in_bounds(self, cell: HexCoord) -> bool:
        """Return True if ``cell`` lies within ``radius`` steps of the origin."""
        return hex_distance(cell, HexCoord.origin()) <= self._radius

    def point_to_cell(self, point: CartesianPoint) -> HexCoord | None:
        """Return the cell containing ``point``.

        The point is converted to fractional cube coordinates and rounded to
        the nearest hex. No nearby substitute is searched for.

        Args:
            point: A point in world space

        Returns:
            The containing cell, or None if it lies outside the grid (including
            points with infinite or NaN coordinates)
        """
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            return None

        cell = cube_round(*point_to_fractional_cube(point))
        if cell in self._members:
            return cell
        return None

    def neighbors_of(self, cell: HexCoord) -> list[HexCoord]:
        """Return the in-bounds neighbours of ``cell`` in direction order.

        Cells on the rim get fewer than 6 results. ``cell`` itself does not
        need to be a member of the grid.
        """
        return [neighbor for neighbor in cell.neighbors() if self.in_bounds(neighbor)]
