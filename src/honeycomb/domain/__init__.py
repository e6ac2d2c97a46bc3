"""Domain layer for Honeycomb.

This package hosts the grid structure and the pure query functions that run
over it:

* :mod:`grid` - the bounded hexagonal grid (membership, point location,
  bounded neighbours).
* :mod:`pathfinding` - breadth-first and A* route searches over a grid and a
  caller-owned mapping of cell attributes.
"""

from . import grid, pathfinding

__all__ = [
    "grid",
    "pathfinding",
]
