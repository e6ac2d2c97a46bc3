"""Hexagonal grid spatial index with breadth-first and A* pathfinding."""

from honeycomb.domain.grid import HexGrid
from honeycomb.domain.pathfinding import (
    CellAttributes,
    cheapest_path,
    path_cost,
    reconstruct_path,
    shortest_path,
)
from honeycomb.utils.hex_math import CartesianPoint, HexCoord, hex_distance

__all__ = [
    "CartesianPoint",
    "CellAttributes",
    "HexCoord",
    "HexGrid",
    "cheapest_path",
    "hex_distance",
    "path_cost",
    "reconstruct_path",
    "shortest_path",
]
