"""Utility functions for the Honeycomb hex grid."""

from honeycomb.utils.hex_math import (
    HEX_DIRECTIONS,
    CartesianPoint,
    HexCoord,
    axial_to_cube,
    cube_round,
    cube_to_axial,
    hex_distance,
    hex_neighbors,
    hexes_in_range,
    point_to_fractional_cube,
)

__all__ = [
    "HEX_DIRECTIONS",
    "CartesianPoint",
    "HexCoord",
    "axial_to_cube",
    "cube_round",
    "cube_to_axial",
    "hex_distance",
    "hex_neighbors",
    "hexes_in_range",
    "point_to_fractional_cube",
]
