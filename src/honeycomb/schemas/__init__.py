from .grid import GridRead, HexCoordRead, PathRead, PointRead

__all__ = [
    "GridRead",
    "HexCoordRead",
    "PathRead",
    "PointRead",
]
