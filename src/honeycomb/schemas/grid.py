from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from honeycomb.domain.grid import HexGrid
from honeycomb.utils.hex_math import HexCoord


class HexCoordRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    q: int = Field(..., description="Axial coordinate q")
    r: int = Field(..., description="Axial coordinate r")

    def to_coord(self) -> HexCoord:
        return HexCoord(q=self.q, r=self.r)


class PointRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    x: float = Field(..., description="World-space x")
    y: float = Field(..., description="World-space y")


class GridRead(BaseModel):
    radius: int = Field(..., ge=0, description="Grid radius")
    cell_count: int = Field(..., ge=1, description="Number of cells (3n^2 + 3n + 1)")
    cells: list[HexCoordRead] = Field(
        default_factory=list, description="Cells in drawing order (q-major, r-ascending)"
    )

    @classmethod
    def from_grid(cls, grid: HexGrid) -> "GridRead":
        return cls(
            radius=grid.radius,
            cell_count=len(grid),
            cells=[HexCoordRead.model_validate(cell) for cell in grid],
        )


class PathRead(BaseModel):
    found: bool = Field(..., description="Whether a route exists")
    cells: list[HexCoordRead] = Field(
        default_factory=list, description="Route from start to goal, both inclusive"
    )
    points: list[PointRead] = Field(
        default_factory=list, description="World-space centres of the route cells"
    )
    steps: int = Field(default=0, ge=0, description="Number of moves (cells - 1)")
    total_cost: float | None = Field(
        None, description="Total movement cost, when computed with a cost function"
    )

    @classmethod
    def from_path(
        cls, path: Sequence[HexCoord] | None, total_cost: float | None = None
    ) -> "PathRead":
        if path is None:
            return cls(found=False)
        return cls(
            found=True,
            cells=[HexCoordRead.model_validate(cell) for cell in path],
            points=[PointRead.model_validate(cell.to_point()) for cell in path],
            steps=max(len(path) - 1, 0),
            total_cost=total_cost,
        )
