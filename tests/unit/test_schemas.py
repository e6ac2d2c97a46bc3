import pytest
from pydantic import ValidationError

from honeycomb.domain.grid import HexGrid
from honeycomb.schemas import GridRead, HexCoordRead, PathRead, PointRead
from honeycomb.utils.hex_math import CartesianPoint, HexCoord


def test_hex_coord_read_from_coord():
    read = HexCoordRead.model_validate(HexCoord(q=2, r=-1))
    assert read.q == 2
    assert read.r == -1
    assert read.to_coord() == HexCoord(q=2, r=-1)
    assert read.model_dump() == {"q": 2, "r": -1}


def test_point_read_from_point():
    read = PointRead.model_validate(CartesianPoint(1.5, -3.0))
    assert read.model_dump() == {"x": 1.5, "y": -3.0}


def test_grid_read():
    grid = HexGrid(1)
    read = GridRead.from_grid(grid)
    assert read.radius == 1
    assert read.cell_count == 7
    assert [cell.to_coord() for cell in read.cells] == list(grid)


def test_grid_read_rejects_negative_radius():
    with pytest.raises(ValidationError):
        GridRead(radius=-1, cell_count=1)


def test_path_read_not_found():
    read = PathRead.from_path(None)
    assert read.found is False
    assert read.cells == []
    assert read.steps == 0
    assert read.total_cost is None


def test_path_read_found():
    path = [HexCoord(q=0, r=0), HexCoord(q=1, r=0), HexCoord(q=1, r=1)]
    read = PathRead.from_path(path, total_cost=4.0)
    assert read.found is True
    assert read.steps == 2
    assert read.total_cost == 4.0
    assert [cell.to_coord() for cell in read.cells] == path
    assert read.points[1].x == pytest.approx(path[1].to_point().x)
    assert read.points[2].y == pytest.approx(-1.5)
    json_data = read.model_dump()
    assert json_data["cells"][0] == {"q": 0, "r": 0}


def test_path_read_single_cell():
    read = PathRead.from_path([HexCoord(q=3, r=-3)])
    assert read.found is True
    assert read.steps == 0
