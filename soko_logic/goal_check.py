from typing import Iterable

from .grid import Cell, TileGrid


def is_solved(grid: TileGrid, boxes: Iterable[Cell]) -> bool:
    """All boxes are on goals."""
    return all(grid.is_goal_cell(x, y) for x, y in boxes)
