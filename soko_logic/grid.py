from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .errors import NoPlayer, OutOfBounds
from .tiles import CellKind

__all__ = [
    "Cell",
    "TileGrid",
    "neighbors4",
]

Cell = Tuple[int, int]  # (x, y), y grows upwards


def neighbors4(cell: Cell) -> Iterable[Cell]:
    """4-neighborhood without diagonals; bounds are the caller's business."""
    x, y = cell
    yield (x, y + 1)
    yield (x, y - 1)
    yield (x - 1, y)
    yield (x + 1, y)


@dataclass(frozen=True, slots=True)
class TileGrid:
    """
    Immutable static geometry of a level.

    rows are stored top-to-bottom as they were parsed (rows[0] is the top line).
    Queries take world coordinates with the origin at the bottom-left:
    y = height - 1 - row. Moving "up" increases y.

    The grid is never mutated while playing; live player/box positions are
    kept by the caller (see session.PlayState).
    """

    width: int
    height: int
    rows: Tuple[Tuple[CellKind, ...], ...]


    # ---- coordinates
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height


    def row_of(self, y: int) -> int:
        return self.height - 1 - y


    def kind_at(self, x: int, y: int) -> CellKind:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return self.rows[self.row_of(y)][x]


    # ---- static queries
    def is_wall(self, x: int, y: int) -> bool:
        """Anything outside the grid counts as wall."""
        if not self.in_bounds(x, y):
            return True
        return self.rows[self.row_of(y)][x] is CellKind.WALL


    def is_goal_cell(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.kind_at(x, y).has_goal


    def cells(self) -> Iterable[Tuple[Cell, CellKind]]:
        """All cells in scan order: ascending y, then ascending x."""
        for y in range(self.height):
            row = self.rows[self.row_of(y)]
            for x in range(self.width):
                yield (x, y), row[x]


    # ---- initial entity placement
    def player_pos(self) -> Cell:
        for cell, kind in self.cells():
            if kind is CellKind.PLAYER:
                return cell
        raise NoPlayer("No player on map")


    def boxes_pos(self) -> List[Cell]:
        return [cell for cell, kind in self.cells() if kind.has_box]


    def goals_pos(self) -> List[Cell]:
        return [cell for cell, kind in self.cells() if kind.has_goal]
