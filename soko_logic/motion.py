from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import CELL_SIZE
from .grid import Cell
from .movement import Direction

MovingTo = Tuple[Cell, Direction]


@dataclass
class Actor:
    """Something that walks on the grid: the player or a box.

    cell is the authoritative grid position, updated as soon as a move is
    accepted. position is the interpolated world position (cell * cell_size)
    and lags behind while moving_to is set.
    """

    cell: Cell
    position: Tuple[float, float] = (0.0, 0.0)
    moving_to: Optional[MovingTo] = None
    facing: Direction = Direction.DOWN

    @classmethod
    def at(cls, cell: Cell, cell_size: float = CELL_SIZE) -> "Actor":
        return cls(cell=cell, position=(cell[0] * cell_size, cell[1] * cell_size))

    @property
    def in_flight(self) -> bool:
        return self.moving_to is not None

    def start_move(self, dest: Cell, direction: Direction) -> bool:
        """Begin a one-cell move; refused while another move is in flight."""
        if self.moving_to is not None:
            return False
        self.cell = dest
        self.moving_to = (dest, direction)
        return True

    def advance(self, dt: float, speed: float, cell_size: float = CELL_SIZE) -> bool:
        """Integrate motion over dt seconds. Returns True when the move finished.

        The position snaps to the exact target once it reaches or passes it.
        """
        if self.moving_to is None:
            return False
        (tx, ty), direction = self.moving_to
        target = (tx * cell_size, ty * cell_size)
        vx, vy = direction.to_velocity(speed * dt)
        x, y = self.position[0] + vx, self.position[1] + vy

        if direction is Direction.UP:
            done = y >= target[1]
        elif direction is Direction.DOWN:
            done = y <= target[1]
        elif direction is Direction.LEFT:
            done = x <= target[0]
        else:
            done = x >= target[0]

        if done:
            self.position = target
            self.moving_to = None
        else:
            self.position = (x, y)
        return done
