from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Callable, FrozenSet, Optional, Tuple

from .grid import Cell

WallFn = Callable[[int, int], bool]


class Direction(Enum):
    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    def step(self, cell: Cell, n: int = 1) -> Cell:
        dx, dy = self.value
        return (cell[0] + dx * n, cell[1] + dy * n)

    def to_velocity(self, scale: float) -> Tuple[float, float]:
        dx, dy = self.value
        return (dx * scale, dy * scale)

    @classmethod
    def from_key(cls, key: str) -> "Direction":
        """'U'/'D'/'L'/'R' (any case) or the full name."""
        k = key.strip().upper()
        for d in cls:
            if k == d.name or k == d.name[0]:
                return d
        raise ValueError(f"unknown direction: {key!r}")


class MoveOutcome(Enum):
    MOVED = "moved"
    PUSHED = "pushed"
    BLOCKED_WALL = "blocked_wall"
    BLOCKED_BOX = "blocked_box"

    @property
    def accepted(self) -> bool:
        return self in (MoveOutcome.MOVED, MoveOutcome.PUSHED)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of one movement request.

    On rejection player/boxes are the unchanged inputs and box_from/box_to are None.
    """

    outcome: MoveOutcome
    direction: Direction
    player: Cell
    boxes: FrozenSet[Cell]
    box_from: Optional[Cell] = None
    box_to: Optional[Cell] = None

    @property
    def accepted(self) -> bool:
        return self.outcome.accepted


def resolve_move(player: Cell, boxes: AbstractSet[Cell], direction: Direction,
                 is_wall: WallFn) -> MoveResult:
    """Decides a single step of the player, pushing at most one box.

    1) the target cell must not be a wall,
    2) a box on the target is pushed only if the cell behind it is neither
       a wall nor another box,
    3) after a push the player stands where the box was.
    """
    boxes = frozenset(boxes)
    target = direction.step(player)

    if is_wall(*target):
        return MoveResult(MoveOutcome.BLOCKED_WALL, direction, player, boxes)

    if target in boxes:
        beyond = direction.step(target)
        if is_wall(*beyond) or beyond in boxes:
            return MoveResult(MoveOutcome.BLOCKED_BOX, direction, player, boxes)
        new_boxes = (boxes - {target}) | {beyond}
        return MoveResult(MoveOutcome.PUSHED, direction, target, new_boxes,
                          box_from=target, box_to=beyond)

    return MoveResult(MoveOutcome.MOVED, direction, target, boxes)
