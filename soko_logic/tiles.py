from enum import Enum
from typing import Dict

TOK_EMPTY = " "
TOK_WALL = "#"
TOK_GOAL = "."
TOK_BOX = "$"
TOK_PLAYER = "@"
TOK_BOX_IN_GOAL = "+"


class CellKind(Enum):
    EMPTY = "empty"
    WALL = "wall"
    PLAYER = "player"
    BOX = "box"
    GOAL = "goal"
    BOX_IN_GOAL = "box_in_goal"

    @property
    def has_box(self) -> bool:
        return self in (CellKind.BOX, CellKind.BOX_IN_GOAL)

    @property
    def has_goal(self) -> bool:
        return self in (CellKind.GOAL, CellKind.BOX_IN_GOAL)


CHAR_TO_KIND: Dict[str, CellKind] = {
    TOK_EMPTY: CellKind.EMPTY,
    TOK_WALL: CellKind.WALL,
    TOK_GOAL: CellKind.GOAL,
    TOK_BOX: CellKind.BOX,
    TOK_PLAYER: CellKind.PLAYER,
    TOK_BOX_IN_GOAL: CellKind.BOX_IN_GOAL,
}

KIND_TO_CHAR: Dict[CellKind, str] = {kind: ch for ch, kind in CHAR_TO_KIND.items()}
