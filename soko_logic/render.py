from typing import AbstractSet, Optional

import numpy as np

from .grid import Cell, TileGrid
from .tiles import TOK_BOX, TOK_BOX_IN_GOAL, TOK_EMPTY, TOK_GOAL, TOK_PLAYER, TOK_WALL


def render_ascii(grid: TileGrid, player: Optional[Cell] = None,
                 boxes: Optional[AbstractSet[Cell]] = None) -> str:
    """ASCII visualization, top row first.

    Static geometry comes from the grid; player and boxes default to the
    initial placement but can be the live positions of a PlayState.
    """
    if player is None:
        player = grid.player_pos()
    if boxes is None:
        boxes = set(grid.boxes_pos())
    out_lines = []
    for y in range(grid.height - 1, -1, -1):
        row_chars = []
        for x in range(grid.width):
            if grid.is_wall(x, y):
                row_chars.append(TOK_WALL)
                continue
            has_goal = grid.is_goal_cell(x, y)
            if (x, y) == player:
                row_chars.append(TOK_PLAYER)
            elif (x, y) in boxes:
                row_chars.append(TOK_BOX_IN_GOAL if has_goal else TOK_BOX)
            else:
                row_chars.append(TOK_GOAL if has_goal else TOK_EMPTY)
        out_lines.append(''.join(row_chars).rstrip())
    return "\n".join(out_lines)


def render_variants(variants: np.ndarray) -> str:
    """Hex dump of a variant grid, top row (highest y) first, '.' for 0."""
    out_lines = []
    for row in variants[::-1]:
        out_lines.append(' '.join(f"{int(v):2x}" if v else ' .' for v in row))
    return "\n".join(out_lines)
