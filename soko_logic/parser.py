from typing import List

from .config import ARENA_HEIGHT, ARENA_WIDTH
from .errors import MalformedLevel, NoPlayer
from .grid import TileGrid
from .tiles import CHAR_TO_KIND, CellKind


def _strip_trailing_blank(lines: List[str]) -> List[str]:
    end = len(lines)
    while end > 0 and lines[end - 1].strip() == "":
        end -= 1
    return lines[:end]


def parse_level_str(level_str: str, arena_width: int = ARENA_WIDTH,
                    arena_height: int = ARENA_HEIGHT) -> TileGrid:
    """Parses ASCII level into a TileGrid of arena size.

    Supported characters:
      '#': wall
      '.': goal
      '$': box
      '+': box on goal
      '@': player
      ' ' (space): empty
    Other characters are treated as empty but still take up a column.

    The map is centered: left margin (arena_width - W) // 2, top margin
    (arena_height - H) // 2. Trailing blank lines are ignored; leading ones
    count as rows of empty cells and push the map down.
    """
    lines = _strip_trailing_blank([line.rstrip("\r") for line in level_str.split("\n")])
    if not lines:
        raise MalformedLevel("Empty level")
    height = len(lines)
    width = max(len(line) for line in lines)
    if width > arena_width or height > arena_height:
        raise MalformedLevel(
            f"Level is {width}x{height}, arena is only {arena_width}x{arena_height}")

    left = (arena_width - width) // 2
    top = (arena_height - height) // 2

    rows = [[CellKind.EMPTY] * arena_width for _ in range(arena_height)]
    players = 0
    for r, line in enumerate(lines):
        for c, ch in enumerate(line):
            kind = CHAR_TO_KIND.get(ch, CellKind.EMPTY)
            if kind is CellKind.PLAYER:
                players += 1
            rows[top + r][left + c] = kind

    if players == 0:
        raise NoPlayer("No player '@' found in level")
    if players > 1:
        raise MalformedLevel(f"Level has {players} players, expected exactly one")

    return TileGrid(width=arena_width, height=arena_height,
                    rows=tuple(tuple(row) for row in rows))


def parse_level_file(path: str, arena_width: int = ARENA_WIDTH,
                     arena_height: int = ARENA_HEIGHT) -> TileGrid:
    with open(path, "r", encoding="utf-8") as f:
        return parse_level_str(f.read(), arena_width, arena_height)
