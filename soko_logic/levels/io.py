from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple, Optional
import os

from soko_logic.config import ARENA_HEIGHT, ARENA_WIDTH
from soko_logic.errors import MalformedLevel
from soko_logic.parser import parse_level_str
from soko_logic.tiles import TOK_BOX, TOK_BOX_IN_GOAL, TOK_GOAL

@dataclass
class LevelRef:
    path: str
    index: int  # index of the level inside the file (if there are multiple levels)

    @property
    def level_id(self) -> str:
        return f"{self.path}#{self.index}"


def split_on_blank_lines(text: str) -> List[str]:
    """Splits a level file into levels.

    Levels are separated by blank lines, so a level stored in a file cannot
    contain an interior blank line (parse_level_str alone does accept one).
    """
    blocks: List[str] = []
    cur: List[str] = []
    for line in text.splitlines():
        if line.strip() == "":
            if cur:
                blocks.append("\n".join(cur))
                cur = []
        else:
            cur.append(line)
    if cur:
        blocks.append("\n".join(cur))
    return blocks


def iterate_level_strings(root_dir: str, rel_dirs: List[str]) -> Iterator[Tuple[LevelRef, str]]:
    """Iterate over all .txt in the given subfolders and return (level reference, level string)."""
    for rel in rel_dirs:
        abs_dir = os.path.join(root_dir, rel)
        if not os.path.isdir(abs_dir):
            continue
        for fname in sorted(os.listdir(abs_dir)):
            if not fname.endswith(".txt"):
                continue
            fpath = os.path.join(abs_dir, fname)
            with open(fpath, "r", encoding="utf-8") as f:
                content = f.read()
            for i, block in enumerate(split_on_blank_lines(content)):
                yield LevelRef(path=fpath, index=i), block


def count_boxes(level_str: str) -> int:
    return sum(1 for ch in level_str if ch == TOK_BOX or ch == TOK_BOX_IN_GOAL)


def count_goals(level_str: str) -> int:
    return sum(1 for ch in level_str if ch == TOK_GOAL or ch == TOK_BOX_IN_GOAL)


def dims(level_str: str) -> Tuple[int, int]:
    lines = [ln for ln in level_str.splitlines() if ln.strip() != ""]
    h = len(lines)
    w = max((len(ln) for ln in lines), default=0)
    return w, h


def check_level(level_str: str, *, arena_w: int = ARENA_WIDTH, arena_h: int = ARENA_HEIGHT,
                min_b: Optional[int] = None, max_b: Optional[int] = None) -> Optional[str]:
    """Returns the reason the level is rejected, or None if it is usable."""
    b = count_boxes(level_str)
    if min_b is not None and b < min_b: return f"{b} boxes < {min_b}"
    if max_b is not None and b > max_b: return f"{b} boxes > {max_b}"
    if b != count_goals(level_str):
        return f"{b} boxes but {count_goals(level_str)} goals"
    try:
        parse_level_str(level_str, arena_w, arena_h)
    except MalformedLevel as e:
        return str(e)
    return None


def filter_level(level_str: str, *, arena_w: int = ARENA_WIDTH, arena_h: int = ARENA_HEIGHT,
                 min_b: Optional[int] = None, max_b: Optional[int] = None) -> bool:
    return check_level(level_str, arena_w=arena_w, arena_h=arena_h, min_b=min_b, max_b=max_b) is None
