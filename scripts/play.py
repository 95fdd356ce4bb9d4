from __future__ import annotations
import argparse
from typing import List

from soko_logic.config import load_config
from soko_logic.levels.resolve import load_level_text
from soko_logic.movement import Direction
from soko_logic.render import render_ascii
from soko_logic.session import PlayState

"""
Replay a move string on a level.

Usage:
  python -m scripts.play --level soko_logic/levels/examples/small.txt#1 --moves DD
"""


def parse_moves(moves: str) -> List[Direction]:
    return [Direction.from_key(ch) for ch in moves if not ch.isspace()]


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default="configs/game.yaml")
    p.add_argument("--level", type=str, required=True, help="path/to/file.txt#idx")
    p.add_argument("--moves", type=str, default="", help="e.g. UURDL")
    p.add_argument("--fps", type=float, default=60.0, help="tick rate used to animate each move")
    p.add_argument("--verbose", action="store_true", help="print the board after every move")
    args = p.parse_args()

    cfg = load_config(args.config)
    play = PlayState.from_level_str(load_level_text(args.level), cfg)

    accepted = 0
    ticks = 0
    for i, direction in enumerate(parse_moves(args.moves)):
        res = play.request(direction)
        if res is not None and res.accepted:
            accepted += 1
        outcome = res.outcome.value if res is not None else "ignored"
        ticks += play.settle(1.0 / args.fps)
        if args.verbose:
            print(f"\n-- move {i} {direction.name}: {outcome} --")
            print(render_ascii(play.grid, play.player_cell, play.box_cells))

    print(render_ascii(play.grid, play.player_cell, play.box_cells))
    print(f"accepted: {accepted}, ticks: {ticks}, solved: {play.is_solved()}")


if __name__ == "__main__":
    main()
