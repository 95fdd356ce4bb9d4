from __future__ import annotations
import argparse

from soko_logic.config import load_config
from soko_logic.levels.resolve import load_level_text
from soko_logic.levels.io import dims
from soko_logic.parser import parse_level_str
from soko_logic.render import render_ascii, render_variants
from soko_logic.variants import ground_variants

LVL = """
#######
#     #
# @   #
#  $  #
#   . #
#     #
#######
"""


def main():
    p = argparse.ArgumentParser(description="Print a level and its ground variant grid")
    p.add_argument("--config", type=str, default="configs/game.yaml")
    p.add_argument("--level", type=str, default="inline", help="path/to/file.txt#idx or 'inline'")
    args = p.parse_args()

    cfg = load_config(args.config)
    text = LVL if args.level == "inline" else load_level_text(args.level)

    w, h = dims(text)
    print(f"{w}x{h}")
    grid = parse_level_str(text, cfg.arena_width, cfg.arena_height)
    print(render_ascii(grid))
    print()
    print(render_variants(ground_variants(grid)))
    print(f"boxes: {len(grid.boxes_pos())}, goals: {len(grid.goals_pos())}, player: {grid.player_pos()}")


if __name__ == "__main__":
    main()
