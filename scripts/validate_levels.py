from __future__ import annotations
import argparse
from tqdm import tqdm

from soko_logic.config import load_config
from soko_logic.levels.io import iterate_level_strings, check_level


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default="configs/game.yaml")
    args = p.parse_args()

    cfg = load_config(args.config)

    ok = 0
    bad = 0
    refs = list(iterate_level_strings(cfg.levels_root, cfg.level_sources))
    for ref, s in tqdm(refs, desc="Checking levels", unit="level"):
        reason = check_level(s,
                             arena_w=cfg.arena_width,
                             arena_h=cfg.arena_height,
                             min_b=cfg.min_boxes,
                             max_b=cfg.max_boxes)
        if reason is None:
            ok += 1
        else:
            bad += 1
            tqdm.write(f"[skip] {ref.level_id}: {reason}")
    print(f"valid: {ok}, skipped: {bad}")

if __name__ == "__main__":
    main()
