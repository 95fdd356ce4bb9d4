from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

ARENA_WIDTH = 20
ARENA_HEIGHT = 16
CELL_SIZE = 16.0
MOVE_SPEED = 48.0  # world units per second


@dataclass(frozen=True)
class GameConfig:
    """Settings read from configs/game.yaml.

    arena_*: the fixed space every level is centered into (in cells).
    cell_size: world units per cell, used by the motion integrator.
    move_speed: world units per second.
    """

    arena_width: int = ARENA_WIDTH
    arena_height: int = ARENA_HEIGHT
    cell_size: float = CELL_SIZE
    move_speed: float = MOVE_SPEED
    levels_root: str = "soko_logic/levels"
    level_sources: List[str] = field(default_factory=lambda: ["examples"])
    min_boxes: Optional[int] = None
    max_boxes: Optional[int] = None


def config_from_dict(cfg: Dict[str, Any]) -> GameConfig:
    arena = cfg.get("arena") or {}
    motion = cfg.get("motion") or {}
    levels = cfg.get("levels") or {}
    flt = cfg.get("filters") or {}
    defaults = GameConfig()
    return GameConfig(
        arena_width=int(arena.get("width", defaults.arena_width)),
        arena_height=int(arena.get("height", defaults.arena_height)),
        cell_size=float(arena.get("cell_size", defaults.cell_size)),
        move_speed=float(motion.get("speed", defaults.move_speed)),
        levels_root=levels.get("root_dir", defaults.levels_root),
        level_sources=list(levels.get("sources") or defaults.level_sources),
        min_boxes=flt.get("min_boxes"),
        max_boxes=flt.get("max_boxes"),
    )


def load_config(path: str) -> GameConfig:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return config_from_dict(cfg)
