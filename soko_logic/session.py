from __future__ import annotations
from typing import Dict, FrozenSet, Iterable, List, Optional

from .config import GameConfig
from .goal_check import is_solved
from .grid import Cell, TileGrid
from .motion import Actor
from .movement import Direction, MoveResult, resolve_move
from .parser import parse_level_str

HELD_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class PlayState:
    """Live simulation of one level: the grid plus where the player and boxes are.

    All mutation goes through request()/request_held() and tick(); a request is
    ignored while the player (or the box it would push) is still moving.
    """

    def __init__(self, grid: TileGrid, config: Optional[GameConfig] = None) -> None:
        self.grid = grid
        self.config = config or GameConfig()
        size = self.config.cell_size
        self.player = Actor.at(grid.player_pos(), size)
        self._boxes: Dict[Cell, Actor] = {c: Actor.at(c, size) for c in grid.boxes_pos()}

    @classmethod
    def from_level_str(cls, level_str: str, config: Optional[GameConfig] = None) -> "PlayState":
        config = config or GameConfig()
        grid = parse_level_str(level_str, config.arena_width, config.arena_height)
        return cls(grid, config)

    # ---- read access
    @property
    def player_cell(self) -> Cell:
        return self.player.cell

    @property
    def box_cells(self) -> FrozenSet[Cell]:
        return frozenset(self._boxes)

    def box_actors(self) -> List[Actor]:
        return list(self._boxes.values())

    def actors(self) -> Iterable[Actor]:
        yield self.player
        yield from self._boxes.values()

    def is_idle(self) -> bool:
        return not any(a.in_flight for a in self.actors())

    def is_solved(self) -> bool:
        return is_solved(self.grid, self._boxes)

    # ---- movement
    def _resolve(self, direction: Direction) -> MoveResult:
        return resolve_move(self.player.cell, self.box_cells, direction, self.grid.is_wall)

    def _commit(self, result: MoveResult) -> Optional[MoveResult]:
        box: Optional[Actor] = None
        if result.box_from is not None:
            box = self._boxes[result.box_from]
            if box.in_flight:
                return None
        self.player.start_move(result.player, result.direction)
        self.player.facing = result.direction
        if box is not None and result.box_to is not None:
            del self._boxes[result.box_from]
            box.start_move(result.box_to, result.direction)
            self._boxes[result.box_to] = box
        return result

    def request(self, direction: Direction) -> Optional[MoveResult]:
        """One movement request.

        Returns None when ignored because something is still in flight,
        otherwise the resolver's result (accepted or rejected).
        """
        if self.player.in_flight:
            return None
        result = self._resolve(direction)
        if not result.accepted:
            return result
        return self._commit(result)

    def request_held(self, up: bool = False, down: bool = False,
                     left: bool = False, right: bool = False) -> Optional[MoveResult]:
        """Level-triggered input for one tick.

        Held directions are resolved in Up, Down, Left, Right order against the
        same state; the last accepted one wins. Returns the committed move or None.
        """
        if self.player.in_flight:
            return None
        held = dict(zip(HELD_ORDER, (up, down, left, right)))
        chosen: Optional[MoveResult] = None
        for direction in HELD_ORDER:
            if not held[direction]:
                continue
            result = self._resolve(direction)
            if result.accepted:
                chosen = result
        if chosen is None:
            return None
        return self._commit(chosen)

    def tick(self, dt: float) -> None:
        for actor in self.actors():
            actor.advance(dt, self.config.move_speed, self.config.cell_size)

    def settle(self, dt: float = 1.0 / 60.0, max_ticks: int = 10_000) -> int:
        """Tick until every motion has finished. Returns the number of ticks."""
        n = 0
        while not self.is_idle():
            if n >= max_ticks:
                raise RuntimeError("motion did not settle")
            self.tick(dt)
            n += 1
        return n
