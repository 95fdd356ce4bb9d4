"""Decorative floor variants derived from the shape of the reachable floor.

Every interior cell gets a 3x3 window of the reachable mask:

    (mask[y-1, x-1], mask[y-1, x], mask[y-1, x+1],
     mask[y,   x-1], mask[y,   x], mask[y,   x+1],
     mask[y+1, x-1], mask[y+1, x], mask[y+1, x+1])

The first rule in VARIANT_RULES whose pattern matches decides the variant.
None in a pattern is a wildcard. The numbers are sprite indices of the
ground atlas, 0 means "no ground sprite".
"""
from __future__ import annotations
from typing import List, Optional, Tuple

import numpy as np

from .grid import TileGrid
from .reachability import reachable_mask

Window = Tuple[bool, bool, bool, bool, bool, bool, bool, bool, bool]
Pattern = Tuple[Optional[bool], ...]

NO_VARIANT = 0
FLOOR_VARIANT = 9

T, F, _ = True, False, None

VARIANT_RULES: List[Tuple[Pattern, int]] = [
    # corners
    ((_, T, T, F, T, T, _, F, _), 1),   # large ┏
    ((_, T, F, F, T, T, _, F, _), 16),  # tight ┏
    ((T, T, _, T, T, F, _, F, _), 2),   # large ┓
    ((F, T, _, T, T, F, _, F, _), 17),  # tight ┓
    ((_, F, _, F, T, T, _, T, T), 3),   # large ┗
    ((_, F, _, F, T, T, _, T, F), 18),  # tight ┗
    ((_, F, _, T, T, F, T, T, _), 4),   # large ┛
    ((_, F, _, T, T, F, F, T, _), 19),  # tight ┛
    # large borders
    ((_, T, T, F, T, T, _, T, T), 5),
    ((T, T, _, T, T, F, T, T, _), 6),
    ((T, T, T, T, T, T, _, F, _), 7),
    ((_, F, _, T, T, T, T, T, T), 8),
    # narrow corridors
    ((_, F, _, T, T, T, _, F, _), 14),
    ((_, T, _, F, T, F, _, T, _), 15),
    # dead ends
    ((_, T, _, F, T, F, _, F, _), 20),
    ((_, F, _, T, T, F, _, F, _), 21),
    ((_, F, _, F, T, F, _, T, _), 22),
    ((_, F, _, F, T, T, _, F, _), 23),
    # three-ways
    ((F, T, F, T, T, T, _, F, _), 24),
    ((F, T, _, T, T, F, F, T, _), 25),
    ((_, T, F, F, T, T, _, T, F), 26),
    ((_, F, _, T, T, T, F, T, F), 27),
    # tight cross
    ((F, T, F, T, T, T, F, T, F), 28),
    # irregular composites
    ((F, T, T, T, T, T, _, F, F), 29),
    ((T, T, F, T, T, T, F, F, _), 30),
    # floaters: center is not floor, only the y+1 row matters
    ((_, _, _, _, F, _, F, T, T), 10),
    ((_, _, _, _, F, _, T, T, F), 11),
    ((_, _, _, _, F, _, T, T, T), 12),
    ((_, _, _, _, F, _, F, T, F), 13),
    # catch-all floor
    ((_, _, _, _, T, _, _, _, _), FLOOR_VARIANT),
]

del T, F, _


def pattern_matches(pattern: Pattern, window: Window) -> bool:
    return all(p is None or p == w for p, w in zip(pattern, window))


def match_window(window: Window) -> int:
    for pattern, variant in VARIANT_RULES:
        if pattern_matches(pattern, window):
            return variant
    return NO_VARIANT


def window_at(mask: np.ndarray, x: int, y: int) -> Window:
    """3x3 window around an interior cell, row y-1 first."""
    block = mask[y - 1:y + 2, x - 1:x + 2]
    return tuple(bool(v) for v in block.ravel())  # type: ignore[return-value]


def classify(mask: np.ndarray) -> np.ndarray:
    """Variant grid for a reachable mask; the 1-cell border stays 0."""
    height, width = mask.shape
    result = np.zeros((height, width), dtype=np.int64)
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            result[y, x] = match_window(window_at(mask, x, y))
    return result


def ground_variants(grid: TileGrid) -> np.ndarray:
    return classify(reachable_mask(grid))
