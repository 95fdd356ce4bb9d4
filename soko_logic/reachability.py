import numpy as np

from .grid import TileGrid, neighbors4


def reachable_mask(grid: TileGrid) -> np.ndarray:
    """Cells connected to the player's start through non-wall cells.

    Boxes are ignored: the mask describes the floor, not where the player can
    go right now. Returns a bool array of shape (height, width) indexed [y, x].
    Iterative DFS, every cell is visited at most once.
    """
    visited = np.zeros((grid.height, grid.width), dtype=bool)
    start = grid.player_pos()
    visited[start[1], start[0]] = True
    stack = [start]

    while stack:
        cur = stack.pop()
        for nx, ny in neighbors4(cur):
            # is_wall is True outside the grid
            if grid.is_wall(nx, ny) or visited[ny, nx]:
                continue
            visited[ny, nx] = True
            stack.append((nx, ny))
    return visited
