"""Cellular automaton smoothing.

Each pass walks the grid x-major and rewrites cells in place, so later cells
in a pass already see the updates made earlier in the same pass. Border cells
are never touched.
"""
import logging

from .grid import Grid
from .tiles import FLOOR, WALL

logger = logging.getLogger(__name__)

_NEIGHBOURS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]


def wall_weight(grid: Grid, x: int, y: int) -> int:
    """Count wall units among the 8 neighbours; off-map counts as wall."""
    count = 0
    tiles = grid.tiles
    for dx, dy in _NEIGHBOURS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < grid.width and 0 <= ny < grid.height:
            if tiles[nx][ny] != FLOOR:
                count += 1
        else:
            count += 1
    return count


def smooth_pass(grid: Grid) -> int:
    """Run one in-place pass. Returns the number of cells changed."""
    changed = 0
    tiles = grid.tiles
    for x in range(grid.width):
        for y in range(grid.height):
            if grid.is_on_border(x, y):
                continue
            weight = wall_weight(grid, x, y)
            if weight < 4:
                new = FLOOR
            elif weight > 4:
                new = WALL
            else:
                continue
            if tiles[x][y] != new:
                tiles[x][y] = new
                changed += 1
    return changed


def smooth(grid: Grid, iterations: int = 255) -> int:
    """Apply up to ``iterations`` passes, returning how many actually ran.

    A pass that changes nothing leaves the grid in the state it started from,
    so every later pass would be identical; stopping there gives the same map.
    """
    for i in range(iterations):
        if smooth_pass(grid) == 0:
            logger.debug("smoothing converged after %s passes", i + 1)
            return i + 1
    return iterations


__all__ = ["wall_weight", "smooth_pass", "smooth"]
