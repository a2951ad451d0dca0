import random

from .grid import Grid
from .tiles import BORDER, FLOOR, WALL


def random_fill(grid: Grid, rng: random.Random, fill_percent: int = 50) -> None:
    """Seed the grid with noise inside a solid border ring.

    Cells are visited x-major so a given rng state always yields the same map.
    A draw above ``fill_percent`` becomes FLOOR, anything else WALL.
    """
    for x in range(grid.width):
        for y in range(grid.height):
            if grid.is_on_border(x, y):
                grid.tiles[x][y] = BORDER
            else:
                grid.tiles[x][y] = FLOOR if rng.randrange(0, 100) > fill_percent else WALL


__all__ = ["random_fill"]
