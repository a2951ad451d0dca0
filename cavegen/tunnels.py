from typing import List

from .grid import Coord2D, Grid
from .rooms import Room, connect_rooms
from .tiles import BORDER, FLOOR


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def get_line(start: Coord2D, end: Coord2D) -> List[Coord2D]:
    """Integer Bresenham line from ``start`` towards ``end``.

    The driving axis is whichever delta is longer; the other axis steps when
    the accumulated error crosses it. ``end`` itself is not included, so a
    zero-length line is empty.
    """
    x, y = start
    dx = end[0] - x
    dy = end[1] - y
    step = _sign(dx)
    gradient_step = _sign(dy)
    longest = abs(dx)
    shortest = abs(dy)
    inverted = longest < shortest
    if inverted:
        longest, shortest = shortest, longest
        step, gradient_step = gradient_step, step

    line: List[Coord2D] = []
    accumulation = longest // 2
    for _ in range(longest):
        line.append((x, y))
        if inverted:
            y += step
        else:
            x += step
        accumulation += shortest
        if accumulation >= longest:
            if inverted:
                x += gradient_step
            else:
                y += gradient_step
            accumulation -= longest
    return line


def carve_circle(grid: Grid, center: Coord2D, radius: int) -> int:
    """Open a filled disc of floor around ``center``; border cells are kept.

    Returns the number of cells turned into floor.
    """
    cx, cy = center
    r2 = radius * radius
    carved = 0
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            if dx * dx + dy * dy > r2:
                continue
            x, y = cx + dx, cy + dy
            if not grid.is_in_range(x, y):
                continue
            tile = grid.tiles[x][y]
            if tile != FLOOR and tile != BORDER:
                grid.tiles[x][y] = FLOOR
                carved += 1
    return carved


def create_passage(grid: Grid, room_a: Room, room_b: Room, tile_a: Coord2D, tile_b: Coord2D, radius: int) -> int:
    """Link two rooms in the graph and carve a corridor between their edge tiles."""
    connect_rooms(room_a, room_b)
    points = get_line(tile_a, tile_b) or [tile_a]
    return sum(carve_circle(grid, p, radius) for p in points)


__all__ = ["get_line", "carve_circle", "create_passage"]
