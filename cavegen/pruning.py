"""Region pruning passes.

Run after smoothing: specks of wall inside open areas are opened up and
isolated floor pockets are filled in, leaving only regions worth keeping.
Surviving floor regions become the rooms the connector links together.
"""
from __future__ import annotations

import logging
from typing import List

from .grid import Grid
from .regions import find_regions
from .rooms import Room
from .tiles import FLOOR, WALL

logger = logging.getLogger(__name__)


def prune_wall_regions(grid: Grid, min_size: int) -> int:
    """Turn wall regions smaller than ``min_size`` into floor. Returns number removed."""
    removed = 0
    for region in find_regions(grid, WALL):
        if len(region) < min_size:
            for x, y in region:
                grid.tiles[x][y] = FLOOR
            removed += 1
    logger.debug("pruned %s wall regions below %s tiles", removed, min_size)
    return removed


def prune_floor_regions(grid: Grid, min_size: int) -> tuple[List[Room], int]:
    """Fill floor regions smaller than ``min_size`` with wall.

    Returns (rooms, removed) where rooms are built from the surviving regions
    in discovery order. Edge tiles are computed after all pruning so they
    reflect the final walls.
    """
    survivors = []
    removed = 0
    for region in find_regions(grid, FLOOR):
        if len(region) < min_size:
            for x, y in region:
                grid.tiles[x][y] = WALL
            removed += 1
        else:
            survivors.append(region)
    rooms = [Room.from_region(region, grid) for region in survivors]
    logger.debug("pruned %s floor regions, %s rooms survive", removed, len(rooms))
    return rooms, removed


__all__ = ["prune_wall_regions", "prune_floor_regions"]
