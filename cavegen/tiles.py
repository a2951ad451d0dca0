"""Tile type definitions shared by every generation stage."""
from enum import IntEnum


class TileType(IntEnum):
    FLOOR = 0
    WALL = 1
    BORDER = 2  # outer ring, written once by the fill


# Tile constants centralized for modular imports
FLOOR = TileType.FLOOR
WALL = TileType.WALL
BORDER = TileType.BORDER

__all__ = ["TileType", "FLOOR", "WALL", "BORDER"]
