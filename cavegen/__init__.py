"""Public cavegen package interface.

Cellular-automaton cave generation: seeded fill, smoothing, region pruning
and corridor carving until every room is reachable from the largest one.
"""

from .config import CaveConfig
from .errors import CaveGenError, InvalidConfig, InvalidDimensions
from .grid import Grid
from .pipeline import CaveMap, generate
from .tiles import BORDER, FLOOR, WALL, TileType

__version__ = "0.1.0"

__all__ = [
    "CaveConfig",
    "CaveGenError",
    "CaveMap",
    "Grid",
    "InvalidConfig",
    "InvalidDimensions",
    "TileType",
    "FLOOR",
    "WALL",
    "BORDER",
    "generate",
]
