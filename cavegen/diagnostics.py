"""Structural checks over a generated cave.

``analyze`` recomputes the map's invariants from the final grid rather than
trusting the generator's own bookkeeping, so it doubles as a regression probe
for ``scripts/diagnose_seeds.py`` and the test-suite.
"""
from __future__ import annotations

from typing import Any, Dict, List

from .regions import find_regions, flood_reachable
from .tiles import BORDER, FLOOR, WALL


def border_violations(grid) -> List[tuple]:
    return [(x, y) for x, y in grid.cells() if grid.is_on_border(x, y) and grid.tiles[x][y] != BORDER]


def unreachable_rooms(cave) -> List[int]:
    """Indices of rooms with any tile not reachable over floor from the main room."""
    if not cave.rooms:
        return []
    reach = flood_reachable(cave.grid, cave.rooms[0].tiles, {FLOOR})
    return [i for i, room in enumerate(cave.rooms) if any(t not in reach for t in room.tiles)]


def analyze(cave) -> Dict[str, Any]:
    min_size = cave.config.min_region_size
    grid = cave.grid
    return {
        "border_violations": border_violations(grid),
        "unreachable_rooms": unreachable_rooms(cave),
        "inaccessible_flags": [i for i, r in enumerate(cave.rooms) if not r.accessible_from_main],
        # Informational: corridor carving can cut off small wall slivers.
        "small_wall_regions": sorted(len(r) for r in find_regions(grid, WALL) if len(r) < min_size),
        "small_floor_regions": sorted(len(r) for r in find_regions(grid, FLOOR) if len(r) < min_size),
    }


__all__ = ["analyze", "border_violations", "unreachable_rooms"]
