"""Room connection: link every room to the main (largest) room.

The main room is marked reachable before the first sweep. Each sweep then
gives every unreachable, still unconnected room one corridor to its nearest
reachable room, measured between edge tiles. Sweeps repeat until one makes no
connection, at which point every room with edge tiles is reachable.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .grid import Coord2D, Grid
from .rooms import Room
from .tunnels import create_passage

logger = logging.getLogger(__name__)

Candidate = Tuple[Room, Coord2D, Coord2D]


def distance_sq(a: Coord2D, b: Coord2D) -> int:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def find_closest_pair(room_a: Room, candidates: List[Room]) -> Optional[Candidate]:
    """Nearest edge-tile pair between ``room_a`` and any of ``candidates``.

    Ties keep the first pair found. Returns None when no eligible pair exists.
    """
    best: Optional[Candidate] = None
    best_distance = 0
    for room_b in candidates:
        if room_b is room_a or room_a.is_connected(room_b):
            continue
        for tile_a in room_a.edge_tiles:
            for tile_b in room_b.edge_tiles:
                d = distance_sq(tile_a, tile_b)
                if best is None or d < best_distance:
                    best_distance = d
                    best = (room_b, tile_a, tile_b)
    return best


def connect_sweep(grid: Grid, rooms: List[Room], radius: int) -> int:
    """One partition-and-search pass. Returns passages created."""
    reachable = [r for r in rooms if r.accessible_from_main]
    unreachable = [r for r in rooms if not r.accessible_from_main]
    made = 0
    for room_a in unreachable:
        if room_a.connected_rooms:
            continue
        best = find_closest_pair(room_a, reachable)
        if best is None:
            continue
        room_b, tile_a, tile_b = best
        create_passage(grid, room_a, room_b, tile_a, tile_b, radius)
        made += 1
    return made


def connect_closest_rooms(grid: Grid, rooms: List[Room], radius: int = 7) -> Tuple[int, int]:
    """Sweep until nothing more connects. Returns (passages, sweeps)."""
    passages = 0
    sweeps = 0
    while True:
        sweeps += 1
        made = connect_sweep(grid, rooms, radius)
        passages += made
        if not made:
            break
    logger.debug("connected rooms: passages=%s sweeps=%s", passages, sweeps)
    return passages, sweeps


__all__ = ["distance_sq", "find_closest_pair", "connect_sweep", "connect_closest_rooms"]
