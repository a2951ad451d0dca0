from typing import List

from .grid import Coord2D, Grid
from .regions import Region
from .tiles import FLOOR


class Room:
    """A surviving floor region plus its place in the connection graph.

    Rooms compare by identity; ``connected_rooms`` holds each undirected edge
    on both endpoints.
    """

    def __init__(self, tiles: Region, edge_tiles: List[Coord2D]):
        self.tiles = tiles
        self.edge_tiles = edge_tiles
        self.size = len(tiles)
        self.connected_rooms: List["Room"] = []
        self.accessible_from_main = False

    @classmethod
    def from_region(cls, region: Region, grid: Grid) -> "Room":
        # Edge tiles touch a non-floor tile (WALL or BORDER) orthogonally.
        edge: List[Coord2D] = []
        for x, y in region:
            for dx, dy in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
                nx, ny = x + dx, y + dy
                if grid.is_in_range(nx, ny) and grid.tiles[nx][ny] != FLOOR:
                    edge.append((x, y))
                    break
        return cls(region, edge)

    def set_accessible_from_main(self) -> None:
        """Mark this room and everything connected to it as reachable."""
        stack = [self]
        while stack:
            room = stack.pop()
            if room.accessible_from_main:
                continue
            room.accessible_from_main = True
            stack.extend(r for r in room.connected_rooms if not r.accessible_from_main)

    def is_connected(self, other: "Room") -> bool:
        return other in self.connected_rooms

    def __repr__(self) -> str:
        return f"Room(size={self.size}, edges={len(self.edge_tiles)}, main={self.accessible_from_main})"


def connect_rooms(room_a: Room, room_b: Room) -> None:
    if room_a.accessible_from_main:
        room_b.set_accessible_from_main()
    elif room_b.accessible_from_main:
        room_a.set_accessible_from_main()
    room_a.connected_rooms.append(room_b)
    room_b.connected_rooms.append(room_a)


def sort_rooms(rooms: List[Room]) -> List[Room]:
    """Largest first; equal sizes keep discovery order."""
    return sorted(rooms, key=lambda r: r.size, reverse=True)


__all__ = ["Room", "connect_rooms", "sort_rooms"]
