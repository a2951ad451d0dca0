from collections import deque
from typing import List, Optional, Set

from .grid import Coord2D, Grid
from .tiles import FLOOR, TileType

Region = List[Coord2D]


def _flood(grid: Grid, start: Coord2D, visited: List[List[bool]]) -> Region:
    tiles = grid.tiles
    sx, sy = start
    tile_type = tiles[sx][sy]
    region: Region = []
    q = deque([start])
    visited[sx][sy] = True
    while q:
        cx, cy = q.popleft()
        region.append((cx, cy))
        for dx, dy in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
            nx, ny = cx + dx, cy + dy
            if 0 <= nx < grid.width and 0 <= ny < grid.height and not visited[nx][ny]:
                if tiles[nx][ny] == tile_type:
                    visited[nx][ny] = True
                    q.append((nx, ny))
    return region


def find_regions(grid: Grid, tile_type: TileType) -> List[Region]:
    """Collect every 4-connected component of ``tile_type``.

    Scans x-major; the returned order and each region's tile order are
    reproducible for a given grid state. The grid itself is not modified.
    """
    visited = [[False] * grid.height for _ in range(grid.width)]
    regions: List[Region] = []
    for x in range(grid.width):
        for y in range(grid.height):
            if not visited[x][y] and grid.tiles[x][y] == tile_type:
                regions.append(_flood(grid, (x, y), visited))
    return regions


def region_at(grid: Grid, x: int, y: int) -> Region:
    """The region containing (x, y), whatever its tile type."""
    grid.get(x, y)  # bounds check
    visited = [[False] * grid.height for _ in range(grid.width)]
    return _flood(grid, (x, y), visited)


def flood_reachable(grid: Grid, starts, passable: Optional[Set[TileType]] = None) -> Set[Coord2D]:
    """Every cell 4-reachable from ``starts`` over ``passable`` tiles."""
    passable = passable or {FLOOR}
    seen: Set[Coord2D] = set()
    q = deque()
    for s in starts:
        if s not in seen and grid.tiles[s[0]][s[1]] in passable:
            seen.add(s)
            q.append(s)
    while q:
        cx, cy = q.popleft()
        for dx, dy in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
            nx, ny = cx + dx, cy + dy
            if 0 <= nx < grid.width and 0 <= ny < grid.height and (nx, ny) not in seen:
                if grid.tiles[nx][ny] in passable:
                    seen.add((nx, ny))
                    q.append((nx, ny))
    return seen


__all__ = ["Region", "find_regions", "region_at", "flood_reachable"]
