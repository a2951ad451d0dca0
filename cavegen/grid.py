from typing import Iterator, List, Tuple

from .tiles import BORDER, FLOOR, WALL, TileType

Coord2D = Tuple[int, int]


class Grid:
    """Rectangular tile buffer indexed column-major (``tiles[x][y]``)."""

    __slots__ = ("width", "height", "tiles")

    def __init__(self, width: int, height: int, fill: TileType = WALL):
        self.width = width
        self.height = height
        self.tiles: List[List[TileType]] = [[fill for _ in range(height)] for _ in range(width)]

    def is_in_range(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_on_border(self, x: int, y: int) -> bool:
        return x == 0 or x == self.width - 1 or y == 0 or y == self.height - 1

    def _check(self, x: int, y: int) -> None:
        if not self.is_in_range(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")

    def get(self, x: int, y: int) -> TileType:
        self._check(x, y)
        return self.tiles[x][y]

    def set(self, x: int, y: int, tile: TileType) -> None:
        self._check(x, y)
        self.tiles[x][y] = tile

    def is_wall(self, x: int, y: int) -> bool:
        return self.get(x, y) == WALL

    def is_floor(self, x: int, y: int) -> bool:
        return self.get(x, y) == FLOOR

    def is_border(self, x: int, y: int) -> bool:
        return self.get(x, y) == BORDER

    def cells(self) -> Iterator[Coord2D]:
        for x in range(self.width):
            for y in range(self.height):
                yield x, y

    def count(self, tile: TileType) -> int:
        return sum(col.count(tile) for col in self.tiles)

    def snapshot(self) -> Tuple[Tuple[TileType, ...], ...]:
        return tuple(tuple(col) for col in self.tiles)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and self.tiles == other.tiles

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"


__all__ = ["Grid", "Coord2D"]
