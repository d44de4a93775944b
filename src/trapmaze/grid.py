from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from .tiles import ALL_TILES, WALL, glyph_for, tile_for_glyph

XY = Tuple[int, int]


class GridBoundsError(IndexError):
    """Raised when a cell outside the declared grid dimensions is accessed."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"cell ({x}, {y}) outside {width}x{height} grid")
        self.x = x
        self.y = y


@dataclass
class Grid:
    width: int
    height: int
    buf: List[int]

    @classmethod
    def filled(cls, width: int, height: int, tile: int = WALL) -> "Grid":
        if width < 0 or height < 0:
            raise ValueError("grid dimensions must be non-negative")
        return cls(width=width, height=height, buf=[tile] * (width * height))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        h = len(rows)
        w = len(rows[0]) if h else 0
        if any(len(r) != w for r in rows):
            raise ValueError("rows must all have the same length")
        buf = [t for r in rows for t in r]
        for t in buf:
            if t not in ALL_TILES:
                raise ValueError(f"unknown tile id {t}")
        return cls(width=w, height=h, buf=buf)

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """Build a grid from glyph lines ('#', '.', '>', 'X'); blank lines ignored."""
        lines = [ln.strip() for ln in text.strip().splitlines() if ln.strip()]
        return cls.from_rows([[tile_for_glyph(ch) for ch in ln] for ln in lines])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def idx(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise GridBoundsError(x, y, self.width, self.height)
        return y * self.width + x

    def get(self, x: int, y: int) -> int:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: int) -> None:
        self.buf[self.idx(x, y)] = v

    def cells(self) -> Iterator[Tuple[XY, int]]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y), self.buf[y * self.width + x]

    def positions_of(self, tile: int) -> List[XY]:
        return [xy for xy, t in self.cells() if t == tile]

    def count(self, tile: int) -> int:
        return self.buf.count(tile)

    def as_matrix(self) -> List[List[int]]:
        return [self.buf[y * self.width:(y + 1) * self.width] for y in range(self.height)]

    def to_text(self) -> str:
        return "\n".join("".join(glyph_for(t) for t in row) for row in self.as_matrix())
