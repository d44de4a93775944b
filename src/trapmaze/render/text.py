# src/trapmaze/render/text.py
# Plain glyph rendering of a grid with the player drawn on top.

from typing import Optional, Tuple

from ..grid import Grid
from ..mapgen.generator import Level
from ..tiles import PLAYER_GLYPH, glyph_for

XY = Tuple[int, int]


def render_grid_text(grid: Grid, player: Optional[XY] = None) -> str:
    rows = []
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            if player == (x, y):
                row.append(PLAYER_GLYPH)
            else:
                row.append(glyph_for(grid.get(x, y)))
        rows.append("".join(row))
    return "\n".join(rows)


def render_text(source) -> str:
    """Render a freshly generated Level at its start, or a GameSession at the player."""
    if isinstance(source, Level):
        return render_grid_text(source.grid, source.player_start)
    return render_grid_text(source.grid, source.player.pos)
