# Canonical tile IDs

WALL = 0
FLOOR = 1
GOAL = 2
HAZARD = 3

ALL_TILES = (WALL, FLOOR, GOAL, HAZARD)

PLAYER_GLYPH = "@"
GLYPHS = {
    WALL: "#",
    FLOOR: ".",
    GOAL: ">",
    HAZARD: "X",
}
TILE_FOR_GLYPH = {ch: t for t, ch in GLYPHS.items()}


def glyph_for(tile: int) -> str:
    return GLYPHS[tile]


def tile_for_glyph(ch: str) -> int:
    try:
        return TILE_FOR_GLYPH[ch]
    except KeyError:
        raise ValueError(f"unknown tile glyph {ch!r}") from None


def is_passable(tile: int) -> bool:
    # Only walls block; goal and hazard tiles can be entered.
    return tile != WALL
