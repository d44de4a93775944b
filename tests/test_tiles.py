import pytest

from trapmaze.tiles import FLOOR, GOAL, HAZARD, WALL, glyph_for, is_passable, tile_for_glyph

def test_only_walls_block():
    assert is_passable(FLOOR)
    assert is_passable(GOAL)
    assert is_passable(HAZARD)
    assert not is_passable(WALL)

def test_glyphs_match_classic_map():
    assert [glyph_for(t) for t in (WALL, FLOOR, GOAL, HAZARD)] == ["#", ".", ">", "X"]
    assert tile_for_glyph(">") == GOAL

def test_unknown_glyph_rejected():
    with pytest.raises(ValueError):
        tile_for_glyph("@")
