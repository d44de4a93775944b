# tests/test_reachability.py
from trapmaze.grid import Grid
from trapmaze.mapgen.reachability import is_reachable

ROOMS = """
#########
#...#...#
#.X.#.>.#
#...#...#
#########
"""

def test_path_through_goal_and_hazard_tiles():
    g = Grid.from_text("#####\n#.X>#\n#####")
    assert is_reachable(g, (1, 1), (3, 1))

def test_wall_separates_rooms():
    g = Grid.from_text(ROOMS)
    assert not is_reachable(g, (1, 1), (6, 2))
    assert is_reachable(g, (1, 1), (3, 3))

def test_same_cell_is_reachable():
    g = Grid.from_text(ROOMS)
    for xy in [(1, 1), (0, 0), (4, 2), (8, 4)]:
        assert is_reachable(g, xy, xy)

def test_out_of_bounds_endpoints():
    g = Grid.from_text(ROOMS)
    assert not is_reachable(g, (-1, 3), (1, 1))
    assert not is_reachable(g, (1, 1), (9, 1))

def test_no_diagonal_steps():
    g = Grid.from_text("####\n#.##\n##.#\n####")
    assert not is_reachable(g, (1, 1), (2, 2))

def test_grid_untouched():
    g = Grid.from_text(ROOMS)
    before = list(g.buf)
    is_reachable(g, (1, 1), (6, 2))
    assert g.buf == before
