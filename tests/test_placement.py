# tests/test_placement.py
from trapmaze.grid import Grid
from trapmaze.mapgen.placement import hazard_target, place_goal, place_hazards
from trapmaze.mapgen.reachability import is_reachable
from trapmaze.rng import PMRandom, ScriptedRandom
from trapmaze.tiles import FLOOR, GOAL, HAZARD, WALL

CORRIDOR = "#######\n#.....#\n#######"

LOOP = """
#######
#.....#
#.###.#
#.....#
#######
"""

def corridor_with_goal():
    g = Grid.from_text(CORRIDOR)
    g.set(5, 1, GOAL)
    return g

# ---------- goal ----------

def test_goal_prefers_distant_candidate():
    g = Grid.from_text("#########\n#.......#\n#########")
    # threshold min(9, 3) / 1.5 == 2; zero draws rotate the list left by one
    cands = [(1, 1), (2, 1), (3, 1), (4, 1)]
    goal = place_goal(g, cands, (1, 1), ScriptedRandom([0]))
    assert goal == (4, 1)
    assert g.get(4, 1) == GOAL
    assert g.count(GOAL) == 1

def test_goal_falls_back_to_any_non_start_tile():
    g = Grid.from_text("#########\n#.......#\n#########")
    goal = place_goal(g, [(1, 1), (2, 1)], (1, 1), ScriptedRandom([0]))
    assert goal == (2, 1)
    assert g.get(2, 1) == GOAL

def test_goal_never_on_start_when_alternatives_exist():
    for seed in range(1, 40):
        g = Grid.from_text(CORRIDOR)
        goal = place_goal(g, [(1, 1), (2, 1), (3, 1)], (1, 1), PMRandom(seed))
        assert goal != (1, 1)

def test_goal_corner_fallback_carves_wall():
    g = Grid.filled(5, 5, WALL)
    goal = place_goal(g, [], (1, 1), PMRandom(1))
    assert goal == (3, 3)
    assert g.get(3, 3) == GOAL

def test_goal_degenerates_to_start_when_corner_outside():
    g = Grid.filled(1, 1, FLOOR)
    goal = place_goal(g, [], (0, 0), PMRandom(1))
    assert goal == (0, 0)
    assert g.get(0, 0) == FLOOR  # left unmarked

# ---------- hazards ----------

def test_hazard_target_formula():
    assert hazard_target(271, 1) == 5
    assert hazard_target(271, 20) == 13
    assert hazard_target(39, 3) == 1
    assert hazard_target(19, 50) == 0

def test_sole_connector_rejected():
    g = corridor_with_goal()
    hazards = place_hazards(g, [(3, 1)], (1, 1), (5, 1), 1, PMRandom(3))
    assert hazards == []
    assert g.get(3, 1) == FLOOR
    assert is_reachable(g, (1, 1), (5, 1))

def test_corridor_rejects_every_blocking_tile():
    g = corridor_with_goal()
    cands = [(1, 1), (2, 1), (3, 1), (4, 1), (5, 1)]
    hazards = place_hazards(g, cands, (1, 1), (5, 1), 3, PMRandom(8))
    assert hazards == []
    assert g.count(HAZARD) == 0
    assert g.get(5, 1) == GOAL

def test_loop_accepts_tiles_with_a_detour():
    g = Grid.from_text(LOOP)
    g.set(5, 3, GOAL)
    hazards = place_hazards(g, [(3, 1), (3, 3)], (1, 1), (5, 3), 2, PMRandom(2))
    # hazards stay passable for the check, so both sides of the loop qualify
    assert sorted(hazards) == [(3, 1), (3, 3)]
    assert g.get(3, 1) == HAZARD and g.get(3, 3) == HAZARD

def test_stops_at_target():
    g = Grid.from_text(LOOP)
    g.set(5, 3, GOAL)
    cands = [(2, 1), (3, 1), (4, 1), (2, 3), (3, 3), (4, 3)]
    hazards = place_hazards(g, cands, (1, 1), (5, 3), 2, PMRandom(17))
    assert len(hazards) == 2
    assert g.count(HAZARD) == 2

def test_start_and_goal_skipped():
    g = Grid.from_text(LOOP)
    g.set(5, 3, GOAL)
    hazards = place_hazards(g, [(1, 1), (5, 3)], (1, 1), (5, 3), 5, PMRandom(1))
    assert hazards == []
    assert g.get(1, 1) == FLOOR and g.get(5, 3) == GOAL
