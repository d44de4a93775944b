import pytest

from trapmaze.config import GameConfig
from trapmaze.engine.player import Player
from trapmaze.engine.state import Action, GameSession
from trapmaze.grid import Grid
from trapmaze.mapgen.generator import Level, generate_level
from trapmaze.render.text import render_grid_text, render_text
from trapmaze.rng import ScriptedRandom
from trapmaze.ui.hud import level_label, overlay_message
from trapmaze.ui.keymap import action_for_key
from trapmaze.ui.status_bar import StatusBarState

def test_vim_and_arrow_keys_move():
    assert action_for_key("h") == Action("move", -1, 0)
    assert action_for_key("j") == Action("move", 0, 1)
    assert action_for_key("k") == Action("move", 0, -1)
    assert action_for_key("l") == Action("move", 1, 0)
    assert action_for_key("ArrowUp") == action_for_key("k")
    assert action_for_key("ArrowRight") == action_for_key("l")

def test_diagonals_and_jumps():
    assert action_for_key("y") == Action("move", -1, -1)
    assert action_for_key("n") == Action("move", 1, 1)
    assert action_for_key("w") == action_for_key("e") == Action("jump", 1, 0)
    assert action_for_key("B") == Action("jump", -1, 0)
    assert action_for_key("b") == Action("move", -1, 1)

def test_restart_and_unknown_keys():
    assert action_for_key("Enter").kind == "restart"
    assert action_for_key("Escape").kind == "restart"
    assert action_for_key("x") is None

def test_level_label():
    assert level_label(3) == "Level: 3"
    with pytest.raises(ValueError):
        level_label(0)

class _Session:
    def __init__(self, game_over, status, level_number=2):
        self.game_over = game_over
        self.status = status
        self.level_number = level_number

def test_overlay_only_on_game_over():
    assert overlay_message(_Session(False, "Level 2 Complete!")) is None
    assert overlay_message(_Session(True, "boom")) == "boom"
    st = StatusBarState.from_session(_Session(True, "boom"))
    assert (st.level, st.message, st.overlay) == (2, "boom", "boom")

def test_text_render_draws_player_over_tiles():
    g = Grid.from_text("####\n#.>#\n####")
    assert render_grid_text(g, (1, 1)) == "####\n#@>#\n####"
    assert render_grid_text(g) == g.to_text()

def test_text_render_of_generated_level():
    level = generate_level(1, 5, 5, ScriptedRandom([0]))
    assert render_text(level).splitlines()[1] == "#@#.#"

def test_text_render_of_session_follows_player():
    g = Grid.from_text("#####\n#...#\n#####")
    s = GameSession(GameConfig(width=5, height=3))
    s.level = Level(level_number=1, grid=g, player_start=(1, 1), goal=(1, 1), hazards=[])
    s.player = Player(spawn_xy=(1, 1))
    s.active = True
    s.move(1, 0)
    assert render_text(s) == "#####\n#.@.#\n#####"
