from typing import Dict, Optional

from ..engine.player import DIRS
from ..engine.state import Action

# Key names follow the DOM KeyboardEvent.key convention so any toolkit can
# translate into them ("h", "B", "ArrowUp", "Enter", ...).
KEYMAP: Dict[str, Action] = {
    # vim-style
    "h": Action("move", *DIRS["left"]),
    "j": Action("move", *DIRS["down"]),
    "k": Action("move", *DIRS["up"]),
    "l": Action("move", *DIRS["right"]),
    "ArrowLeft": Action("move", *DIRS["left"]),
    "ArrowDown": Action("move", *DIRS["down"]),
    "ArrowUp": Action("move", *DIRS["up"]),
    "ArrowRight": Action("move", *DIRS["right"]),
    # diagonals
    "y": Action("move", *DIRS["up_left"]),
    "u": Action("move", *DIRS["up_right"]),
    "b": Action("move", *DIRS["down_left"]),
    "n": Action("move", *DIRS["down_right"]),
    # word-style jumps
    "w": Action("jump", *DIRS["right"]),
    "e": Action("jump", *DIRS["right"]),
    "B": Action("jump", *DIRS["left"]),
    # game-over screen
    "Enter": Action("restart"),
    "Escape": Action("restart"),
}


def action_for_key(key: str) -> Optional[Action]:
    return KEYMAP.get(key)
