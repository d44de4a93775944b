from typing import Optional


def level_label(level: int) -> str:
    """Text shown in the level counter, e.g. ``Level: 3``."""
    if level < 1:
        raise ValueError("level must be >= 1")
    return f"Level: {level}"


def overlay_message(session) -> Optional[str]:
    """
    Message for the blocking overlay, or None when play continues.
    Only game over raises the overlay; level completion shows in the status line.
    """
    if session.game_over:
        return session.status
    return None
