from __future__ import annotations

from typing import Optional

import pygame

from chaosgame.animation import BACKWARD, FORWARD


# ---------------------------------------------------------------------------
# Base Scene
# ---------------------------------------------------------------------------


class Scene:
    """
    Base for scenes driven by SceneManager's live loop: the manager feeds
    handle_event for each pygame event, then update, then render, once per
    loop pass.
    """

    def handle_event(self, event, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Process a single pygame event."""
        return None

    def update(self, dt_ms: int, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Advance scene state by dt_ms."""
        return None

    def render(self, renderer, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Draw the scene."""
        return None

    def is_idle(self) -> bool:
        """
        True when nothing will change until the next event arrives; the
        manager then blocks on the event queue instead of looping.
        """
        return False


# ---------------------------------------------------------------------------
# Keyboard actions
# ---------------------------------------------------------------------------

ACTION_TOGGLE_RUN = "toggle_run"
ACTION_STEP_BACK = "step_back"          # Left: one step backward
ACTION_STEP_FORWARD = "step_forward"    # Right: one step forward
ACTION_JUMP_FORWARD = "jump_forward"    # Up: ten steps forward
ACTION_JUMP_BACK = "jump_back"          # Down: ten steps backward
ACTION_COLOR_ON = "color_on"
ACTION_COLOR_OFF = "color_off"
ACTION_SCREENSHOT = "screenshot"
ACTION_QUIT = "quit"

# action -> (direction, magnitude) for manual stepping
STEP_ACTIONS = {
    ACTION_STEP_BACK: (BACKWARD, 1),
    ACTION_STEP_FORWARD: (FORWARD, 1),
    ACTION_JUMP_FORWARD: (FORWARD, 10),
    ACTION_JUMP_BACK: (BACKWARD, 10),
}

# Map raw Pygame keycodes to logical actions
_KEYMAP = {
    pygame.K_SPACE: ACTION_TOGGLE_RUN,

    pygame.K_LEFT: ACTION_STEP_BACK,
    pygame.K_RIGHT: ACTION_STEP_FORWARD,
    pygame.K_UP: ACTION_JUMP_FORWARD,
    pygame.K_DOWN: ACTION_JUMP_BACK,

    pygame.K_1: ACTION_COLOR_ON,
    pygame.K_KP1: ACTION_COLOR_ON,
    pygame.K_2: ACTION_COLOR_OFF,
    pygame.K_KP2: ACTION_COLOR_OFF,

    pygame.K_s: ACTION_SCREENSHOT,
    pygame.K_ESCAPE: ACTION_QUIT,
}


def map_key(key: int) -> Optional[str]:
    """Logical action for a keycode, or None for keys we ignore."""
    return _KEYMAP.get(key)
