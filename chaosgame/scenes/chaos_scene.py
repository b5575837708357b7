from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

import pygame

from chaosgame.animation import AnimationController
from chaosgame.config import ChaosConfig
from chaosgame.plotter import Frame, build_frame
from .base import (
    Scene,
    map_key,
    STEP_ACTIONS,
    ACTION_TOGGLE_RUN,
    ACTION_COLOR_ON,
    ACTION_COLOR_OFF,
    ACTION_SCREENSHOT,
    ACTION_QUIT,
)

logger = logging.getLogger(__name__)


class ChaosGameScene(Scene):
    """
    The animated chaos game.

    The periodic tick and every key that changes the picture only mark the
    scene dirty; render() then builds one frame from the current state and
    hands it to the renderer, so both paths share a single draw sequence.
    """

    def __init__(
        self,
        cfg: ChaosConfig,
        rng: random.Random,
        controller: Optional[AnimationController] = None,
    ) -> None:
        self.cfg = cfg
        self.rng = rng
        self.controller = controller or AnimationController(cfg)
        self.dirty = False
        self.frame: Optional[Frame] = None
        self.screenshot_dir = Path.cwd()

    # ------------------------------------------------------------------ #
    # Input

    def handle_action(self, action: str, manager) -> None:
        ctl = self.controller
        if action == ACTION_TOGGLE_RUN:
            self.dirty |= ctl.toggle_run()
        elif action in STEP_ACTIONS:
            direction, magnitude = STEP_ACTIONS[action]
            self.dirty |= ctl.step_manual(direction, magnitude)
        elif action == ACTION_COLOR_ON:
            self.dirty |= ctl.set_color_mode(True)
        elif action == ACTION_COLOR_OFF:
            self.dirty |= ctl.set_color_mode(False)
        elif action == ACTION_SCREENSHOT:
            self.save_screenshot(manager.renderer)
        elif action == ACTION_QUIT:
            manager.set_scene(None)

    def handle_event(self, event, manager) -> None:
        if event.type != pygame.KEYDOWN:
            return
        action = map_key(event.key)
        if action is not None:
            self.handle_action(action, manager)

    # ------------------------------------------------------------------ #
    # Loop hooks

    def is_idle(self) -> bool:
        return not self.controller.running and not self.dirty

    def update(self, dt_ms: int, manager) -> None:
        self.dirty |= self.controller.poll(dt_ms)

    def render(self, renderer, manager) -> None:
        if not self.dirty:
            return
        state = self.controller.state
        self.frame = build_frame(
            self.cfg,
            renderer.width,
            renderer.height,
            state.vertices,
            state.scale,
            state.color_mode,
            self.rng,
        )
        renderer.draw_frame(self.frame)
        renderer.present()
        self.dirty = False

    def save_screenshot(self, renderer) -> Optional[Path]:
        if self.frame is None:
            logger.info("Nothing drawn yet; screenshot skipped")
            return None
        name = f"chaosgame_{self.frame.vertices}_{self.frame.scale:.3f}.png"
        return renderer.save_screenshot(self.screenshot_dir / name)
