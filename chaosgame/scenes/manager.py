# manager.py
from __future__ import annotations

from typing import List, Optional

import pygame

from chaosgame import config
from chaosgame.render.canvas import CanvasRenderer

from .base import Scene


class SceneManager:
    def __init__(self, cfg: config.ChaosConfig, renderer: CanvasRenderer) -> None:
        self.cfg = cfg
        self.renderer = renderer
        self.scene_stack: List[Scene] = []

    def set_scene(self, scene: Optional[Scene]) -> None:
        if scene is None:
            self.scene_stack.clear()
        else:
            self.scene_stack = [scene]

    # ------------------------------------------------------------------ #

    def run(self) -> None:
        """Drive the top scene until the stack empties."""
        while self.scene_stack:
            self._run_live_scene(self.scene_stack[-1])

    def dispatch(self, scene: Scene, event) -> bool:
        """
        Forward one event to the scene. Returns False when the app should
        stop (window closed).
        """
        if event.type == pygame.QUIT:
            self.set_scene(None)
            return False
        scene.handle_event(event, self)
        return True

    def _pending_events(self, scene: Scene) -> list:
        # An idle scene (paused, nothing to redraw) sleeps until input arrives.
        if scene.is_idle():
            return [pygame.event.wait()] + pygame.event.get()
        return pygame.event.get()

    def _run_live_scene(self, scene: Scene) -> None:
        renderer = self.renderer
        clock = pygame.time.Clock()

        # Events, then update, then render; each runs to completion before
        # the next event is looked at.
        while self.scene_stack and self.scene_stack[-1] is scene:
            dt = clock.tick(self.cfg.max_fps)

            for event in self._pending_events(scene):
                if not self.dispatch(scene, event):
                    return

            scene.update(dt, self)
            scene.render(renderer, self)
