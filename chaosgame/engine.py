from __future__ import annotations

"""
Engine: owns pygame start-up, the renderer, the scene manager, and
teardown.
"""

import pygame

from chaosgame import config
from chaosgame.render.canvas import CanvasRenderer
from chaosgame.rng import new_rng
from chaosgame.scenes import ChaosGameScene, SceneManager


class Engine:
    def __init__(self, cfg: config.ChaosConfig) -> None:
        pygame.init()
        self.cfg = cfg
        try:
            self.renderer = CanvasRenderer(cfg)
        except Exception:
            pygame.quit()
            raise
        self.rng = new_rng(cfg.seed)
        self.manager = SceneManager(cfg, self.renderer)
        self.manager.set_scene(ChaosGameScene(cfg, self.rng))

    def run(self) -> None:
        try:
            self.manager.run()
        finally:
            self.renderer.teardown()
