"""Pygame canvas for the chaos game: clear, overlay text, plot, present."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

import pygame

from chaosgame.config import ChaosConfig
from chaosgame.plotter import Frame

logger = logging.getLogger(__name__)


class SurfaceUnavailableError(RuntimeError):
    """The window (or offscreen surface) could not be created."""


def desktop_size() -> Tuple[int, int]:
    info = pygame.display.Info()
    return info.current_w, info.current_h


class CanvasRenderer:
    def __init__(self, cfg: ChaosConfig, *, headless: bool = False) -> None:
        """
        Open a window sized from cfg (0 = desktop size, measured once at
        start-up). With headless=True draw into an offscreen surface instead.
        """
        self.cfg = cfg
        self.headless = headless
        self.bg = cfg.background
        self.fg = cfg.foreground
        self.line_height = cfg.font_size + 4
        self.text_margin = 10
        self.last_frame: Optional[Frame] = None

        try:
            if not pygame.font.get_init():
                pygame.font.init()
            width, height = cfg.view_width, cfg.view_height
            if headless:
                width = width or 800
                height = height or 600
            elif not width or not height:
                dw, dh = desktop_size()
                width = width or dw
                height = height or dh

            if width <= 0 or height <= 0:
                raise SurfaceUnavailableError(f"bad surface size {width}x{height}")

            if headless:
                self.display: Optional[pygame.Surface] = None
                self.surface = pygame.Surface((width, height))
            else:
                self.display = pygame.display.set_mode((width, height))
                pygame.display.set_caption(cfg.window_title)
                self.surface = self.display
            self.font = pygame.font.SysFont(cfg.font_name, cfg.font_size)
        except pygame.error as exc:
            raise SurfaceUnavailableError(f"cannot create drawing surface: {exc}") from exc

        self.width = width
        self.height = height
        logger.info("Canvas %dx%d (%s)", width, height, "offscreen" if headless else "window")

    # ------------------------------------------------------------------ #

    def draw_frame(self, frame: Frame) -> None:
        """Full destructive redraw: clear, three overlay lines, then the points."""
        surf = self.surface
        surf.fill(self.bg)

        y = self.text_margin
        for line in frame.overlay_lines():
            text = self.font.render(line, True, self.fg)
            surf.blit(text, (self.text_margin, y))
            y += self.line_height

        w, h = self.width, self.height
        fg = self.fg
        surf.lock()
        try:
            for p in frame.points:
                if 0 <= p.x < w and 0 <= p.y < h:
                    surf.set_at((p.x, p.y), p.color or fg)
        finally:
            surf.unlock()

        self.last_frame = frame

    def present(self) -> None:
        if self.display is not None:
            pygame.display.flip()

    def save_screenshot(self, path: Path) -> Path:
        pygame.image.save(self.surface, str(path))
        logger.info("Saved screenshot to %s", path)
        return path

    def teardown(self) -> None:
        pygame.quit()
