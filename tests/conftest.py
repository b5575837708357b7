"""Shared fixtures; pygame runs headless for the whole test session."""

from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from chaosgame.config import ChaosConfig
from chaosgame.render.canvas import CanvasRenderer
from chaosgame.rng import new_rng


@pytest.fixture
def cfg() -> ChaosConfig:
    return ChaosConfig(view_width=200, view_height=150, iterations=500, seed=7)


@pytest.fixture
def rng():
    return new_rng(1234)


@pytest.fixture
def renderer(cfg):
    pygame.init()
    r = CanvasRenderer(cfg, headless=True)
    yield r
    r.teardown()
