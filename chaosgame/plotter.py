"""
The chaos game itself: start on vertex 0, then repeatedly jump a fraction
`scale` of the way toward a randomly chosen vertex and plot where you land.
"""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from chaosgame.config import ChaosConfig
from chaosgame.geometry import Vec2, polygon_vertices
from chaosgame.spectrum import Color, distance_to_wavelength, wavelength_to_rgb


@dataclass(frozen=True)
class PlottedPoint:
    x: int
    y: int
    color: Optional[Color] = None  # None = renderer's foreground color


@dataclass(frozen=True)
class Frame:
    polygon: List[Vec2]
    points: List[PlottedPoint]
    vertices: int
    scale: float
    color_mode: bool

    def overlay_lines(self) -> List[str]:
        return [
            "Use controls <Up>,<Down>,<Left>,<Right> or <Space>",
            "For color press <1> or <2>",
            f"Vertices: {self.vertices}; Scale: {self.scale:.3f}",
        ]


def chaos_points(
    polygon: Sequence[Vec2],
    scale: float,
    iterations: int,
    rng: random.Random,
    color_mode: bool = False,
    half_height: float = 1.0,
) -> List[PlottedPoint]:
    """
    Run the chaos game for `iterations` steps and return one point per step.

    In color mode each point is colored by the distance between the previous
    cursor and the chosen vertex, mapped onto the visible spectrum with
    half_height pixels spanning 400..700 nm. A distance past the red end has
    no color of its own, so the point keeps the color of the one before it
    (the foreground color if no earlier point had one).
    """
    n = len(polygon)
    rx, ry = polygon[0]
    points: List[PlottedPoint] = []
    color: Optional[Color] = None

    for _ in range(iterations):
        vx, vy = polygon[rng.randrange(n)]
        dx = vx - rx
        dy = vy - ry
        rx += scale * dx
        ry += scale * dy

        if color_mode:
            dist = math.hypot(dx, dy)
            mapped = wavelength_to_rgb(distance_to_wavelength(dist, half_height))
            if mapped is not None:
                color = mapped

        points.append(PlottedPoint(int(round(rx)), int(round(ry)), color))

    return points


def build_frame(
    cfg: ChaosConfig,
    width: int,
    height: int,
    vertices: int,
    scale: float,
    color_mode: bool,
    rng: random.Random,
) -> Frame:
    """Everything one redraw needs; the tick and every key go through here."""
    polygon = polygon_vertices(vertices, width, height)
    points = chaos_points(
        polygon,
        scale,
        cfg.iterations,
        rng,
        color_mode=color_mode,
        half_height=height / 2.0,
    )
    return Frame(
        polygon=polygon,
        points=points,
        vertices=vertices,
        scale=scale,
        color_mode=color_mode,
    )
