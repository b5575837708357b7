"""Regular polygon placement for the chaos game."""
from __future__ import annotations

import math
from typing import List, Tuple

Vec2 = Tuple[float, float]


def centre(width: float, height: float) -> Vec2:
    return (width / 2.0, height / 2.0)


def radii(width: float, height: float) -> Vec2:
    """Half-axes of the ellipse the polygon sits on (a quarter of each side)."""
    return (width / 4.0, height / 4.0)


def rotation_offset(n: int) -> float:
    """
    Angular offset applied to every vertex so the shape keeps a stable
    orientation as n changes.
    """
    return math.pi * (2.0 / n - 0.5)


def polygon_vertices(n: int, width: float, height: float) -> List[Vec2]:
    """
    Return n points spaced evenly on the ellipse inscribed in the central
    half of a width x height box. Vertex 0 comes first; callers guarantee
    n >= 3.
    """
    cx, cy = centre(width, height)
    rx, ry = radii(width, height)
    offset = rotation_offset(n)

    points: List[Vec2] = []
    for i in range(n):
        angle = 2.0 * math.pi * i / n + offset
        points.append((rx * math.cos(angle) + cx, ry * math.sin(angle) + cy))
    return points
