from __future__ import annotations

import math
from typing import Optional, Tuple

Color = Tuple[int, int, int]

MIN_WAVELENGTH = 400.0
MAX_WAVELENGTH = 700.0
WAVELENGTH_SPAN = MAX_WAVELENGTH - MIN_WAVELENGTH


def _channel(value: float) -> int:
    return int(math.floor(255 * value))


def wavelength_to_rgb(wavelength: float) -> Optional[Color]:
    """
    Convert a visible-light wavelength in nm to an (r, g, b) color, roughly
    as the human eye sees it.

    Piecewise-linear; a boundary value belongs to the lower segment and both
    neighbouring segments agree there. Outside 400..700 there is no color
    and None is returned.
    """
    wl = wavelength
    if not MIN_WAVELENGTH <= wl <= MAX_WAVELENGTH:
        return None

    if wl <= 440.0:
        red, green, blue = -(wl - 440.0) / 40.0, 0.0, 1.0
    elif wl <= 490.0:
        red, green, blue = 0.0, (wl - 440.0) / 50.0, 1.0
    elif wl <= 510.0:
        red, green, blue = 0.0, 1.0, -(wl - 510.0) / 20.0
    elif wl <= 580.0:
        red, green, blue = (wl - 510.0) / 70.0, 1.0, 0.0
    elif wl <= 645.0:
        red, green, blue = 1.0, -(wl - 645.0) / 65.0, 0.0
    else:
        red, green, blue = 1.0, 0.0, 0.0

    return (_channel(red), _channel(green), _channel(blue))


def distance_to_wavelength(distance: float, half_height: float) -> float:
    """Map a pixel distance onto 400..700 nm, one span per half screen height."""
    return MIN_WAVELENGTH + WAVELENGTH_SPAN * distance / half_height
