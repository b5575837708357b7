from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


@dataclass
class ChaosConfig:
    # 0 means "use the desktop size at start-up"
    view_width: int = 0
    view_height: int = 0
    iterations: int = 20000
    lower_limit: float = 0.3
    upper_limit: float = 1.6
    min_vertices: int = 3
    max_vertices: int = 12
    initial_step: float = 0.005
    interval_ms: int = 1  # periodic tick
    initial_color_mode: bool = True
    seed: Optional[int] = None
    font_name: str = "arial"
    font_size: int = 16
    background: Color = (255, 255, 255)
    foreground: Color = (0, 0, 0)
    max_fps: int = 0  # 0 = uncapped
    window_title: str = "Chaos game"


def _config_path() -> Path:
    """Default path of the optional overrides file."""
    return Path(__file__).resolve().parent.parent / "chaosgame.json"


def _as_int(value: Any) -> int:
    """int() that refuses bools and floats with a fractional part."""
    if isinstance(value, bool):
        raise TypeError("bool is not an integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{value!r} is not integral")
        return int(value)
    if isinstance(value, (int, str)):
        return int(value)
    raise TypeError(f"{value!r} is not an integer")


def _as_float(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeError("bool is not a number")
    if isinstance(value, (int, float, str)):
        return float(value)
    raise TypeError(f"{value!r} is not a number")


def _coerce(name: str, value: Any, default: Any) -> Any:
    if name in ("background", "foreground"):
        r, g, b = value
        return (_as_int(r), _as_int(g), _as_int(b))
    if name == "seed":
        return None if value is None else _as_int(value)
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise TypeError(f"{value!r} is not true or false")
        return value
    if isinstance(default, int):
        return _as_int(value)
    if isinstance(default, float):
        return _as_float(value)
    return str(value)


def _limits_ok(cfg: ChaosConfig) -> bool:
    return (
        cfg.lower_limit < cfg.upper_limit
        and 3 <= cfg.min_vertices <= cfg.max_vertices
        and cfg.iterations > 0
        and cfg.interval_ms > 0
    )


def apply_overrides(cfg: ChaosConfig, data: Dict[str, Any]) -> ChaosConfig:
    """
    Return a copy of cfg with the values from data applied.

    Unknown keys and values that cannot be converted are skipped with a
    warning. If the result breaks the sweep limits, the original cfg is
    returned unchanged.
    """
    known = {f.name: getattr(cfg, f.name) for f in fields(cfg)}
    changes: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown config key %r", key)
            continue
        try:
            changes[key] = _coerce(key, value, known[key])
        except (TypeError, ValueError):
            logger.warning("Ignoring bad value for %r: %r", key, value)

    updated = replace(cfg, **changes)
    if not _limits_ok(updated):
        logger.warning("Config overrides break the sweep limits; using defaults")
        return cfg
    return updated


def load_config(path: Optional[Path] = None) -> ChaosConfig:
    """
    Load config overrides from disk; fall back to defaults on error.
    """
    cfg = ChaosConfig()
    path = path or _config_path()
    if not path.exists():
        return cfg
    try:
        data = json.loads(path.read_text())
    except (OSError, ValueError) as exc:
        logger.warning("Could not read %s (%s); using defaults", path, exc)
        return cfg
    if not isinstance(data, dict):
        logger.warning("%s does not hold a JSON object; using defaults", path)
        return cfg
    logger.info("Loaded config overrides from %s", path)
    return apply_overrides(cfg, data)
