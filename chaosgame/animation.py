"""
Animation state machine for the chaos game.

The sweep walks `scale` back and forth between the lower and upper limits,
adding a vertex every time it bounces off either end. The keyboard can pause
it, step it by hand, or switch coloring. All state lives on one controller;
every mutating method returns True when the canvas must be redrawn.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from chaosgame.config import ChaosConfig

logger = logging.getLogger(__name__)

FORWARD = 1
BACKWARD = -1


@dataclass
class AnimationState:
    vertices: int
    scale: float
    step: float
    color_mode: bool = True
    running: bool = False


class IntervalTimer:
    """
    Periodic trigger driven by the main loop's elapsed time.

    start() only acts when stopped and stop() only when started, so two
    timers can never be live at once. poll() reports at most one due tick
    per call: a slow frame makes the next tick late, never doubled.
    """

    def __init__(self, interval_ms: int) -> None:
        self.interval_ms = max(1, int(interval_ms))
        self.active = False
        self._elapsed_ms = 0

    def start(self) -> bool:
        if self.active:
            logger.debug("Timer already running; start ignored")
            return False
        self.active = True
        self._elapsed_ms = 0
        logger.debug("Timer started (%d ms)", self.interval_ms)
        return True

    def stop(self) -> bool:
        if not self.active:
            logger.debug("Timer already stopped; stop ignored")
            return False
        self.active = False
        self._elapsed_ms = 0
        logger.debug("Timer stopped")
        return True

    def poll(self, dt_ms: int) -> bool:
        """Advance by dt_ms; True if a tick is due."""
        if not self.active:
            return False
        self._elapsed_ms += dt_ms
        if self._elapsed_ms < self.interval_ms:
            return False
        self._elapsed_ms = 0
        return True


class AnimationController:
    def __init__(
        self,
        cfg: ChaosConfig,
        timer: IntervalTimer | None = None,
        *,
        start: AnimationState | None = None,
    ) -> None:
        """
        Begin at `start` (default: fewest vertices, lowest scale) and, if
        that state says running, start the timer.
        """
        self.cfg = cfg
        self.timer = timer or IntervalTimer(cfg.interval_ms)
        if start is None:
            start = AnimationState(
                vertices=cfg.min_vertices,
                scale=cfg.lower_limit,
                step=cfg.initial_step,
                color_mode=cfg.initial_color_mode,
                running=True,
            )
        want_running = start.running
        self._state = replace(start, running=False)
        if want_running:
            self._start()

    # ------------------------------------------------------------------ #
    # Read-only view

    @property
    def state(self) -> AnimationState:
        """A copy; mutate through the controller methods only."""
        return replace(self._state)

    @property
    def running(self) -> bool:
        return self._state.running

    def _out_of_range(self) -> bool:
        s = self._state.scale
        return s < self.cfg.lower_limit or s > self.cfg.upper_limit

    # ------------------------------------------------------------------ #
    # Run / pause: `running` is the single source of truth for the timer.

    def _start(self) -> None:
        if self._state.running:
            return
        self.timer.start()
        self._state.running = True

    def _stop(self) -> None:
        if not self._state.running:
            return
        self.timer.stop()
        self._state.running = False

    def toggle_run(self) -> bool:
        """Space: pause or resume the sweep. Never needs a redraw."""
        if self._state.running:
            self._stop()
        else:
            self._start()
        logger.info("Animation %s", "running" if self._state.running else "paused")
        return False

    def poll(self, dt_ms: int) -> bool:
        """Feed elapsed time from the main loop; runs at most one tick."""
        if self.timer.poll(dt_ms):
            return self.tick()
        return False

    # ------------------------------------------------------------------ #
    # Transitions

    def tick(self) -> bool:
        s = self._state
        cfg = self.cfg

        if s.scale > cfg.upper_limit and s.vertices > cfg.max_vertices:
            self._stop()
            logger.info("Sweep finished at %d vertices", s.vertices)
            return False

        if self._out_of_range():
            # bounce: one more vertex and reverse the sweep
            s.vertices += 1
            s.step = -s.step

        s.scale += s.step
        return True

    def step_manual(self, direction: int, magnitude: int = 1) -> bool:
        """
        Arrow keys: move scale by magnitude steps, forward (+1) or
        backward (-1). Stops the periodic tick.

        Leaving the range changes the vertex count (down when stepping
        backward, up when stepping forward, within the vertex limits) and
        reverses the step; scale is then clamped back into range.
        """
        self._stop()
        s = self._state
        cfg = self.cfg

        s.scale += direction * magnitude * s.step

        if self._out_of_range():
            if direction < 0:
                if s.vertices > cfg.min_vertices:
                    s.vertices -= 1
                    s.step = -s.step
            else:
                if s.vertices < cfg.max_vertices:
                    s.vertices += 1
                    s.step = -s.step

        s.scale = max(cfg.lower_limit, min(cfg.upper_limit, s.scale))
        return True

    def set_color_mode(self, enabled: bool) -> bool:
        self._state.color_mode = bool(enabled)
        return True
