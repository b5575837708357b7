"""Animation state machine and its interval timer."""

from __future__ import annotations

import pytest

from chaosgame.animation import (
    BACKWARD,
    FORWARD,
    AnimationController,
    AnimationState,
    IntervalTimer,
)
from chaosgame.config import ChaosConfig


@pytest.fixture
def limits() -> ChaosConfig:
    return ChaosConfig()


def _paused(cfg: ChaosConfig, vertices: int, scale: float, step: float = 0.005) -> AnimationController:
    return AnimationController(
        cfg,
        start=AnimationState(vertices=vertices, scale=scale, step=step, running=False),
    )


# ---------------------------------------------------------------------------
# IntervalTimer


def test_timer_start_and_stop_are_guarded() -> None:
    timer = IntervalTimer(5)

    assert timer.start() is True
    assert timer.start() is False
    assert timer.active

    assert timer.stop() is True
    assert timer.stop() is False
    assert not timer.active


def test_timer_poll_coalesces_late_ticks() -> None:
    """A long frame yields one tick, not a burst."""
    timer = IntervalTimer(10)
    timer.start()

    assert timer.poll(4) is False
    assert timer.poll(6) is True
    assert timer.poll(35) is True
    assert timer.poll(0) is False


def test_stopped_timer_never_fires() -> None:
    timer = IntervalTimer(1)
    assert timer.poll(100) is False


# ---------------------------------------------------------------------------
# Controller


def test_initial_state(limits: ChaosConfig) -> None:
    ctl = AnimationController(limits)
    s = ctl.state

    assert (s.vertices, s.scale, s.step) == (3, 0.3, 0.005)
    assert s.color_mode is True
    assert s.running is True
    assert ctl.timer.active


def test_state_is_a_copy(limits: ChaosConfig) -> None:
    ctl = AnimationController(limits)
    ctl.state.scale = 99.0
    assert ctl.state.scale == 0.3


def test_tick_advances_scale(limits: ChaosConfig) -> None:
    ctl = AnimationController(limits)

    assert ctl.tick() is True
    assert ctl.state.scale == pytest.approx(0.305)
    assert ctl.state.vertices == 3


def test_tick_bounces_off_the_upper_limit(limits: ChaosConfig) -> None:
    ctl = AnimationController(
        limits, start=AnimationState(vertices=5, scale=1.602, step=0.005, running=True)
    )

    assert ctl.tick() is True
    s = ctl.state
    assert s.vertices == 6
    assert s.step == pytest.approx(-0.005)
    assert s.scale == pytest.approx(1.597)


def test_tick_bounces_off_the_lower_limit(limits: ChaosConfig) -> None:
    ctl = AnimationController(
        limits, start=AnimationState(vertices=4, scale=0.298, step=-0.005, running=True)
    )

    ctl.tick()
    s = ctl.state
    assert s.vertices == 5
    assert s.step == pytest.approx(0.005)
    assert s.scale == pytest.approx(0.303)


def test_poll_runs_tick_when_due(limits: ChaosConfig) -> None:
    ctl = AnimationController(limits)
    assert ctl.poll(1) is True
    assert ctl.state.scale == pytest.approx(0.305)


def test_terminal_condition_stops_the_timer(limits: ChaosConfig) -> None:
    ctl = AnimationController(
        limits, start=AnimationState(vertices=13, scale=1.61, step=0.005, running=True)
    )

    assert ctl.tick() is False
    assert ctl.running is False
    assert not ctl.timer.active
    assert ctl.poll(1000) is False
    assert ctl.state.scale == pytest.approx(1.61)


def test_full_sweep_terminates(limits: ChaosConfig) -> None:
    """Driving the timer from the start eventually exhausts the animation."""
    ctl = AnimationController(limits)

    for _ in range(100_000):
        if not ctl.running:
            break
        ctl.poll(1)
    else:
        pytest.fail("animation never finished")

    s = ctl.state
    assert s.vertices > limits.max_vertices
    assert s.scale > limits.upper_limit


def test_space_twice_is_a_no_op(limits: ChaosConfig) -> None:
    ctl = AnimationController(limits)
    ctl.tick()
    before = ctl.state

    assert ctl.toggle_run() is False
    assert ctl.running is False
    assert not ctl.timer.active

    ctl.toggle_run()
    after = ctl.state
    assert after == before
    assert ctl.timer.active


def test_space_resumes_after_exhaustion(limits: ChaosConfig) -> None:
    ctl = AnimationController(
        limits, start=AnimationState(vertices=13, scale=1.61, step=0.005, running=True)
    )
    ctl.tick()

    ctl.toggle_run()
    assert ctl.running is True
    # still exhausted, so the next tick stops again
    assert ctl.tick() is False
    assert ctl.running is False


def test_arrow_stops_the_tick(limits: ChaosConfig) -> None:
    ctl = AnimationController(limits)

    assert ctl.step_manual(FORWARD) is True
    assert ctl.running is False
    assert not ctl.timer.active
    assert ctl.poll(50) is False

    # one Space press is enough to resume
    ctl.toggle_run()
    assert ctl.running is True


@pytest.mark.parametrize(
    ("direction", "magnitude", "expected"),
    [
        (FORWARD, 1, 1.005),
        (BACKWARD, 1, 0.995),
        (FORWARD, 10, 1.05),
        (BACKWARD, 10, 0.95),
    ],
)
def test_manual_step_sizes(limits, direction, magnitude, expected) -> None:
    ctl = _paused(limits, vertices=4, scale=1.0)
    ctl.step_manual(direction, magnitude)
    assert ctl.state.scale == pytest.approx(expected)
    assert ctl.state.vertices == 4


def test_right_from_upper_limit_never_overshoots(limits: ChaosConfig) -> None:
    """Right walks the range, gaining one vertex per crossing up to the max."""
    ctl = _paused(limits, vertices=limits.min_vertices, scale=limits.upper_limit)
    seen_max_at = None

    for i in range(10_000):
        before = ctl.state.vertices
        ctl.step_manual(FORWARD, 1)
        s = ctl.state

        assert limits.lower_limit <= s.scale <= limits.upper_limit
        assert s.vertices - before in (0, 1)
        assert s.vertices <= limits.max_vertices
        if s.vertices == limits.max_vertices and seen_max_at is None:
            seen_max_at = i

    assert seen_max_at is not None
    assert ctl.state.vertices == limits.max_vertices


def test_first_right_at_upper_limit_adds_a_vertex(limits: ChaosConfig) -> None:
    ctl = _paused(limits, vertices=3, scale=limits.upper_limit)

    ctl.step_manual(FORWARD, 1)
    s = ctl.state
    assert s.vertices == 4
    assert s.step == pytest.approx(-0.005)
    assert s.scale == limits.upper_limit


def test_right_at_max_vertices_only_clamps(limits: ChaosConfig) -> None:
    ctl = _paused(limits, vertices=limits.max_vertices, scale=limits.upper_limit)

    ctl.step_manual(FORWARD, 10)
    s = ctl.state
    assert s.vertices == limits.max_vertices
    assert s.step == pytest.approx(0.005)
    assert s.scale == limits.upper_limit


def test_left_below_lower_limit_removes_a_vertex(limits: ChaosConfig) -> None:
    ctl = _paused(limits, vertices=5, scale=limits.lower_limit)

    ctl.step_manual(BACKWARD, 1)
    s = ctl.state
    assert s.vertices == 4
    assert s.step == pytest.approx(-0.005)
    assert s.scale == limits.lower_limit


def test_down_at_min_vertices_only_clamps(limits: ChaosConfig) -> None:
    ctl = _paused(limits, vertices=limits.min_vertices, scale=limits.lower_limit)

    for _ in range(20):
        ctl.step_manual(BACKWARD, 10)
        s = ctl.state
        assert s.vertices == limits.min_vertices
        assert s.scale == limits.lower_limit


def test_landing_exactly_on_a_limit_is_in_range() -> None:
    """Only strictly leaving the range changes the vertex count."""
    cfg = ChaosConfig(lower_limit=0.25, upper_limit=1.5)
    ctl = _paused(cfg, vertices=6, scale=0.5, step=0.25)

    ctl.step_manual(BACKWARD, 1)
    s = ctl.state
    assert s.scale == 0.25
    assert s.vertices == 6
    assert s.step == 0.25

    ctl = _paused(cfg, vertices=6, scale=1.0, step=0.25)
    ctl.step_manual(FORWARD, 2)
    assert ctl.state.scale == 1.5
    assert ctl.state.vertices == 6


def test_color_mode(limits: ChaosConfig) -> None:
    ctl = AnimationController(limits)

    assert ctl.set_color_mode(False) is True
    assert ctl.state.color_mode is False
    assert ctl.set_color_mode(True) is True
    assert ctl.state.color_mode is True
    # color keys leave the sweep running
    assert ctl.running is True
