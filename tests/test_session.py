import numpy as np
import pytest

import wavefront_config as C
from wavefront_camera import PlotStyle, Projection
from wavefront_init import seed_ring
from wavefront_session import (
    Command, CommandKind, Frame, Session, HISTORY_BACK, HISTORY_FORWARD,
    RESET, TOGGLE_PAUSE, TOGGLE_PROJECTION,
)

VIEWPORT = (800, 600)


@pytest.fixture
def session(generator, params):
    return Session(generator, params, count=10)


def advance(session, ticks=5):
    for _ in range(ticks):
        session.update(C.UPDATE_DT)
        session.render(60.0, VIEWPORT)


def test_update_moves_points(session):
    start = session.wavefront.current()
    advance(session)
    assert session.clock.elapsed == 5 * C.TIME_STEP
    assert not np.allclose(session.wavefront.current(), start)


def test_render_frame_and_commit(session):
    session.update(C.UPDATE_DT)
    frame = session.render(30.0, VIEWPORT)
    assert isinstance(frame, Frame)
    assert frame.segments.shape == (19, 2, 2)
    assert frame.colors.shape == (19, 3)
    assert frame.width == C.DRAW_WIDTH
    np.testing.assert_array_equal(session.wavefront.previous(), session.wavefront.current())


def test_status_strings(session, params):
    status = session.status(59.994)
    assert status[0] == "fps : 59.99"
    assert status[1] == str(params)
    assert status[2] == "Camera: Orthographic"
    assert status[3] == f"Sim Speed: {C.DEFAULT_SIM_SPEED:.3f}"


@pytest.mark.parametrize("style", list(PlotStyle))
def test_change_style_is_presentation_only(session, style):
    advance(session)
    current, previous = session.wavefront.current(), session.wavefront.previous()
    history = (session.params, list(session.history.back), list(session.history.forward))
    elapsed = session.clock.elapsed

    session.apply(Command.change_style(style))

    assert session.plot_style is style
    np.testing.assert_array_equal(session.wavefront.current(), current)
    np.testing.assert_array_equal(session.wavefront.previous(), previous)
    assert (session.params, session.history.back, session.history.forward) == history
    assert session.clock.elapsed == elapsed


def test_change_style_requires_style(session):
    with pytest.raises(ValueError):
        session.apply(Command(CommandKind.CHANGE_STYLE))


def test_adjust_speed(session):
    session.apply(Command.adjust_speed(+1))
    session.apply(Command.adjust_speed(+1))
    session.apply(Command.adjust_speed(-1))
    assert session.clock.speed == pytest.approx(C.DEFAULT_SIM_SPEED + C.SIM_SPEED_STEP)


def test_reset(session):
    advance(session)
    session.apply(RESET)
    assert session.clock.elapsed == 0.0
    np.testing.assert_allclose(session.wavefront.current(), seed_ring(count=10))
    np.testing.assert_array_equal(session.wavefront.previous(), session.wavefront.current())


def test_pause_freezes_motion(session):
    advance(session, 2)
    session.apply(TOGGLE_PAUSE)
    frozen = session.wavefront.current()
    advance(session, 3)
    np.testing.assert_array_equal(session.wavefront.current(), frozen)
    session.apply(TOGGLE_PAUSE)
    assert session.clock.speed == C.DEFAULT_SIM_SPEED


def test_toggle_projection(session):
    session.apply(TOGGLE_PROJECTION)
    assert session.camera.projection is Projection.PERSPECTIVE
    session.update(C.UPDATE_DT)
    assert session.camera.position[1] == C.ORBIT_HEIGHT


def test_history_forward_then_back(session, params):
    advance(session)
    session.apply(HISTORY_FORWARD)
    assert session.params != params
    assert session.clock.elapsed == 0.0
    np.testing.assert_allclose(session.wavefront.current(), seed_ring(count=10))

    advance(session)
    session.apply(HISTORY_BACK)
    assert session.params == params
    assert session.clock.elapsed == 0.0
    assert session.history.back == []


def test_history_back_on_empty_keeps_motion(session, params):
    advance(session)
    elapsed = session.clock.elapsed
    current = session.wavefront.current()
    session.apply(HISTORY_BACK)
    assert session.params == params
    assert session.clock.elapsed == elapsed
    np.testing.assert_array_equal(session.wavefront.current(), current)


def test_unknown_command(session):
    with pytest.raises(ValueError):
        session.apply(Command("bogus"))
