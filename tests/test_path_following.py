import pytest

from behaviors import PathFollowingBehavior
from core.errors import CapabilityError, SceneConfigError
from shapes import Point, SineWave

WAYPOINTS = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)]


def test_target_starts_on_first_waypoint():
    marker = Point((99, 99))
    path = PathFollowingBehavior(marker, WAYPOINTS)
    assert path.cursor == 0
    assert marker.position == (0.0, 0.0)


def test_zero_delay_steps_every_update_and_wraps():
    marker = Point((0, 0))
    path = PathFollowingBehavior(marker, WAYPOINTS, move_delay=0.0)
    path.update(0.0, 0.0)
    assert path.cursor == 1
    assert marker.position == WAYPOINTS[1]
    path.update(0.0, 0.0)
    path.update(0.0, 0.0)
    assert path.cursor == 0
    assert marker.position == WAYPOINTS[0]


def test_dwell_keeps_fractional_overshoot():
    marker = Point((0, 0))
    path = PathFollowingBehavior(marker, WAYPOINTS, move_delay=1.0)
    for i in range(3):
        path.update(0.4 * (i + 1), 0.4)
    assert path.cursor == 1
    assert path.accumulator == pytest.approx(0.2)


def test_no_step_until_delay_exceeded():
    marker = Point((0, 0))
    path = PathFollowingBehavior(marker, WAYPOINTS, move_delay=1.0)
    path.update(0.5, 0.5)
    path.update(1.0, 0.5)
    # accumulator == delay is not strictly greater
    assert path.cursor == 0
    path.update(1.1, 0.1)
    assert path.cursor == 1


def test_paused_freezes_state():
    marker = Point((0, 0))
    path = PathFollowingBehavior(marker, WAYPOINTS, move_delay=1.0)
    path.update(0.7, 0.7)
    assert path.toggle() is False
    for _ in range(10):
        path.update(5.0, 1.0)
    assert path.cursor == 0
    assert path.accumulator == pytest.approx(0.7)
    path.toggle()
    path.update(6.0, 0.4)
    assert path.cursor == 1
    assert path.accumulator == pytest.approx(0.1)


def test_single_waypoint_stays_put():
    marker = Point((3, 3))
    path = PathFollowingBehavior(marker, [(5.0, 5.0)])
    path.update(0.0, 0.0)
    assert path.cursor == 0
    assert marker.position == (5.0, 5.0)


def test_empty_path_fails():
    with pytest.raises(SceneConfigError):
        PathFollowingBehavior(Point((0, 0)), [])


def test_negative_delay_fails():
    with pytest.raises(SceneConfigError):
        PathFollowingBehavior(Point((0, 0)), WAYPOINTS, move_delay=-1.0)


def test_target_must_be_movable():
    class Static:
        def draw(self, renderer):
            pass

    with pytest.raises(CapabilityError):
        PathFollowingBehavior(Static(), WAYPOINTS)


def test_any_movable_shape_can_follow():
    wave = SineWave((0, 0), 20.0)
    PathFollowingBehavior(wave, WAYPOINTS).update(0.0, 0.0)
    assert wave.position == WAYPOINTS[1]
