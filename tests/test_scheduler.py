import pytest

from behaviors import PathFollowingBehavior, RotateBehavior
from core.clock import Clock, ManualTime
from core.scheduler import FrameScheduler
from shapes import Circle, Point


class Tracer:
    def __init__(self, log):
        self.log = log
        self.enabled = True
        self.target = None

    def update(self, elapsed, delta):
        self.log.append(("behavior", elapsed, delta))


class TracingPlayer:
    def __init__(self, log):
        self.log = log

    def update(self, delta):
        self.log.append(("player", delta))

    def draw(self, renderer):
        self.log.append(("draw_player",))


class Dummy:
    def draw(self, renderer):
        pass


def test_frame_order(scene, manual_time, clock):
    log = []
    dummy = scene.add(Dummy())
    tracer = Tracer(log)
    tracer.target = dummy
    scene.attach(tracer)
    scene.player = TracingPlayer(log)
    scheduler = FrameScheduler(clock, scene, redraw=lambda: log.append(("redraw",)))

    scheduler.run_frame()
    manual_time.advance(0.5)
    scheduler.run_frame()

    assert log == [
        ("behavior", 0.0, 0.0),
        ("player", 0.0),
        ("redraw",),
        ("behavior", 0.5, 0.5),
        ("player", 0.5),
        ("redraw",),
    ]


def test_circle_rotates_ninety_degrees_in_one_second(scene):
    time = ManualTime()
    clock = Clock(time_fn=time)
    circle = scene.add(Circle((10, 20), 40, angle=5.0))
    scene.attach(RotateBehavior(circle, 90.0))
    scheduler = FrameScheduler(clock, scene)

    scheduler.run_frame()  # first frame: delta 0
    for step in (0.2, 0.3, 0.1, 0.4):
        time.advance(step)
        scheduler.run_frame()
    assert clock.elapsed() == pytest.approx(1.0)
    assert circle.angle == pytest.approx(95.0)
    assert circle.position == (10, 20)


def test_path_wraps_under_scheduler(scene, manual_time, clock):
    waypoints = [(0, 0), (5, 0), (5, 5)]
    marker = scene.add(Point((0, 0)))
    path = scene.attach(PathFollowingBehavior(marker, waypoints, move_delay=0.0))
    scheduler = FrameScheduler(clock, scene)
    for _ in range(3):
        manual_time.advance(0.016)
        scheduler.run_frame()
    assert path.cursor == 0
    assert marker.position == waypoints[0]
