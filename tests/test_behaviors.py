import math

import pytest

from behaviors import (
    DanceAttribute,
    Oscillation,
    RotateBehavior,
    ScaleBehavior,
    SineWaveBehavior,
    TreeDanceBehavior,
)
from behaviors.tree_dance import round_half_up
from core.errors import CapabilityError
from shapes import Circle, FractalTree, Point, SineWave, Triangle


def test_rotate_integrates_speed():
    circle = Circle((10, 20), 40, angle=15.0)
    rotate = RotateBehavior(circle, 90.0)
    elapsed = 0.0
    for delta in (0.1, 0.25, 0.4, 0.25):
        elapsed += delta
        rotate.update(elapsed, delta)
    assert circle.angle == pytest.approx(15.0 + 90.0)


def test_rotate_works_on_any_rotatable():
    triangle = Triangle.uniform((0, 0), [(0, 0), (1, 0), (0, 1)], (1, 0, 0))
    RotateBehavior(triangle, -45.0).update(1.0, 2.0)
    assert triangle.angle == pytest.approx(-90.0)


def test_scale_is_function_of_elapsed_time():
    circle = Circle((0, 0), 10)
    scale = ScaleBehavior(circle, base_scale=2.0, dance_amplitude=0.5, dance_frequency=3.0)
    scale.update(1.2, 0.016)
    expected = 2.0 + 0.5 * math.sin(3.0 * 1.2)
    assert circle.scale == pytest.approx(expected)
    # Same elapsed time, different history: same result
    scale.update(5.0, 0.3)
    scale.update(1.2, 0.7)
    assert circle.scale == pytest.approx(expected)


def test_sine_wave_phase_integrates_and_reverses():
    wave = SineWave((0, 0), 100.0)
    behavior = SineWaveBehavior(wave, 2.0)
    behavior.update(0.5, 0.5)
    assert wave.phase_shift == pytest.approx(1.0)
    behavior.reverse()
    behavior.update(1.0, 0.25)
    assert wave.phase_shift == pytest.approx(0.5)


@pytest.mark.parametrize(
    "factory",
    [
        lambda: RotateBehavior(Point((0, 0)), 10.0),
        lambda: ScaleBehavior(SineWave((0, 0), 10.0)),
        lambda: SineWaveBehavior(Circle((0, 0), 5), 1.0),
        lambda: TreeDanceBehavior(Circle((0, 0), 5)),
    ],
)
def test_capability_mismatch_is_rejected_at_attach(factory):
    with pytest.raises(CapabilityError):
        factory()


def test_behavior_toggle_flips_enabled():
    behavior = RotateBehavior(Circle((0, 0), 5), 1.0)
    assert behavior.toggle() is False
    assert behavior.toggle() is True


def make_tree(stream, **kwargs):
    params = dict(depth=6, length=50.0, split_angle=30.0, random_range=0.4, seed=3)
    params.update(kwargs)
    return FractalTree((0, 0), stream=stream, **params)


def test_tree_dance_oscillates_enabled_attributes(stream):
    tree = make_tree(stream)
    dance = TreeDanceBehavior(
        tree,
        split_angle=Oscillation(amplitude=10.0, frequency=2.0),
        depth=Oscillation(amplitude=2.0, frequency=1.0),
        length=Oscillation(amplitude=5.0, frequency=0.5),
    )
    t = 0.7
    dance.update(t, 0.016)
    assert tree.split_angle == pytest.approx(30.0 + 10.0 * math.sin(2.0 * t))
    assert tree.length == pytest.approx(50.0 + 5.0 * math.sin(0.5 * t))
    assert tree.depth == round_half_up(6.0 + 2.0 * math.sin(t))
    assert tree.random_range == pytest.approx(0.4)
    # base values live on the behavior, not the tree
    assert dance.base_split_angle == 30.0
    assert dance.base_depth == 6


def test_tree_dance_disabled_attribute_returns_to_base(stream):
    tree = make_tree(stream)
    dance = TreeDanceBehavior(tree, split_angle=Oscillation(amplitude=10.0, frequency=1.0))
    dance.update(1.0, 0.1)
    assert tree.split_angle != pytest.approx(30.0)
    assert dance.toggle(DanceAttribute.SPLIT_ANGLE) is False
    dance.update(2.0, 0.1)
    assert tree.split_angle == pytest.approx(30.0)


def test_tree_dance_randomness_off_makes_tree_symmetric(stream):
    tree = make_tree(stream)
    dance = TreeDanceBehavior(tree)
    dance.toggle(DanceAttribute.RANDOMNESS)
    assert not dance.is_enabled(DanceAttribute.RANDOMNESS)
    dance.update(0.5, 0.1)
    assert tree.random_range == 0.0
    dance.toggle(DanceAttribute.RANDOMNESS)
    dance.update(0.6, 0.1)
    assert tree.random_range == pytest.approx(0.4)


def test_tree_dance_toggle_twice_is_identity(stream):
    dance = TreeDanceBehavior(make_tree(stream))
    for attribute in DanceAttribute:
        before = dance.is_enabled(attribute)
        dance.toggle(attribute)
        dance.toggle(attribute)
        assert dance.is_enabled(attribute) == before


def test_tree_dance_depth_never_negative(stream):
    tree = make_tree(stream, depth=1, length=10.0)
    dance = TreeDanceBehavior(tree, depth=Oscillation(amplitude=5.0, frequency=1.0))
    dance.update(-math.pi / 2, 0.1)
    assert tree.depth == 0
    assert tree.segments() == []


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2
    assert round_half_up(-0.4) == 0
