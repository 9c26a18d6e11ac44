"""Pytest configuration and fixtures for the scene engine tests."""

import pytest

from core.clock import Clock, ManualTime
from core.rng import new_stream
from core.scene import Scene
from fakes.recording_renderer import RecordingRenderer


@pytest.fixture
def stream():
    """Provide a deterministic shared stream."""
    return new_stream(42)


@pytest.fixture
def scene(stream):
    """Provide an empty scene registry on the deterministic stream."""
    return Scene(stream=stream)


@pytest.fixture
def manual_time():
    return ManualTime()


@pytest.fixture
def clock(manual_time):
    return Clock(time_fn=manual_time)


@pytest.fixture
def renderer():
    return RecordingRenderer()
