"""
Pytest configuration and shared fixtures for hashbench tests.
"""
import io
import os
import sys

import pytest

# Add the parent directory to the path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class FixedSampler:
    """Sample source returning a predetermined buffer."""

    def __init__(self, data):
        self.data = list(data)
        self.requested = []

    def sample(self, count):
        self.requested.append(count)
        return self.data


class RecordingFactory:
    """Map factory that keeps a handle on every map it creates."""

    def __init__(self, map_type=dict):
        self.map_type = map_type
        self.created = []

    def __call__(self):
        hm = self.map_type()
        self.created.append(hm)
        return hm


class TickClock:
    """Clock returning scripted timestamps in order."""

    def __init__(self, *ticks):
        self.ticks = list(ticks)

    def __call__(self):
        return self.ticks.pop(0)


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def recording_factory():
    return RecordingFactory()


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "property: marks tests as property-based tests"
    )
