import pytest
from eyeview import Camera

@pytest.fixture
def camera():
    """The demonstration setup: eye at (50, 50, 0) looking along azimuth 225."""
    return Camera(eye=(50, 50, 0), azimuth=225, altitude=0, distance=2, size=1)

@pytest.fixture
def axis_camera():
    """Eye at the origin looking down +X; B-A = (0, -1, 0) and C-A = (0, 0, 1)."""
    return Camera(eye=(0, 0, 0), azimuth=0, altitude=0, distance=10, size=1)
