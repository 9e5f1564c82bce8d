"""Pytest configuration for path tracer tests.

Provides seeded random sources and small option sets shared by the test
modules.
"""

import logging

import pytest

from pathtracer.core.sampling import RandomSource
from pathtracer.core.vector import Vector3
from pathtracer.renderer.options import Options


@pytest.fixture
def rng():
    """A seeded random source so stochastic tests are reproducible."""
    return RandomSource(42)


@pytest.fixture
def background():
    return Vector3(0.1, 0.1, 0.1)


@pytest.fixture
def options(background):
    """Tiny render settings: 4x3 image, one bounce, few diffuse samples."""
    return Options(
        width=4,
        height=3,
        max_depth=1,
        background_color=background,
        diffuse_samples=4,
        seed=1234,
    )


@pytest.fixture(autouse=True)
def capture_logging(caplog):
    """Capture pathtracer log output at DEBUG for assertions."""
    caplog.set_level(logging.DEBUG, logger="pathtracer")
    yield
