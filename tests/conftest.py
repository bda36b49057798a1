"""Pytest fixtures for tests."""

import random

import pytest

from colorcore import ColorValue


SAMPLE_COLORS = [
    ColorValue(red=0.0, green=0.0, blue=0.0),
    ColorValue(red=1.0, green=1.0, blue=1.0),
    ColorValue(red=1.0, green=0.0, blue=0.0),
    ColorValue(red=0.0, green=1.0, blue=0.0),
    ColorValue(red=0.0, green=0.0, blue=1.0),
    ColorValue(red=0.5, green=0.5, blue=0.5),
    ColorValue(red=0.2, green=0.4, blue=0.6, alpha=0.3),
    ColorValue(red=0.9, green=0.75, blue=0.1),
    ColorValue(red=0.01, green=0.02, blue=0.03),
    ColorValue(red=0.33, green=0.0, blue=0.66, alpha=0.0),
]


@pytest.fixture(params=SAMPLE_COLORS, ids=lambda c: f"rgba({c.red},{c.green},{c.blue},{c.alpha})")
def sample_color(request):
    """A color from a fixed set covering primaries, grays and dark values."""
    return request.param


@pytest.fixture
def rng():
    """Seeded random source so generated colors are reproducible."""
    return random.Random(1234)
