"""Shared test fixtures for stroke outline tests."""
import math
import random
import pytest
from inkstroke.options import StrokeOptions
from inkstroke.points import to_input_points
from inkstroke.normalize import stroke_points


@pytest.fixture(scope="session")
def line3():
    """Three collinear samples along +x, 10 units apart."""
    return [[0, 0, 0.5], [10, 0, 0.5], [20, 0, 0.5]]


@pytest.fixture(scope="session")
def flat_opts():
    """Constant width 8, no streamlining."""
    return StrokeOptions(size=8, thinning=0, streamline=0)


@pytest.fixture(scope="session")
def long_line():
    """41 samples along +x, 2.5 units apart (100 units long)."""
    return [(i * 2.5, 0.0, 0.5) for i in range(41)]


@pytest.fixture(scope="session")
def wave():
    """Dense sine-wave stroke with varying pressure."""
    return [(x, 20 * math.sin(x / 15), 0.3 + 0.4 * (x % 20) / 20) for x in range(0, 200, 2)]


@pytest.fixture(scope="session")
def hairpin():
    """Stroke that runs out along +x and comes straight back."""
    out = [(x, 0.0) for x in range(0, 60, 3)]
    back = [(x, 0.5) for x in range(60, -1, -3)]
    return out + back


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture(scope="session")
def wave_path_points(wave):
    return stroke_points(to_input_points(wave), 0.5, simulate_pressure=True, size=8)
