import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from settings import SimulationParams


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def still_params():
    """Nothing moves, turns, diffuses or evaporates."""
    return SimulationParams(move_speed=0.0, evaporation_speed=0.0, diffuse_speed=0.0,
                            sense_angle_difference=1.0, sense_distance=3.0, sense_size=1,
                            turn_speed=0.0)


@pytest.fixture
def default_params():
    return SimulationParams()
