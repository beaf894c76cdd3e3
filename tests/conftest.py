"""Shared pytest fixtures for Orb Catcher tests."""
import os

# pygame must not open a real window or audio device under test
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import random

import pytest

from models import Resolution
from games.OrbCatch.config import DifficultyConfig, get_difficulty
from games.OrbCatch.orb import Orb, OrbKind, radius_for
from games.OrbCatch.run_state import RunState
from games.OrbCatch.spawner import OrbSpawner


@pytest.fixture
def playfield():
    """800x600 playfield: the fresh paddle spans x 355..445, y 550..568."""
    return Resolution(width=800, height=600)


@pytest.fixture
def normal():
    return get_difficulty('normal')


@pytest.fixture
def quiet_config():
    """Long run that never spawns on its own."""
    return DifficultyConfig(
        name='quiet',
        lives=3,
        duration=100.0,
        spawn_interval=1000.0,
        min_speed=100.0,
        max_speed=100.0,
    )


@pytest.fixture
def state(quiet_config, playfield):
    return RunState.fresh(quiet_config, playfield)


@pytest.fixture
def spawner():
    return OrbSpawner(rng=random.Random(1234))


@pytest.fixture
def make_orb():
    """Build an orb of a kind at a position, standing still by default."""
    def _make(kind=OrbKind.GOOD, x=400.0, y=555.0, fall_speed=0.0):
        return Orb(x=x, y=y, radius=radius_for(kind), fall_speed=fall_speed, kind=kind)
    return _make
