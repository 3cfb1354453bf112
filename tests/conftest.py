"""
conftest.py
-----------
Shared pytest configuration and fixtures for wrath tests.

Contains:
- Headless SDL setup so pygame never opens a window
- Simulation fixtures with a fixed seed
- Fake persistence adapter
"""

import os
import random

import pytest
from unittest.mock import MagicMock

# Must be set before pygame creates any display or audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from wrath.core.debug.debug_logger import LoggerConfig  # noqa: E402
from wrath.core.runtime.simulation_config import SimulationConfig  # noqa: E402
from wrath.scenes.state_machine import GameStateMachine  # noqa: E402
from wrath.simulation import new_simulation  # noqa: E402

TEST_SEED = 1234


@pytest.fixture(autouse=True)
def quiet_logger():
    """Silence console logging for every test."""
    previous = LoggerConfig.ENABLE_LOGGING
    LoggerConfig.ENABLE_LOGGING = False
    yield
    LoggerConfig.ENABLE_LOGGING = previous


# ===========================================================
# Simulation Fixtures
# ===========================================================

@pytest.fixture
def config():
    """Default gameplay config (800x600, circle 32)."""
    return SimulationConfig()


@pytest.fixture
def sim(config):
    """Fresh simulation state in the main menu with a fixed seed."""
    return new_simulation(config, high_score=0, seed=TEST_SEED)


@pytest.fixture
def playing_sim(sim):
    """Simulation already reset and in the PLAYING state."""
    from wrath.scenes.game_state import GameState
    sim.reset()
    sim.state = GameState.PLAYING
    return sim


@pytest.fixture
def rng():
    return random.Random(TEST_SEED)


@pytest.fixture
def mock_highscore_store():
    """Persistence adapter that records saves without touching disk."""
    store = MagicMock()
    store.load.return_value = 0
    store.save.return_value = True
    return store


@pytest.fixture
def state_machine(config, mock_highscore_store):
    return GameStateMachine(config, mock_highscore_store)


@pytest.fixture
def never_spawn(state_machine):
    """Disable obstacle spawning so frames are deterministic."""
    state_machine.spawner.should_spawn = lambda rng: False
    return state_machine


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to everything not marked integration."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
