import numpy as np
import pytest

from tictactoe import Mode, TurnController

from helpers import ManualScheduler


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def two_player(scheduler, rng):
    return TurnController(mode=Mode.TWO_PLAYER, scheduler=scheduler, rng=rng)


@pytest.fixture
def vs_computer(scheduler, rng):
    return TurnController(mode=Mode.VS_COMPUTER, scheduler=scheduler, rng=rng)


@pytest.fixture
def recorder():
    """Collects every event a controller publishes."""
    events = []
    return events
