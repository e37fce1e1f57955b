import pytest

from flapcore.core.events import EventBus
from flapcore.game.controller import GameController

from helpers import FixedRandom


@pytest.fixture
def fixed_random():
    return FixedRandom()


@pytest.fixture
def hovering_controller(fixed_random):
    """Controller whose bird never falls and always fits the pipe opening.

    Bird spans 380..420, every pair opens from 300 to 480.
    """
    return GameController(gravity=0, random_source=fixed_random)


@pytest.fixture
def event_bus():
    return EventBus()
