from pathlib import Path

import pytest

from emberwild.core.context import GameContext, Activity
from emberwild.core.state import GameSession
from emberwild.events.registry import EventRegistry


EVENTS_PATH = Path(__file__).parent.parent / "data" / "events.yaml"


@pytest.fixture
def registry() -> EventRegistry:
    registry = EventRegistry()
    registry.load_from_yaml(EVENTS_PATH)
    registry.validate_chains()
    return registry


@pytest.fixture
def session(registry) -> GameSession:
    return GameSession(seed=123, registry=registry)


@pytest.fixture
def impaired_expedition_ctx() -> GameContext:
    return GameContext(at_camp=False, activity=Activity.TRAVELING, consciousness=0.3)


@pytest.fixture
def quiet_camp_ctx() -> GameContext:
    # At camp, idle, no fire: nothing in the data set is eligible
    return GameContext(at_camp=True, activity=Activity.IDLE, fire_burning=False)
