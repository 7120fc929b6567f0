import os

# Lets pygame open windows on machines without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

import pytest  # noqa: E402

from snake_game.components.grid import Grid  # noqa: E402
from snake_game.config import GameConfig  # noqa: E402
from snake_game.constants.headings import Heading  # noqa: E402
from snake_game.schemas.state import GameState  # noqa: E402


def build_state(**overrides) -> GameState:
    """Builds a state matching a fresh default game, with overrides."""
    heading = overrides.pop("heading", Heading.RIGHT)
    values = dict(
        snake=((10, 10),),
        food=(20, 20),
        heading=heading,
        last_heading=overrides.pop("last_heading", heading),
        tick_interval_ms=100,
    )
    values.update(overrides)
    return GameState(**values)


@pytest.fixture
def make_state():
    return build_state


@pytest.fixture
def config():
    return GameConfig(seed=1234)


@pytest.fixture
def grid():
    return Grid(25)
