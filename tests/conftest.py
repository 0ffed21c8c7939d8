"""Shared fixtures for termarcade tests."""

import pytest

from termarcade.config.settings import get_settings
from termarcade.core.geometry import Size
from termarcade.core.input import Keys
from termarcade.games.base import GameContext
from termarcade.games.solution import Solution


@pytest.fixture
def keys():
    """Fresh key state with nothing held."""
    return Keys()


@pytest.fixture(scope="session")
def shared_solution():
    """Read-only solution; building one generates the whole window."""
    return Solution()


@pytest.fixture
def solution():
    """Solution that a test is free to advance."""
    return Solution()


@pytest.fixture
def make_context(keys, shared_solution):
    """Build a GameContext for a canvas of the given size."""
    def _make(width=100, height=40, solution=None, event_bus=None):
        return GameContext(
            size=Size(width, height),
            keys=keys,
            solution=solution or shared_solution,
            event_bus=event_bus,
        )
    return _make


@pytest.fixture
def clean_settings(monkeypatch, tmp_path):
    """Isolate settings from the environment and any local .env file."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
