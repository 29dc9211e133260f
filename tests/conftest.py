# tests/conftest.py
import pytest

from grid_pathfinder.core.map import Map
from grid_pathfinder.utils import observer


@pytest.fixture(autouse=True)
def _clear_observer():
    observer._step_durations.clear()
    observer._events.clear()
    yield
    observer._step_durations.clear()
    observer._events.clear()


@pytest.fixture
def open_3x3() -> Map:
    m = Map(3, 3)
    m.start_tile = (0, 0)
    m.end_tile = (2, 2)
    return m


@pytest.fixture
def walled_map() -> Map:
    """6x5 map with walls; the only way round goes through the top row."""
    m = Map.from_rows(
        [
            [0.0, 0.0, 0.0, 1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0, 1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0, 0.0, 0.0, 0.5],
            [0.0, 1.0, 1.0, 1.0, 0.2, 0.0],
            [0.0, 0.0, 0.0, 1.0, 0.0, 0.0],
        ]
    )
    m.start_tile = (0, 0)
    m.end_tile = (5, 4)
    return m
