"""Shared fixtures for the Game of War test suite."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pytest
from numpy.random import Generator

from gameofwar.simulation.config import SimulationConfig
from gameofwar.world.cell import Cell, Team
from gameofwar.world.grid import Grid

Placer = Callable[..., None]


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def small_grid() -> Grid:
    """A small 6x4 grid for fast tests."""
    return Grid(width=6, height=4)


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default simulation config (no YAML file needed)."""
    return SimulationConfig()


def _place(grid: Grid, coords: list[tuple[int, int]], team: Team = Team.NEUTRAL) -> None:
    for x, y in coords:
        grid.set(x, y, Cell(alive=True, team=team))


@pytest.fixture
def place() -> Placer:
    """Helper that marks a list of coordinates alive with one team."""
    return _place
