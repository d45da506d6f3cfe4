"""Simulation — the generation-by-generation life engine.

Owns the board and advances it one generation per ``tick()`` using the
classic Life rules:

1. A living cell with fewer than 2 or more than 3 living neighbours dies.
2. A dead cell with exactly 3 living neighbours is born, taking its team
   from those neighbours (see ``inherit_team``).
3. Every other cell is carried over unchanged.

Every cell is decided against the same snapshot.  The engine keeps two
grids, writes the next generation into the spare one and swaps them at
the end of the pass.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from gameofwar.simulation.config import PATTERNS, SimulationConfig
from gameofwar.world.cell import Cell, Team
from gameofwar.world.grid import Grid

if TYPE_CHECKING:
    from numpy.random import Generator

logger = logging.getLogger(__name__)

GLIDER = [(2, 1), (3, 2), (3, 3), (2, 3), (1, 3)]

_PLAYING_TEAMS = (Team.RED, Team.BLUE)


@dataclass
class Simulation:
    """Drives the board forward one generation at a time.

    The grids are private: readers get snapshots through ``iterate()``
    and ``get()``, never the mutable board itself.

    Attributes:
        width: Number of grid columns.
        height: Number of grid rows.
        generation: Number of ticks applied so far.
    """

    width: int
    height: int
    generation: int = 0
    _grid: Grid = field(init=False, repr=False)
    _spare: Grid = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Allocate the current and spare grids."""
        self._grid = Grid(width=self.width, height=self.height)
        self._spare = Grid(width=self.width, height=self.height)

    @classmethod
    def from_grid(cls, grid: Grid) -> Simulation:
        """Build a simulation whose current generation is a copy of ``grid``.

        Args:
            grid: Starting board; later edits to it do not reach the
                simulation.
        """
        sim = cls(width=grid.width, height=grid.height)
        sim._grid.copy_from(grid)
        return sim

    @classmethod
    def from_config(cls, config: SimulationConfig) -> Simulation:
        """Build and seed a simulation from a loaded configuration.

        Args:
            config: Board size, seed and starting pattern.

        Raises:
            ValueError: If ``initial_pattern`` is not a known pattern.
        """
        if config.initial_pattern not in PATTERNS:
            msg = (
                f"unknown initial_pattern {config.initial_pattern!r}, "
                f"expected one of {', '.join(PATTERNS)}"
            )
            raise ValueError(msg)

        sim = cls(width=config.world_width, height=config.world_height)
        if config.initial_pattern == "glider":
            sim.seed_glider()
        elif config.initial_pattern == "random":
            rng = np.random.default_rng(config.seed)
            sim.randomize(rng, probability=config.alive_probability)

        logger.info(
            "Built %dx%d simulation with %s pattern (seed=%d)",
            sim.width,
            sim.height,
            config.initial_pattern,
            config.seed,
        )
        return sim

    def tick(self) -> None:
        """Advance the board by exactly one generation."""
        current = self._grid
        nxt = self._spare
        nxt.copy_from(current)

        births = 0
        deaths = 0
        for y in range(current.height):
            for x in range(current.width):
                parents = [c for c in current.neighbours(x, y) if c.alive]
                population = len(parents)
                cell = current.cells[y][x]

                if cell.alive and (population < 2 or population > 3):
                    nxt.cells[y][x].kill()
                    deaths += 1
                elif not cell.alive and population == 3:
                    newborn = nxt.cells[y][x]
                    newborn.alive = True
                    newborn.inherit_from(parents)
                    births += 1

        self._grid, self._spare = nxt, current
        self.generation += 1
        logger.debug(
            "Generation %d: population=%d births=%d deaths=%d",
            self.generation,
            self._grid.population,
            births,
            deaths,
        )

    def run(self, ticks: int) -> None:
        """Advance the board by a fixed number of generations.

        Args:
            ticks: Number of generations to apply.
        """
        for _ in range(ticks):
            self.tick()

    def clear(self) -> None:
        """Kill every cell."""
        self._grid.clear()

    def randomize(self, rng: Generator, probability: float = 0.4) -> None:
        """Refill the board at random.

        Each cell is alive with ``probability``; living cells join Red or
        Blue with equal chance, never Neutral.

        Args:
            rng: Seeded random generator.
            probability: Chance each cell will be alive (0.0 to 1.0).
        """
        for y in range(self.height):
            for x in range(self.width):
                cell = Cell()
                if rng.random() < probability:
                    cell.alive = True
                    cell.team = _PLAYING_TEAMS[int(rng.integers(len(_PLAYING_TEAMS)))]
                self._grid.set(x, y, cell)

        logger.info("Randomized board: %d cells alive", self._grid.population)

    def seed_glider(self) -> None:
        """Clear the board and place a neutral glider near the origin.

        Glider cells that do not fit on a very small board are dropped.
        """
        self.clear()
        for x, y in GLIDER:
            self._grid.set(x, y, Cell(alive=True))
        logger.info("Seeded glider: %d cells alive", self._grid.population)

    def iterate(self) -> Iterator[tuple[int, int, bool, Team]]:
        """Yield ``(x, y, alive, team)`` for every cell, x varying fastest."""
        for x, y, cell in self._grid.iterate():
            yield x, y, cell.alive, cell.team

    def get(self, x: int, y: int) -> Cell | None:
        """Return a copy of the cell at ``(x, y)``, or None off the board."""
        return self._grid.get(x, y)

    @property
    def population(self) -> int:
        """Number of living cells."""
        return self._grid.population

    def team_counts(self) -> dict[Team, int]:
        """Count living cells per team."""
        return self._grid.team_counts()

    def __str__(self) -> str:
        return str(self._grid)
