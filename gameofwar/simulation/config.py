"""Config — load simulation parameters from YAML files.

Board size, the RNG seed and the starting pattern live in YAML and are
parsed into a typed dataclass here, so a run can be reproduced from its
config file alone.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

PATTERNS = ("glider", "random", "empty")


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        world_width: Number of grid columns.
        world_height: Number of grid rows.
        alive_probability: Chance a cell starts alive when the board is
            randomized.
        initial_pattern: Starting board, one of ``PATTERNS``.
    """

    seed: int = 42
    world_width: int = 8
    world_height: int = 12
    alive_probability: float = 0.4
    initial_pattern: str = "glider"

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            seed=data.get("seed", cls.seed),
            world_width=data.get("world_width", cls.world_width),
            world_height=data.get("world_height", cls.world_height),
            alive_probability=data.get(
                "alive_probability",
                cls.alive_probability,
            ),
            initial_pattern=data.get("initial_pattern", cls.initial_pattern),
        )
