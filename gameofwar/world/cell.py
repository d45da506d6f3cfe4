"""Cell — a single square of the board and its team affiliation.

A cell is either alive or dead.  Living cells belong to a team; newborn
cells take their team from the living neighbours that caused the birth.
Dead cells keep a team value too (``NEUTRAL`` by default) so nothing in
the rules ever reads an unset field.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class Team(Enum):
    """Which side a living cell fights for."""

    RED = "red"
    BLUE = "blue"
    NEUTRAL = "neutral"


def inherit_team(parents: Iterable[Cell]) -> Team:
    """Decide the team of a cell born from ``parents``.

    A team claims the newborn only when none of the parents belongs to
    the opposing team.  Contested births, and births with no coloured
    parent at all, are neutral.  Neutral parents never veto.

    Args:
        parents: The living neighbours that caused the birth.

    Returns:
        The newborn's team.
    """
    counts = Counter(parent.team for parent in parents)
    red = counts[Team.RED]
    blue = counts[Team.BLUE]

    if red > 0 and blue == 0:
        return Team.RED
    if blue > 0 and red == 0:
        return Team.BLUE
    return Team.NEUTRAL


@dataclass
class Cell:
    """A single square of the board.

    Attributes:
        alive: Whether the cell is currently alive.
        team: Team affiliation; only meaningful while alive.
    """

    alive: bool = False
    team: Team = Team.NEUTRAL

    def inherit_from(self, parents: Iterable[Cell]) -> None:
        """Take the team decided by :func:`inherit_team`."""
        self.team = inherit_team(parents)

    def kill(self) -> None:
        """Mark the cell dead and drop its team."""
        self.alive = False
        self.team = Team.NEUTRAL
