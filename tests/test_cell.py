"""Tests for gameofwar.world.cell — the cell model and team inheritance."""

import pytest

from gameofwar.world.cell import Cell, Team, inherit_team


def _parents(*teams: Team) -> list[Cell]:
    return [Cell(alive=True, team=team) for team in teams]


class TestCell:
    """Tests for the Cell dataclass."""

    def test_default_values(self) -> None:
        cell = Cell()
        assert cell.alive is False
        assert cell.team is Team.NEUTRAL

    def test_kill_resets_team(self) -> None:
        cell = Cell(alive=True, team=Team.RED)
        cell.kill()
        assert cell.alive is False
        assert cell.team is Team.NEUTRAL

    def test_inherit_from_sets_team(self) -> None:
        cell = Cell(alive=True)
        cell.inherit_from(_parents(Team.BLUE, Team.BLUE, Team.NEUTRAL))
        assert cell.team is Team.BLUE


class TestInheritTeam:
    """Tests for the contested-territory inheritance rule."""

    @pytest.mark.parametrize(
        ("teams", "expected"),
        [
            ((Team.RED, Team.RED, Team.RED), Team.RED),
            ((Team.BLUE, Team.BLUE, Team.BLUE), Team.BLUE),
            ((Team.RED, Team.NEUTRAL, Team.NEUTRAL), Team.RED),
            ((Team.BLUE, Team.BLUE, Team.NEUTRAL), Team.BLUE),
            ((Team.RED, Team.RED, Team.BLUE), Team.NEUTRAL),
            ((Team.RED, Team.BLUE, Team.BLUE), Team.NEUTRAL),
            ((Team.NEUTRAL, Team.NEUTRAL, Team.NEUTRAL), Team.NEUTRAL),
        ],
    )
    def test_three_parents(self, teams: tuple[Team, ...], expected: Team) -> None:
        assert inherit_team(_parents(*teams)) is expected

    def test_single_opponent_vetoes_larger_group(self) -> None:
        parents = _parents(*([Team.RED] * 7), Team.BLUE)
        assert inherit_team(parents) is Team.NEUTRAL

    def test_no_parents_is_neutral(self) -> None:
        assert inherit_team([]) is Team.NEUTRAL

    def test_accepts_generator(self) -> None:
        parents = (cell for cell in _parents(Team.RED, Team.RED))
        assert inherit_team(parents) is Team.RED
