"""Grid — the bounded board the simulation runs on.

The Grid owns a rectangle of cells and answers the spatial questions the
life rules need: bounds-checked access, the clipped 8-neighbourhood of a
position, and a read-only traversal used by whatever draws the board.
Edges do not wrap.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field, replace

from gameofwar.world.cell import Cell, Team

MIN_SIZE = 2

# Corner, edge and interior positions respectively.
_VALID_NEIGHBOUR_COUNTS = frozenset({3, 5, 8})

_OFFSETS = [
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
]

_SYMBOLS = {Team.RED: "R", Team.BLUE: "B", Team.NEUTRAL: "N"}


class TopologyError(RuntimeError):
    """A position produced a neighbourhood that cannot exist on the board."""


@dataclass
class Grid:
    """A fixed-size 2D board of cells.

    Attributes:
        width: Number of columns (at least 2).
        height: Number of rows (at least 2).
        cells: 2D list of Cell objects indexed as ``cells[y][x]``.
    """

    width: int
    height: int
    cells: list[list[Cell]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the dimensions and fill the board with dead cells."""
        if self.width < MIN_SIZE or self.height < MIN_SIZE:
            msg = (
                f"grid must be at least {MIN_SIZE}x{MIN_SIZE}, "
                f"got {self.width}x{self.height}"
            )
            raise ValueError(msg)
        self.cells = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    @property
    def shape(self) -> tuple[int, int]:
        """Grid dimensions as ``(width, height)``."""
        return (self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` lies on the board."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell | None:
        """Return a copy of the cell at ``(x, y)``.

        Args:
            x: Column index; may be negative.
            y: Row index; may be negative.

        Returns:
            A detached copy of the cell, or None when off the board.
        """
        if not self.in_bounds(x, y):
            return None
        return replace(self.cells[y][x])

    def get_mut(self, x: int, y: int) -> Cell | None:
        """Return the stored cell at ``(x, y)`` for in-place edits.

        Returns:
            The live Cell, or None when off the board.
        """
        if not self.in_bounds(x, y):
            return None
        return self.cells[y][x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Store a copy of ``cell`` at ``(x, y)``.

        Writes outside the board are ignored.  Both coordinates must be in
        range for the write to happen.
        """
        if not self.in_bounds(x, y):
            return
        self.cells[y][x] = replace(cell)

    def neighbours(self, cx: int, cy: int) -> list[Cell]:
        """Return copies of the cells surrounding ``(cx, cy)``.

        Positions off the board are skipped, so a corner has 3 neighbours,
        an edge 5 and an interior cell 8.

        Args:
            cx: Column index of the centre.
            cy: Row index of the centre.

        Raises:
            IndexError: If the centre is off the board.
            TopologyError: If the neighbourhood size is not 3, 5 or 8.
        """
        if not self.in_bounds(cx, cy):
            msg = f"({cx}, {cy}) out of bounds for {self.width}x{self.height}"
            raise IndexError(msg)

        result: list[Cell] = []
        for dx, dy in _OFFSETS:
            cell = self.get(cx + dx, cy + dy)
            if cell is not None:
                result.append(cell)

        if len(result) not in _VALID_NEIGHBOUR_COUNTS:
            msg = (
                "unexpected number of neighbours: expected 3, 5 or 8, "
                f"got {len(result)} at ({cx}, {cy})"
            )
            raise TopologyError(msg)
        return result

    def iterate(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield ``(x, y, cell)`` for every position, x varying fastest.

        Cells are copies; the traversal never touches the board.
        """
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                yield x, y, replace(cell)

    def clear(self) -> None:
        """Kill every cell."""
        for row in self.cells:
            for cell in row:
                cell.kill()

    def copy(self) -> Grid:
        """Return an independent deep copy of this grid."""
        clone = Grid(width=self.width, height=self.height)
        clone.copy_from(self)
        return clone

    def copy_from(self, other: Grid) -> None:
        """Overwrite every cell with the matching cell of ``other``.

        Raises:
            ValueError: If the grids have different dimensions.
        """
        if other.shape != self.shape:
            msg = f"grid dimensions don't match: {other.shape} vs {self.shape}"
            raise ValueError(msg)
        for row, source_row in zip(self.cells, other.cells):
            for cell, source in zip(row, source_row):
                cell.alive = source.alive
                cell.team = source.team

    @property
    def population(self) -> int:
        """Number of living cells."""
        return sum(cell.alive for row in self.cells for cell in row)

    def team_counts(self) -> dict[Team, int]:
        """Count living cells per team (every team is present as a key)."""
        counts = Counter(cell.team for row in self.cells for cell in row if cell.alive)
        return {team: counts[team] for team in Team}

    def __str__(self) -> str:
        """Render the board: ``.`` for dead, ``R``/``B``/``N`` for living cells."""
        return "\n".join(
            "".join(_SYMBOLS[cell.team] if cell.alive else "." for cell in row)
            for row in self.cells
        )
