"""Grid state representation and mutation helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from salvo.game.core.models import BOARD_SIZE, CellState, Coord


@dataclass(slots=True)
class Grid:
    """Numpy-backed 10x10 cell state store."""

    size: int = BOARD_SIZE
    cells: np.ndarray = field(
        default_factory=lambda: np.full((BOARD_SIZE, BOARD_SIZE), CellState.EMPTY, dtype=np.int8)
    )

    def __post_init__(self) -> None:
        if self.cells.shape != (self.size, self.size):
            self.cells = np.full((self.size, self.size), CellState.EMPTY, dtype=np.int8)

    def in_bounds(self, row: int, col: int) -> bool:
        """Return whether the cell lies on the grid."""
        return 0 <= row < self.size and 0 <= col < self.size

    def is_available(self, row: int, col: int) -> bool:
        """Return whether the cell lies on the grid and holds open water."""
        return self.in_bounds(row, col) and self.cells[row, col] == CellState.EMPTY

    def state_at(self, row: int, col: int) -> CellState:
        """Read a cell; callers check bounds first."""
        return CellState(int(self.cells[row, col]))

    def set_state(self, row: int, col: int, state: CellState) -> None:
        """Write a cell unconditionally; callers check bounds first."""
        self.cells[row, col] = state

    def cells_in_state(self, state: CellState) -> list[Coord]:
        """List cells holding ``state`` in row-major order."""
        return [Coord(int(row), int(col)) for row, col in np.argwhere(self.cells == state)]

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.cells == state))

    def snapshot(self) -> np.ndarray:
        """Return a detached copy of the raw cell array."""
        return self.cells.copy()
