"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum

BOARD_SIZE = 10
COLUMN_LETTERS = "ABCDEFGHIJ"
SHIP_LENGTHS: frozenset[int] = frozenset({2, 3, 4})


class CellState(IntEnum):
    """State of a single grid cell; values match the numeric board display."""

    EMPTY = 0
    WATER_HIT = 1
    HIT = 2
    SHIP = 3


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int

    @property
    def label(self) -> str:
        """Console label, column letter followed by row digit (``A5``)."""
        if 0 <= self.col < len(COLUMN_LETTERS):
            return f"{COLUMN_LETTERS[self.col]}{self.row}"
        return f"?{self.row}"


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "H"
    VERTICAL = "V"
    DIAGONAL = "D"

    @property
    def delta(self) -> tuple[int, int]:
        return _ORIENTATION_DELTAS[self]

    def step(self, coord: Coord) -> Coord:
        """Return the next cell along this orientation."""
        d_row, d_col = self.delta
        return Coord(coord.row + d_row, coord.col + d_col)


_ORIENTATION_DELTAS: dict[Orientation, tuple[int, int]] = {
    Orientation.HORIZONTAL: (0, 1),
    Orientation.VERTICAL: (1, 0),
    Orientation.DIAGONAL: (1, 1),
}


class PlacementError(StrEnum):
    """Reason a ship placement was rejected."""

    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    POSITION_OCCUPIED = "POSITION_OCCUPIED"


@dataclass(frozen=True, slots=True)
class ShipSpec:
    """Roster entry describing a ship still to be placed."""

    name: str
    length: int

    def __post_init__(self) -> None:
        if self.length not in SHIP_LENGTHS:
            raise ValueError(f"Unsupported ship length {self.length} for {self.name}.")


DEFAULT_ROSTER: tuple[ShipSpec, ...] = (
    ShipSpec("Battleship", 4),
    ShipSpec("Cruiser 1", 3),
    ShipSpec("Cruiser 2", 3),
    ShipSpec("Destroyer", 2),
)


@dataclass(slots=True)
class Ship:
    """A placed ship and its destruction flag."""

    ship_id: int
    name: str
    start: Coord
    length: int
    orientation: Orientation
    destroyed: bool = False

    def __post_init__(self) -> None:
        if self.length not in SHIP_LENGTHS:
            raise ValueError(f"Unsupported ship length {self.length} for {self.name}.")
        self.orientation = Orientation(self.orientation)

    def cells(self) -> list[Coord]:
        """Compute the cells covered by this ship, starting at ``start``."""
        return cells_for_ship(self.start, self.length, self.orientation)


def cells_for_ship(start: Coord, length: int, orientation: Orientation) -> list[Coord]:
    """Step ``length - 1`` times from ``start`` along ``orientation``."""
    orientation = Orientation(orientation)
    result: list[Coord] = []
    current = start
    for _ in range(length):
        result.append(current)
        current = orientation.step(current)
    return result


@dataclass(slots=True)
class GameStatistics:
    """Cumulative counters; only ever increase."""

    ships_destroyed: int = 0
    total_shots: int = 0
    hits: int = 0
    misses: int = 0

    @property
    def accuracy(self) -> float:
        """Hit percentage over all shots, 0.0 before the first shot."""
        if self.total_shots == 0:
            return 0.0
        return self.hits / self.total_shots * 100.0
