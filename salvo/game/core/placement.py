"""Ship placement validation and commit."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from salvo.game.core.grid import Grid
from salvo.game.core.models import CellState, Coord, PlacementError, Ship

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlacementResult:
    """Outcome of a single placement attempt."""

    success: bool
    error: PlacementError | None = None
    cells: tuple[Coord, ...] = field(default_factory=tuple)


def validate_placement(grid: Grid, ship: Ship) -> PlacementError | None:
    """Return the first reason the ship cannot go on the grid, if any."""
    for cell in ship.cells():
        if not grid.in_bounds(cell.row, cell.col):
            return PlacementError.OUT_OF_BOUNDS
        if not grid.is_available(cell.row, cell.col):
            return PlacementError.POSITION_OCCUPIED
    return None


def place_ship(grid: Grid, ship: Ship) -> PlacementResult:
    """Validate every ship cell, then write them all or none."""
    candidates = ship.cells()
    error = validate_placement(grid, ship)
    if error is not None:
        logger.info(
            "placement_rejected ship=%s start=%s orientation=%s error=%s",
            ship.name,
            ship.start.label,
            ship.orientation.value,
            error.value,
        )
        return PlacementResult(success=False, error=error)

    for cell in candidates:
        grid.set_state(cell.row, cell.col, CellState.SHIP)
    logger.debug("placement_committed ship=%s cells=%d", ship.name, len(candidates))
    return PlacementResult(success=True, cells=tuple(candidates))
