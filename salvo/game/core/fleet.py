"""Fleet construction and sunk-ship tracking."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from salvo.game.core.grid import Grid
from salvo.game.core.models import (
    DEFAULT_ROSTER,
    CellState,
    Coord,
    GameStatistics,
    Orientation,
    Ship,
    ShipSpec,
)

logger = logging.getLogger(__name__)


def build_ship(ship_id: int, spec: ShipSpec, start: Coord, orientation: Orientation) -> Ship:
    """Create an unsunk ship from a roster entry."""
    return Ship(
        ship_id=ship_id,
        name=spec.name,
        start=start,
        length=spec.length,
        orientation=orientation,
    )


def build_fleet_roster(roster: Sequence[ShipSpec] = DEFAULT_ROSTER) -> list[ShipSpec]:
    """Return the ordered ships to place; identities follow this order from 1."""
    return list(roster)


def hit_count(grid: Grid, ship: Ship) -> int:
    """Count ship cells currently showing ``HIT``."""
    count = 0
    for cell in ship.cells():
        if grid.in_bounds(cell.row, cell.col) and grid.state_at(cell.row, cell.col) is CellState.HIT:
            count += 1
    return count


def update_fleet(grid: Grid, fleet: Sequence[Ship], stats: GameStatistics) -> list[Ship]:
    """Flag ships whose every cell is hit and return the newly sunk ones."""
    sunk: list[Ship] = []
    for ship in fleet:
        if ship.destroyed:
            continue
        if hit_count(grid, ship) == ship.length:
            ship.destroyed = True
            stats.ships_destroyed += 1
            sunk.append(ship)
            logger.info("ship_sunk ship_id=%d name=%s", ship.ship_id, ship.name)
    return sunk


def all_sunk(fleet: Sequence[Ship]) -> bool:
    """Return whether every ship has been destroyed."""
    return bool(fleet) and all(ship.destroyed for ship in fleet)
