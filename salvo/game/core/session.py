"""Game session context and turn resolution."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from salvo.game.core.attack import AttackReport, apply_attack
from salvo.game.core.fleet import all_sunk, build_fleet_roster, build_ship
from salvo.game.core.grid import Grid
from salvo.game.core.models import DEFAULT_ROSTER, Coord, GameStatistics, Orientation, Ship, ShipSpec
from salvo.game.core.patterns import AttackShape, generate_pattern
from salvo.game.core.placement import PlacementResult, place_ship

ATTACK_SEQUENCE: tuple[AttackShape, ...] = (
    AttackShape.CONE,
    AttackShape.CROSS,
    AttackShape.DIAMOND,
)


@dataclass(slots=True)
class GameSession:
    """Runtime game session state."""

    grid: Grid = field(default_factory=Grid)
    roster: list[ShipSpec] = field(default_factory=build_fleet_roster)
    fleet: list[Ship] = field(default_factory=list)
    stats: GameStatistics = field(default_factory=GameStatistics)
    reports: list[AttackReport] = field(default_factory=list)

    @property
    def fleet_complete(self) -> bool:
        return len(self.fleet) == len(self.roster)

    @property
    def all_sunk(self) -> bool:
        return all_sunk(self.fleet)


def create_session(roster: Sequence[ShipSpec] = DEFAULT_ROSTER) -> GameSession:
    """Create a session with an empty grid and the given roster."""
    return GameSession(roster=build_fleet_roster(roster))


def next_ship_spec(session: GameSession) -> ShipSpec | None:
    """Return the roster entry awaiting placement, if any."""
    if session.fleet_complete:
        return None
    return session.roster[len(session.fleet)]


def place_next_ship(session: GameSession, start: Coord, orientation: Orientation) -> PlacementResult:
    """Try to place the next roster ship; the fleet grows only on success."""
    spec = next_ship_spec(session)
    if spec is None:
        raise RuntimeError("All ships have already been placed.")
    ship = build_ship(len(session.fleet) + 1, spec, start, orientation)
    result = place_ship(session.grid, ship)
    if result.success:
        session.fleet.append(ship)
    return result


def launch_attack(session: GameSession, shape: AttackShape, center: Coord) -> AttackReport:
    """Apply ``shape`` centered on ``center`` and keep the report."""
    report = apply_attack(session.grid, generate_pattern(shape), center, session.fleet, session.stats)
    session.reports.append(report)
    return report
