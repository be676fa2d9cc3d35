"""Grid, placement, attack pattern and fleet tracking rules."""

from salvo.game.core.attack import AttackReport, ShotOutcome, ShotRecord, apply_attack
from salvo.game.core.fleet import all_sunk, build_fleet_roster, build_ship, update_fleet
from salvo.game.core.grid import Grid
from salvo.game.core.models import (
    BOARD_SIZE,
    DEFAULT_ROSTER,
    CellState,
    Coord,
    GameStatistics,
    Orientation,
    PlacementError,
    Ship,
    ShipSpec,
)
from salvo.game.core.patterns import AttackShape, generate_pattern
from salvo.game.core.placement import PlacementResult, place_ship
from salvo.game.core.session import (
    ATTACK_SEQUENCE,
    GameSession,
    create_session,
    launch_attack,
    next_ship_spec,
    place_next_ship,
)

__all__ = [
    "ATTACK_SEQUENCE",
    "BOARD_SIZE",
    "DEFAULT_ROSTER",
    "AttackReport",
    "AttackShape",
    "CellState",
    "Coord",
    "GameSession",
    "GameStatistics",
    "Grid",
    "Orientation",
    "PlacementError",
    "PlacementResult",
    "Ship",
    "ShipSpec",
    "ShotOutcome",
    "ShotRecord",
    "all_sunk",
    "apply_attack",
    "build_fleet_roster",
    "build_ship",
    "create_session",
    "generate_pattern",
    "launch_attack",
    "next_ship_spec",
    "place_next_ship",
    "place_ship",
    "update_fleet",
]
