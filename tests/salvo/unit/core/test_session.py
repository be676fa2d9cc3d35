import pytest

from salvo.game.core.models import CellState, Coord, Orientation, PlacementError
from salvo.game.core.patterns import AttackShape
from salvo.game.core.session import (
    ATTACK_SEQUENCE,
    GameSession,
    create_session,
    launch_attack,
    next_ship_spec,
    place_next_ship,
)


def test_create_session_defaults() -> None:
    session = create_session()
    assert session.grid.count(CellState.EMPTY) == 100
    assert session.fleet == []
    assert next_ship_spec(session).name == "Battleship"
    assert ATTACK_SEQUENCE == (AttackShape.CONE, AttackShape.CROSS, AttackShape.DIAMOND)


def test_failed_placement_does_not_grow_fleet() -> None:
    session = create_session()
    result = place_next_ship(session, Coord(0, 8), Orientation.HORIZONTAL)
    assert result.error is PlacementError.OUT_OF_BOUNDS
    assert session.fleet == []
    assert next_ship_spec(session).name == "Battleship"


def test_identities_follow_placement_order(placed_session: GameSession) -> None:
    assert [ship.ship_id for ship in placed_session.fleet] == [1, 2, 3, 4]
    assert [ship.length for ship in placed_session.fleet] == [4, 3, 3, 2]
    assert placed_session.fleet_complete
    assert next_ship_spec(placed_session) is None
    with pytest.raises(RuntimeError):
        place_next_ship(placed_session, Coord(9, 0), Orientation.HORIZONTAL)


def test_launch_attack_records_report(placed_session: GameSession) -> None:
    report = launch_attack(placed_session, AttackShape.CONE, Coord(6, 1))
    assert placed_session.reports == [report]
    assert report.shots_attempted == 8
    assert report.hits == 3
    assert [ship.name for ship in report.sunk] == ["Destroyer"]
    assert placed_session.stats.ships_destroyed == 1
    assert not placed_session.all_sunk
