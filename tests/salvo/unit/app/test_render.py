from salvo.game.app.render import (
    render_attack_report,
    render_grid,
    render_pattern,
    render_ship_positions,
    render_statistics,
)
from salvo.game.core.attack import AttackReport
from salvo.game.core.grid import Grid
from salvo.game.core.models import CellState, Coord, GameStatistics
from salvo.game.core.patterns import AttackShape, generate_pattern
from salvo.game.core.session import GameSession, launch_attack


def test_render_grid_shows_numeric_states(grid: Grid) -> None:
    grid.set_state(0, 0, CellState.SHIP)
    grid.set_state(9, 9, CellState.WATER_HIT)
    text = render_grid(grid)
    lines = text.splitlines()
    assert any(line.startswith(" 0 | 3  0 ") for line in lines)
    assert any(line.startswith(" 9 |") and line.endswith(" 1 |") for line in lines)
    assert " A  B  C  D  E  F  G  H  I  J " in text
    assert "Legend" in text
    assert "Legend" not in render_grid(grid, legend=False)


def test_render_ship_positions(placed_session: GameSession) -> None:
    text = render_ship_positions(placed_session.grid)
    assert "Ship position: A0" in text
    assert "Ship position: B6" in text
    assert "Total cells occupied by ships: 12" in text


def test_render_pattern_marks_affected_cells() -> None:
    text = render_pattern(AttackShape.DIAMOND, generate_pattern(AttackShape.DIAMOND))
    assert "DIAMOND" in text
    assert text.count(" * ") == 5


def test_render_attack_report_with_sunk_ship(placed_session: GameSession) -> None:
    report = launch_attack(placed_session, AttackShape.CONE, Coord(6, 1))
    text = render_attack_report(AttackShape.CONE, report)
    assert "Attack center: B6" in text
    assert "[A6] -> HIT! Ship struck" in text
    assert "'Destroyer' was completely sunk" in text
    assert "Shots fired: 8" in text
    assert "Hit rate: 37.5%" in text


def test_render_attack_report_hides_rate_without_hits() -> None:
    text = render_attack_report(AttackShape.CROSS, AttackReport(center=Coord(5, 5), shots_attempted=9))
    assert "Misses: 9" in text
    assert "Hit rate" not in text


def test_render_statistics() -> None:
    stats = GameStatistics(ships_destroyed=1, total_shots=10, hits=4, misses=6)
    text = render_statistics(stats, 4)
    assert "Total shots fired: 10" in text
    assert "Overall hit rate: 40.0%" in text
    assert "Ships destroyed: 1 of 4" in text
    assert "hit rate" not in render_statistics(GameStatistics(), 4)
