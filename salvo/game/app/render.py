"""Plain-text views of grids, patterns, attack reports and statistics."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from salvo.game.core.attack import AttackReport, ShotOutcome
from salvo.game.core.grid import Grid
from salvo.game.core.models import COLUMN_LETTERS, CellState, GameStatistics, Ship
from salvo.game.core.patterns import AttackShape

GRID_LEGEND = (
    "Legend:\n"
    "   0 = Water (empty)   3 = Ship\n"
    "   1 = Water hit       2 = Ship hit\n"
    "   Columns: A-J  |  Rows: 0-9"
)

_OUTCOME_TEXT: dict[ShotOutcome, str] = {
    ShotOutcome.HIT: "HIT! Ship struck",
    ShotOutcome.WATER: "Water",
    ShotOutcome.ALREADY_HIT: "Already hit",
    ShotOutcome.ALREADY_WATER: "Water already hit",
}


def banner(title: str, width: int = 40) -> str:
    rule = "=" * width
    return f"{rule}\n{title.center(width)}\n{rule}"


def render_grid(grid: Grid, *, title: str = "BATTLE GRID", legend: bool = True) -> str:
    """Render the grid with numeric cell states, columns A-J and rows 0-9."""
    lines = [banner(title)]
    lines.append("    " + "".join(f" {COLUMN_LETTERS[col]} " for col in range(grid.size)))
    lines.append("   +" + "---" * grid.size + "+")
    for row in range(grid.size):
        cells = "".join(f" {int(grid.cells[row, col])} " for col in range(grid.size))
        lines.append(f" {row} |{cells}|")
    lines.append("   +" + "---" * grid.size + "+")
    if legend:
        lines.append(GRID_LEGEND)
    return "\n".join(lines)


def render_ship_positions(grid: Grid) -> str:
    """List every cell occupied by a ship."""
    ship_cells = grid.cells_in_state(CellState.SHIP)
    lines = [banner("SHIP COORDINATES")]
    lines.extend(f"Ship position: {cell.label}" for cell in ship_cells)
    lines.append(f"Total cells occupied by ships: {len(ship_cells)}")
    return "\n".join(lines)


def render_pattern(shape: AttackShape, pattern: np.ndarray) -> str:
    """Render a 5x5 attack mask with ``*`` for affected cells."""
    size = pattern.shape[1]
    lines = [banner(f"ABILITY: {shape.value}")]
    lines.append("    " + "".join(f"{col:2d} " for col in range(size)))
    for row in range(pattern.shape[0]):
        marks = "".join(" * " if pattern[row, col] else " . " for col in range(size))
        lines.append(f" {row}: {marks}")
    lines.append("Legend: '*' affected, '.' not affected")
    return "\n".join(lines)


def render_attack_report(shape: AttackShape, report: AttackReport) -> str:
    """Render per-cell outcomes and the attack tally."""
    lines = [banner(f"APPLYING ABILITY: {shape.value}")]
    lines.append(f"Attack center: {report.center.label}")
    lines.append("Cells struck:")
    lines.extend(f"   [{shot.coord.label}] -> {_OUTCOME_TEXT[shot.outcome]}" for shot in report.shots)
    for ship in report.sunk:
        lines.append(f"SHIP DESTROYED! '{ship.name}' was completely sunk!")
    lines.append("Attack result:")
    lines.append(f"   Shots fired: {report.shots_attempted}")
    lines.append(f"   Hits: {report.hits}")
    lines.append(f"   Misses: {report.misses}")
    if report.hits > 0 and report.shots_attempted > 0:
        lines.append(f"   Hit rate: {report.hit_rate:.1f}%")
    return "\n".join(lines)


def render_statistics(stats: GameStatistics, fleet: Sequence[Ship] | int) -> str:
    """Render the final statistics summary."""
    fleet_size = fleet if isinstance(fleet, int) else len(fleet)
    lines = [banner("FINAL STATISTICS")]
    lines.append(f"Total shots fired: {stats.total_shots}")
    lines.append(f"Total hits: {stats.hits}")
    lines.append(f"Total misses: {stats.misses}")
    if stats.total_shots > 0:
        lines.append(f"Overall hit rate: {stats.accuracy:.1f}%")
    lines.append(f"Ships destroyed: {stats.ships_destroyed} of {fleet_size}")
    return "\n".join(lines)
