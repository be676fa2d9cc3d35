"""Attack pattern application and shot tallying."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

import numpy as np

from salvo.game.core.fleet import update_fleet
from salvo.game.core.grid import Grid
from salvo.game.core.models import CellState, Coord, GameStatistics, Ship
from salvo.game.core.patterns import pattern_offsets, to_absolute

logger = logging.getLogger(__name__)


class ShotOutcome(StrEnum):
    """Classification of one in-bounds pattern cell."""

    HIT = "HIT"
    WATER = "WATER"
    ALREADY_HIT = "ALREADY_HIT"
    ALREADY_WATER = "ALREADY_WATER"


@dataclass(frozen=True, slots=True)
class ShotRecord:
    """Single shot outcome."""

    coord: Coord
    outcome: ShotOutcome


@dataclass(slots=True)
class AttackReport:
    """Per-attack tally."""

    center: Coord
    shots_attempted: int = 0
    hits: int = 0
    shots: list[ShotRecord] = field(default_factory=list)
    sunk: list[Ship] = field(default_factory=list)

    @property
    def misses(self) -> int:
        """Shots that were not new hits, re-hits included."""
        return self.shots_attempted - self.hits

    @property
    def hit_rate(self) -> float:
        if self.shots_attempted == 0:
            return 0.0
        return self.hits / self.shots_attempted * 100.0


def _resolve_cell(grid: Grid, row: int, col: int) -> ShotOutcome:
    state = grid.state_at(row, col)
    if state is CellState.SHIP:
        grid.set_state(row, col, CellState.HIT)
        return ShotOutcome.HIT
    if state is CellState.EMPTY:
        grid.set_state(row, col, CellState.WATER_HIT)
        return ShotOutcome.WATER
    if state is CellState.HIT:
        return ShotOutcome.ALREADY_HIT
    return ShotOutcome.ALREADY_WATER


def apply_attack(
    grid: Grid,
    pattern: np.ndarray,
    center: Coord,
    fleet: Sequence[Ship],
    stats: GameStatistics,
) -> AttackReport:
    """Fire every affected pattern cell around ``center`` and update statistics."""
    report = AttackReport(center=center)
    for local_row, local_col in pattern_offsets(pattern):
        row, col = to_absolute(center.row, center.col, local_row, local_col)
        if not grid.in_bounds(row, col):
            continue
        outcome = _resolve_cell(grid, row, col)
        report.shots_attempted += 1
        if outcome is ShotOutcome.HIT:
            report.hits += 1
        report.shots.append(ShotRecord(Coord(row, col), outcome))

    if report.hits > 0:
        report.sunk = update_fleet(grid, fleet, stats)

    stats.total_shots += report.shots_attempted
    stats.hits += report.hits
    stats.misses += report.misses
    logger.info(
        "attack_applied center=%s shots=%d hits=%d sunk=%d",
        center.label,
        report.shots_attempted,
        report.hits,
        len(report.sunk),
    )
    return report
