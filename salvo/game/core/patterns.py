"""Fixed 5x5 attack templates."""

from __future__ import annotations

from enum import StrEnum

import numpy as np

PATTERN_SIZE = 5
PATTERN_CENTER = PATTERN_SIZE // 2


class AttackShape(StrEnum):
    """Special attack shapes."""

    CONE = "CONE"
    CROSS = "CROSS"
    DIAMOND = "DIAMOND"


_CONE_CELLS: tuple[tuple[int, int], ...] = (
    (0, 2),
    (1, 1), (1, 2), (1, 3),
    (2, 0), (2, 1), (2, 2), (2, 3), (2, 4),
)

_DIAMOND_CELLS: tuple[tuple[int, int], ...] = (
    (0, 2),
    (1, 1), (1, 2), (1, 3),
    (2, 2),
)


def generate_pattern(shape: AttackShape) -> np.ndarray:
    """Build a fresh boolean mask for ``shape``; center is local (2, 2)."""
    shape = AttackShape(shape)
    mask = np.zeros((PATTERN_SIZE, PATTERN_SIZE), dtype=bool)
    if shape is AttackShape.CROSS:
        mask[PATTERN_CENTER, :] = True
        mask[:, PATTERN_CENTER] = True
        return mask

    cells = _CONE_CELLS if shape is AttackShape.CONE else _DIAMOND_CELLS
    for row, col in cells:
        mask[row, col] = True
    return mask


def pattern_offsets(pattern: np.ndarray) -> list[tuple[int, int]]:
    """Affected local cells in row-major order."""
    return [(int(row), int(col)) for row, col in np.argwhere(pattern)]


def to_absolute(center_row: int, center_col: int, local_row: int, local_col: int) -> tuple[int, int]:
    """Translate a local pattern cell onto the grid around the center."""
    return center_row - PATTERN_CENTER + local_row, center_col - PATTERN_CENTER + local_col
