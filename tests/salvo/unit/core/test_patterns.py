import numpy as np
import pytest

from salvo.game.core.patterns import AttackShape, generate_pattern, pattern_offsets, to_absolute


@pytest.mark.parametrize(
    ("shape", "expected"),
    [(AttackShape.CONE, 9), (AttackShape.CROSS, 9), (AttackShape.DIAMOND, 5)],
)
def test_pattern_cell_counts(shape: AttackShape, expected: int) -> None:
    mask = generate_pattern(shape)
    assert mask.shape == (5, 5)
    assert mask.dtype == bool
    assert int(mask.sum()) == expected


def test_patterns_are_deterministic_and_fresh() -> None:
    first = generate_pattern(AttackShape.CONE)
    second = generate_pattern(AttackShape.CONE)
    assert np.array_equal(first, second)
    first[0, 0] = True
    assert not generate_pattern(AttackShape.CONE)[0, 0]


def test_cone_shape() -> None:
    assert pattern_offsets(generate_pattern(AttackShape.CONE)) == [
        (0, 2),
        (1, 1), (1, 2), (1, 3),
        (2, 0), (2, 1), (2, 2), (2, 3), (2, 4),
    ]


def test_cross_covers_center_row_and_column() -> None:
    offsets = set(pattern_offsets(generate_pattern(AttackShape.CROSS)))
    assert offsets == {(2, j) for j in range(5)} | {(i, 2) for i in range(5)}


def test_diamond_shape() -> None:
    assert pattern_offsets(generate_pattern(AttackShape.DIAMOND)) == [(0, 2), (1, 1), (1, 2), (1, 3), (2, 2)]


def test_shape_accepts_plain_name() -> None:
    assert np.array_equal(generate_pattern("CROSS"), generate_pattern(AttackShape.CROSS))


def test_to_absolute_translates_around_center() -> None:
    assert to_absolute(5, 5, 2, 2) == (5, 5)
    assert to_absolute(5, 5, 0, 0) == (3, 3)
    assert to_absolute(0, 0, 0, 4) == (-2, 2)
