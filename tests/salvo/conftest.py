from __future__ import annotations

import pytest

from salvo.game.core.grid import Grid
from salvo.game.core.models import Coord, GameStatistics, Orientation
from salvo.game.core.session import GameSession, create_session, place_next_ship


@pytest.fixture
def grid() -> Grid:
    return Grid()


@pytest.fixture
def stats() -> GameStatistics:
    return GameStatistics()


@pytest.fixture
def placed_session() -> GameSession:
    """Default roster laid out horizontally on rows 0, 2, 4 and 6 from column A."""
    session = create_session()
    for row in (0, 2, 4, 6):
        result = place_next_ship(session, Coord(row, 0), Orientation.HORIZONTAL)
        assert result.success
    return session


class ScriptedIO:
    """Console IO fed from a fixed list of lines."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def scripted_io():
    def _make(*lines: str) -> ScriptedIO:
        return ScriptedIO(list(lines))

    return _make
