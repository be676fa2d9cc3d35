"""Console input parsing for coordinates and orientations."""

from __future__ import annotations

import re

from salvo.game.core.models import BOARD_SIZE, COLUMN_LETTERS, Coord, Orientation

COORD_RE = re.compile(r"^(?P<col>[A-Za-z])(?P<row>\S+)$")

_ORIENTATION_ALIASES: dict[str, Orientation] = {
    "H": Orientation.HORIZONTAL,
    "HORIZONTAL": Orientation.HORIZONTAL,
    "V": Orientation.VERTICAL,
    "VERTICAL": Orientation.VERTICAL,
    "D": Orientation.DIAGONAL,
    "DIAGONAL": Orientation.DIAGONAL,
}


class InputParseError(ValueError):
    """Raised when console input cannot be turned into a game value."""


def parse_coordinate(text: str) -> Coord:
    """Parse ``<column letter><row>`` such as ``A5`` or ``j9`` into a coordinate."""
    raw = (text or "").strip()
    if len(raw) < 2:
        raise InputParseError("Invalid format. Use LetterRow, e.g. A5.")
    match = COORD_RE.match(raw)
    if match is None:
        raise InputParseError("Invalid format. Use LetterRow, e.g. A5.")

    letter = match.group("col").upper()
    if letter not in COLUMN_LETTERS:
        raise InputParseError(f"Invalid column. Use letters {COLUMN_LETTERS[0]} to {COLUMN_LETTERS[-1]}.")

    digits = match.group("row")
    if not (digits.isascii() and digits.isdigit()):
        raise InputParseError(f"Invalid row. Use numbers 0 to {BOARD_SIZE - 1}.")
    row = int(digits)
    if row >= BOARD_SIZE:
        raise InputParseError(f"Invalid row. Use numbers 0 to {BOARD_SIZE - 1}.")
    return Coord(row=row, col=COLUMN_LETTERS.index(letter))


def parse_orientation(text: str) -> Orientation:
    """Parse ``H``, ``V`` or ``D`` (or the full word), case-insensitive."""
    key = (text or "").strip().upper()
    orientation = _ORIENTATION_ALIASES.get(key)
    if orientation is None:
        raise InputParseError("Invalid orientation. Use H, V or D.")
    return orientation
