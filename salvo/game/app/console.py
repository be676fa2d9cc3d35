"""Interactive console flow: placement, pattern preview, attacks and results."""

from __future__ import annotations

import logging
from typing import Protocol

from salvo.game.app.parsing import InputParseError, parse_coordinate, parse_orientation
from salvo.game.app.render import (
    banner,
    render_attack_report,
    render_grid,
    render_pattern,
    render_ship_positions,
    render_statistics,
)
from salvo.game.core.models import Coord, PlacementError, ShipSpec
from salvo.game.core.patterns import AttackShape, generate_pattern
from salvo.game.core.session import (
    ATTACK_SEQUENCE,
    GameSession,
    create_session,
    launch_attack,
    next_ship_spec,
    place_next_ship,
)
from salvo.game.infra.config import GameSettings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ABORTED = 1

_PLACEMENT_HINTS: dict[PlacementError, tuple[str, str]] = {
    PlacementError.OUT_OF_BOUNDS: (
        "Error: the ship leaves the board at this position!",
        "Hint: mind the ship's direction and length ({length} cells).",
    ),
    PlacementError.POSITION_OCCUPIED: (
        "Error: another ship is blocking this position!",
        "Hint: choose a free area of the board.",
    ),
}


class ConsoleIO(Protocol):
    """Line-oriented console surface."""

    def read_line(self, prompt: str) -> str: ...

    def write(self, text: str) -> None: ...


class StdConsoleIO:
    """Console IO over ``input``/``print``."""

    def read_line(self, prompt: str) -> str:
        return input(prompt)

    def write(self, text: str) -> None:
        print(text)


class PlacementAborted(Exception):
    """Raised when a ship could not be placed within the allowed attempts."""

    def __init__(self, spec: ShipSpec, attempts: int) -> None:
        super().__init__(f"Could not place {spec.name} after {attempts} attempts.")
        self.spec = spec
        self.attempts = attempts


class ConsoleGame:
    """Drives one full game session against a console."""

    def __init__(
        self,
        io: ConsoleIO,
        settings: GameSettings | None = None,
        session: GameSession | None = None,
    ) -> None:
        self._io = io
        self._settings = settings or GameSettings()
        self.session = session or create_session()

    def run(self) -> int:
        """Play the whole sequence and return a process exit code."""
        self._io.write(banner("NAVAL BATTLE - MASTER LEVEL", width=48))
        try:
            self.place_fleet()
        except PlacementAborted as exc:
            logger.error("placement_aborted ship=%s attempts=%d", exc.spec.name, exc.attempts)
            self._io.write(f"{exc} Restart the game and try again.")
            return EXIT_ABORTED
        except EOFError:
            logger.error("input_closed phase=placement")
            self._io.write("Input closed. Ending game.")
            return EXIT_ABORTED

        self._io.write(render_grid(self.session.grid))
        self._io.write(render_ship_positions(self.session.grid))
        self.show_patterns()

        try:
            self.run_attacks()
        except EOFError:
            logger.error("input_closed phase=attack")
            self._io.write("Input closed. Ending game.")
            return EXIT_ABORTED

        self._io.write(render_grid(self.session.grid, title="FINAL GRID"))
        self._io.write(render_statistics(self.session.stats, self.session.fleet))
        self._io.write(banner("END OF SIMULATION", width=48))
        return EXIT_OK

    def place_fleet(self) -> None:
        """Place every roster ship, raising ``PlacementAborted`` on exhaustion."""
        self._io.write(banner("MANUAL SHIP PLACEMENT", width=48))
        self._io.write(f"You need to place {len(self.session.roster)} ships on the board.")
        self._io.write(render_grid(self.session.grid))
        while (spec := next_ship_spec(self.session)) is not None:
            self._place_one(spec)
        self._io.write("All ships were placed successfully!")

    def _place_one(self, spec: ShipSpec) -> None:
        index = len(self.session.fleet) + 1
        self._io.write(f"PLACING SHIP {index}: {spec.name} (length {spec.length})")
        max_attempts = self._settings.max_placement_attempts
        for attempt in range(1, max_attempts + 1):
            self._io.write(f"Attempt {attempt} of {max_attempts}:")
            try:
                start = parse_coordinate(
                    self._io.read_line("Starting position (LetterRow, e.g. A5, B3, J9): ")
                )
                orientation = parse_orientation(self._io.read_line("Orientation (H/V/D): "))
            except InputParseError as exc:
                self._io.write(f"{exc} Try again.")
                continue

            result = place_next_ship(self.session, start, orientation)
            if result.success:
                self._io.write(f"{spec.name} placed successfully at {start.label}!")
                self._io.write(render_grid(self.session.grid))
                return
            if result.error is None:
                raise RuntimeError(f"Placement of {spec.name} failed without an error code.")
            message, hint = _PLACEMENT_HINTS[result.error]
            self._io.write(message)
            self._io.write(hint.format(length=spec.length))
        raise PlacementAborted(spec, max_attempts)

    def show_patterns(self) -> None:
        self._io.write(banner("SPECIAL ABILITIES", width=48))
        for shape in ATTACK_SEQUENCE:
            self._io.write(render_pattern(shape, generate_pattern(shape)))

    def run_attacks(self) -> None:
        """Read one center per ability; unreadable centers skip that ability."""
        self._io.write(banner("COMBAT START", width=48))
        for shape in ATTACK_SEQUENCE:
            center = self._read_attack_center(shape)
            if center is None:
                logger.info("attack_skipped shape=%s", shape.value)
                continue
            report = launch_attack(self.session, shape, center)
            self._io.write(render_attack_report(shape, report))

    def _read_attack_center(self, shape: AttackShape) -> Coord | None:
        self._io.write(f"Choose where to apply the {shape.value} ability:")
        try:
            return parse_coordinate(self._io.read_line("Attack center (LetterRow, e.g. A5): "))
        except InputParseError as exc:
            self._io.write(f"{exc} Skipping {shape.value}.")
            return None
