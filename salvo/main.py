"""Application entry point."""

import logging

from salvo.game.app.console import ConsoleGame, StdConsoleIO
from salvo.game.infra.config import load_default_env_files, load_game_settings
from salvo.game.infra.logging import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the Salvo console game."""
    env_values = load_default_env_files()
    setup_logging()
    if env_values:
        logger.debug("env_files_applied keys=%s", ",".join(sorted(env_values)))
    settings = load_game_settings()
    logger.info("starting max_placement_attempts=%d", settings.max_placement_attempts)
    raise SystemExit(ConsoleGame(StdConsoleIO(), settings).run())


if __name__ == "__main__":
    main()
