"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MAX_PLACEMENT_ATTEMPTS = 5
# Resolved against the working directory; later files win.
DEFAULT_ENV_FILES: tuple[str, ...] = (".salvo.env", ".salvo.env.local")


@dataclass(frozen=True, slots=True)
class GameSettings:
    """Immutable console game settings."""

    max_placement_attempts: int = DEFAULT_MAX_PLACEMENT_ATTEMPTS


def _int(name: str, default: int, *, minimum: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return minimum
    return value


def load_game_settings() -> GameSettings:
    """Load game settings from env vars."""
    return GameSettings(
        max_placement_attempts=_int(
            "SALVO_MAX_PLACEMENT_ATTEMPTS", DEFAULT_MAX_PLACEMENT_ATTEMPTS, minimum=1
        ),
    )


def load_env_file(path: str | Path, *, override_existing: bool = True) -> dict[str, str]:
    """Apply ``KEY=VALUE`` lines from ``path`` to ``os.environ``.

    Blank lines, ``#`` comments and lines without ``=`` are ignored, and one
    pair of matching quotes around a value is stripped. Returns the values
    that were written; a missing file writes nothing.
    """
    env_path = Path(path)
    if not env_path.is_file():
        return {}

    applied: dict[str, str] = {}
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        pair = _parse_env_line(raw_line)
        if pair is None:
            continue
        key, value = pair
        if not override_existing and key in os.environ:
            continue
        os.environ[key] = value
        applied[key] = value
    return applied


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str | Path] = DEFAULT_ENV_FILES
) -> dict[str, str]:
    """Load each env file in order and return the merged values written."""
    applied: dict[str, str] = {}
    for path in paths:
        applied.update(load_env_file(path, override_existing=override_existing))
    return applied


def _parse_env_line(line: str) -> tuple[str, str] | None:
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    key, sep, value = stripped.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        value = value[1:-1]
    return key, value
