from __future__ import annotations

import logging

import pytest

import salvo.main as main_module


def test_main_exits_with_game_code(monkeypatch, scripted_io) -> None:
    io = scripted_io()
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    monkeypatch.setattr(main_module, "StdConsoleIO", lambda: io)
    monkeypatch.setattr(main_module, "load_default_env_files", lambda: {"SALVO_LOG_LEVEL": "ERROR"})
    monkeypatch.delenv("SALVO_LOG_FILE", raising=False)
    try:
        with pytest.raises(SystemExit) as exc_info:
            main_module.main()
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)
    assert exc_info.value.code == 1
    assert "Input closed" in io.text
