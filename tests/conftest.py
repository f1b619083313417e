from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

import stockroom.config.settings as settings_module
from stockroom.logging_config import LOG_NAME, JsonFormatter


def _drop_handlers() -> None:
    logger = logging.getLogger(LOG_NAME)
    for handler in logger.handlers[:]:
        if not isinstance(handler.formatter, JsonFormatter):
            continue
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Point settings at a temp dir and start every test with a clean logger."""
    monkeypatch.setenv("STOCKROOM_LOG_FILE", str(tmp_path / "logs" / "app.log"))
    monkeypatch.setenv("STOCKROOM_DATA_FILE", str(tmp_path / "inventory.json"))
    monkeypatch.delenv("STOCKROOM_LOG_LEVEL", raising=False)
    monkeypatch.delenv("STOCKROOM_ATOMIC_SAVE", raising=False)
    monkeypatch.setattr(settings_module, "_settings", None)
    _drop_handlers()
    yield
    _drop_handlers()
