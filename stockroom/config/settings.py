"""Application settings for the stockroom demos.

Environment variables are loaded from a ``.env`` file using ``python-dotenv``
and exposed through a frozen Pydantic settings object. The repository core
never reads these; only the logging setup and the CLIs do.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Load environment variables from a .env file if present
load_dotenv()

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DEFAULT_DATA_FILE = Path("inventory.json")
DEFAULT_LOG_FILE = Path("logs/app.log")
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE_SET = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Immutable settings object used by the caller layer."""

    data_file: Path = DEFAULT_DATA_FILE
    log_file: Path = DEFAULT_LOG_FILE
    log_level: str = DEFAULT_LOG_LEVEL
    atomic_save: bool = False

    model_config = ConfigDict(frozen=True)


def _env_flag(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _TRUE_SET


def _build_settings() -> Settings:
    """Construct the ``Settings`` instance based on environment variables."""

    log_level = os.getenv("STOCKROOM_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in LOG_LEVELS:
        raise RuntimeError(
            f"STOCKROOM_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
        )

    return Settings(
        data_file=Path(os.getenv("STOCKROOM_DATA_FILE", str(DEFAULT_DATA_FILE))),
        log_file=Path(os.getenv("STOCKROOM_LOG_FILE", str(DEFAULT_LOG_FILE))),
        log_level=log_level,
        atomic_save=_env_flag(os.getenv("STOCKROOM_ATOMIC_SAVE")),
    )


_settings: Settings | None = None


def get_settings(*, reload: bool = False) -> Settings:
    """Return the process-wide settings, building them on first use."""
    global _settings
    if _settings is None or reload:
        _settings = _build_settings()
    return _settings
