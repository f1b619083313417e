"""Error taxonomy shared by the repository and persistence layers.

Repository failures (``DuplicateKeyError``, ``NotFoundError``,
``InvalidValueError``) and persistence failures (``StorageIOError``,
``DeserializationError``) share the ``StockroomError`` base so callers can
catch-and-report with a single ``except`` clause.
"""

from __future__ import annotations

from pathlib import Path
from typing import Hashable, Optional


class StockroomError(Exception):
    """Base class for every error raised by stockroom."""


class RepositoryError(StockroomError):
    """Raised by in-memory repository operations."""


class DuplicateKeyError(RepositoryError):
    """An entity with the same key is already stored."""

    def __init__(self, key: Hashable, *, label: str = "Item") -> None:
        super().__init__(f"{label} with ID {key} already exists.")
        self.key = key


class NotFoundError(RepositoryError, KeyError):
    """No entity is stored under the requested key."""

    def __init__(
        self, key: Hashable, message: Optional[str] = None, *, label: str = "Item"
    ) -> None:
        super().__init__(message or f"{label} with ID {key} not found.")
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class InvalidValueError(RepositoryError, ValueError):
    """A proposed field change violates the field's precondition."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class PersistenceError(StockroomError):
    """Raised by the JSON log when the backing file cannot be used."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class StorageIOError(PersistenceError):
    """Reading or writing the backing file failed at the OS level."""


class SerializationError(PersistenceError):
    """An entry cannot be written without losing fields of its model."""


class DeserializationError(PersistenceError):
    """The backing file exists but does not hold valid records."""
