"""JSON file mirror for repository snapshots.

The file holds a pretty-printed UTF-8 JSON array with one object per entity.
Records are validated against the entity model on load, so a schema
mismatch is reported as a :class:`DeserializationError` instead of leaking
half-built objects to the caller.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from stockroom.domain.exceptions import DeserializationError, SerializationError, StorageIOError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

JSON_INDENT = 2


@dataclass(frozen=True)
class LoadResult(Generic[M]):
    """Outcome of :meth:`JsonLog.load`.

    ``found`` is ``False`` only when the file does not exist, which keeps an
    absent file distinguishable from a file holding an empty array.
    """

    items: List[M] = field(default_factory=list)
    found: bool = True

    @property
    def missing(self) -> bool:
        return not self.found


class JsonLog(Generic[M]):
    """Ordered in-memory log of ``model`` records bound to one JSON file."""

    def __init__(self, path: Path | str, model: Type[M], *, atomic: bool = False) -> None:
        self._path = Path(path)
        self._model = model
        self._adapter = TypeAdapter(List[model])  # type: ignore[valid-type]
        self._atomic = atomic
        self._entries: List[M] = []

    @property
    def path(self) -> Path:
        return self._path

    def add(self, item: M) -> None:
        self._entries.append(item)

    def get_all(self) -> List[M]:
        return list(self._entries)

    def save(self, items: Optional[Sequence[M]] = None) -> None:
        """Write the in-memory sequence to the bound file, replacing it in full.

        When ``items`` is given it becomes the in-memory sequence once the
        write succeeds. Entries must be exactly of the bound model type, since
        a subclass instance would lose its extra fields; anything else raises
        :class:`SerializationError` before the file is touched. Raises
        :class:`StorageIOError` on any OS-level failure; without ``atomic`` a
        failure mid-write may leave a truncated file behind.
        """
        entries = self._entries if items is None else list(items)
        for entry in entries:
            if type(entry) is not self._model:
                raise SerializationError(
                    self._path,
                    f"Cannot save {type(entry).__name__} to a {self._model.__name__} log "
                    "without losing fields",
                )

        text = self._adapter.dump_json(entries, indent=JSON_INDENT).decode("utf-8")
        try:
            if self._atomic:
                self._replace_atomically(text)
            else:
                self._path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StorageIOError(self._path, f"Error saving data to {self._path}: {exc}") from exc

        self._entries = entries
        logger.info(
            "Data saved to file", extra={"path": str(self._path), "count": len(entries)}
        )

    def _replace_atomically(self, text: str) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def load(self) -> LoadResult[M]:
        """Read the bound file and replace the in-memory sequence with its records.

        A missing file yields ``LoadResult(items=[], found=False)`` and keeps
        the current entries. Unreadable content raises
        :class:`DeserializationError`; OS-level read failures raise
        :class:`StorageIOError`.
        """
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            logger.info("File not found, no data loaded", extra={"path": str(self._path)})
            return LoadResult(items=[], found=False)
        except OSError as exc:
            raise StorageIOError(self._path, f"Error loading data from {self._path}: {exc}") from exc

        try:
            items = self._adapter.validate_json(raw)
        except ValidationError as exc:
            raise DeserializationError(
                self._path,
                f"{self._path} does not contain valid {self._model.__name__} records: "
                f"{exc.error_count()} error(s)",
            ) from exc

        self._entries = list(items)
        logger.info(
            "Data loaded from file", extra={"path": str(self._path), "count": len(items)}
        )
        return LoadResult(items=list(items), found=True)
