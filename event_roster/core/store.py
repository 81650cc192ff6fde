"""JSON-file collection store.

One :class:`CollectionStore` owns one collection file: a JSON array of
records in insertion order.  Callers always read-modify-write the whole
collection; a collection of a few thousand records is cheap enough that
no partial update exists at this layer.

Writes go to a temporary file in the same directory which is flushed,
``fsync``'d and moved over the old file with ``os.replace``, so a reader
never observes a half-written collection.

Each store carries a ``threading.RLock``.  Every helper below runs its
load-mutate-save cycle under it, and callers that compose several steps
(or several stores) hold the lock themselves for the whole sequence.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
import threading
from pathlib import Path
from typing import Any, Callable, Generic, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from event_roster.core.errors import StorageCorruptError, StorageIOError
from event_roster.core.ids import next_id

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class CollectionStore(Generic[RecordT]):
    """Persisted mapping from integer id to record for one entity kind.

    Parameters
    ----------
    path:
        Location of the collection file.  Parent directories and an empty
        collection are created on first access.
    model:
        Pydantic model every record is validated against on load.
    indent:
        JSON indentation used when writing.
    """

    def __init__(self, path: str | Path, model: Type[RecordT], indent: int = 2) -> None:
        self.path = Path(path)
        self.model = model
        self.indent = indent
        self.lock = threading.RLock()
        self._adapter = TypeAdapter(List[model])

    @property
    def name(self) -> str:
        return self.path.stem

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def ensure_exists(self) -> None:
        """Create the collection as an empty array if it is missing."""
        with self.lock:
            if self.path.exists():
                return
            logger.info("Initializing empty collection %s at %s", self.name, self.path)
            self.save([])

    def load(self) -> List[RecordT]:
        """Read every record of the collection.

        A missing file is initialized to an empty collection.  Raises
        :class:`StorageCorruptError` when the file cannot be parsed and
        :class:`StorageIOError` when it cannot be read.
        """
        with self.lock:
            self.ensure_exists()
            try:
                raw = self.path.read_bytes()
            except OSError as exc:
                logger.error("Failed to read collection %s: %s", self.path, exc)
                raise StorageIOError(f"Cannot read collection '{self.name}'", self.path) from exc

            try:
                records = self._adapter.validate_json(raw)
            except (PydanticValidationError, UnicodeDecodeError) as exc:
                logger.error("Collection %s is corrupt: %s", self.path, exc)
                raise StorageCorruptError(f"Collection '{self.name}' is corrupt", self.path) from exc

            logger.debug("Loaded %d records from %s", len(records), self.path)
            return records

    def save(self, records: Iterable[RecordT]) -> None:
        """Replace the whole collection with *records*.

        Raises :class:`StorageIOError` on failure; the previous file is
        left untouched in that case.
        """
        payload = [record.model_dump(mode="json") for record in records]
        with self.lock:
            tmp_name = None
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(
                    dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
                )
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, indent=self.indent)
                    f.flush()
                    os.fsync(f.fileno())
                os.chmod(tmp_name, self._file_mode())
                os.replace(tmp_name, self.path)
            except OSError as exc:
                logger.error("Failed to write collection %s: %s", self.path, exc)
                if tmp_name and os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise StorageIOError(f"Cannot write collection '{self.name}'", self.path) from exc

            logger.debug("Saved %d records to %s", len(payload), self.path)

    def _file_mode(self) -> int:
        """Mode for a rewritten file: the current file's, or the umask default."""
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    # ------------------------------------------------------------------
    # Record helpers
    # ------------------------------------------------------------------

    def list(self) -> List[RecordT]:
        return self.load()

    def get(self, record_id: int) -> Optional[RecordT]:
        return next((r for r in self.load() if r.id == record_id), None)

    def exists(self, record_id: int) -> bool:
        return self.get(record_id) is not None

    def find(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        return next((r for r in self.load() if predicate(r)), None)

    def insert(self, **fields: Any) -> RecordT:
        """Append a new record with a freshly allocated id."""
        with self.lock:
            records = self.load()
            record = self.model(id=next_id(records), **fields)
            records.append(record)
            self.save(records)
            return record

    def update(self, record_id: int, **changes: Any) -> Optional[RecordT]:
        """Apply *changes* to a record in place.

        The record keeps its position in the collection.  Returns ``None``
        if no record has *record_id*.
        """
        with self.lock:
            records = self.load()
            for index, current in enumerate(records):
                if current.id == record_id:
                    merged = {**current.model_dump(), **changes, "id": record_id}
                    records[index] = self.model.model_validate(merged)
                    self.save(records)
                    return records[index]
            return None

    def delete(self, record_id: int) -> Optional[RecordT]:
        """Remove one record, returning it, or ``None`` if absent."""
        with self.lock:
            records = self.load()
            remaining = [r for r in records if r.id != record_id]
            if len(remaining) == len(records):
                return None
            removed = next(r for r in records if r.id == record_id)
            self.save(remaining)
            return removed

    def delete_where(self, predicate: Callable[[RecordT], bool]) -> int:
        """Remove every record matching *predicate*; returns the count."""
        with self.lock:
            records = self.load()
            remaining = [r for r in records if not predicate(r)]
            removed = len(records) - len(remaining)
            if removed:
                self.save(remaining)
            return removed
