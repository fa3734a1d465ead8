"""JSON-file persistence for flat collections.

Each collection lives in one file holding a JSON array. Callers read the whole
array, mutate it in memory and write it back:

  * writes are atomic (temp file in the same directory, then moved over the
    target), so a failed write never leaves a half-written file behind;
  * read-modify-write is serialised per file by an in-process re-entrant lock
    shared by every store instance pointing at the same path. Several server
    processes sharing one data directory are still last-write-wins.

CollectionStore is the seam for swapping in a real embedded database later.
"""
import json
import logging
import os
import shutil
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from threading import Lock, RLock
from typing import Any, Dict, List

from recipez.domain.errors import StorageError

logger = logging.getLogger(__name__)

_registry_lock = Lock()
_file_locks: Dict[str, RLock] = {}


def _lock_for(path: Path) -> RLock:
    key = str(path.resolve())
    with _registry_lock:
        lock = _file_locks.get(key)
        if lock is None:
            lock = _file_locks[key] = RLock()
        return lock


class CollectionStore(ABC):
    """Read/write contract for one persisted collection."""

    name: str = "collection"

    @abstractmethod
    def read(self) -> List[Dict[str, Any]]:
        ...

    @abstractmethod
    def write(self, data: List[Dict[str, Any]]) -> None:
        ...

    @abstractmethod
    def locked(self):
        """Context manager serialising a read-modify-write cycle."""


class JsonListStore(CollectionStore):
    def __init__(self, path):
        self.path = Path(path)
        self.name = self.path.name
        self._lock = _lock_for(self.path)

    def locked(self):
        return self._lock

    def ensure_exists(self):
        """Create the data directory and an empty collection file if missing."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                logger.warning("Data file not found: %s. Creating an empty collection.", self.path)
                self.write([])
        except OSError as e:
            logger.error("Cannot initialise data file %s: %s", self.path, e)
            raise StorageError(f"Cannot initialise data file {self.path.name}") from e

    def read(self) -> List[Dict[str, Any]]:
        with self._lock:
            self.ensure_exists()
            try:
                with open(self.path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                logger.error("Invalid JSON in %s: %s", self.path, e)
                raise StorageError(f"Data file {self.path.name} is not valid JSON") from e
            except OSError as e:
                logger.error("Error reading %s: %s", self.path, e)
                raise StorageError(f"Cannot read data file {self.path.name}") from e
        if not isinstance(data, list):
            logger.error("Expected a JSON array in %s, got %s", self.path, type(data).__name__)
            raise StorageError(f"Data file {self.path.name} does not hold a list")
        return data

    def write(self, data: List[Dict[str, Any]]) -> None:
        with self._lock:
            tmp_path = None
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_path = tempfile.mkstemp(
                    dir=str(self.path.parent), prefix=f".{self.path.stem}_", suffix=".json"
                )
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    json.dump(data, tmp, indent=2, ensure_ascii=False)
                shutil.move(tmp_path, str(self.path))
            except (OSError, TypeError, ValueError) as e:
                logger.error("Error writing %s: %s", self.path, e)
                raise StorageError(f"Cannot write data file {self.path.name}") from e
            finally:
                if tmp_path and os.path.exists(tmp_path):
                    os.remove(tmp_path)


__all__ = ['CollectionStore', 'JsonListStore']
