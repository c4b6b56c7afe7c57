from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from errors import StorageError
from json_store import atomic_write_json, read_json

from .interfaces import RestaurantStore
from .locks import DOCUMENT_LOCKS
from .restaurant_state import Restaurant, RestaurantDoc

logger = logging.getLogger(__name__)


class DiskRestaurantStore(RestaurantStore):
    """
    Stores the restaurant collection as a single JSON array on disk at a fixed path.

    - Always returns a list (empty list on missing/invalid JSON).
    - Writes atomically; write failures raise StorageError.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Restaurant]:
        with DOCUMENT_LOCKS.hold(self._path):
            raw = read_json(self._path)
        return RestaurantDoc.from_disk_doc(raw).restaurants

    def save(self, records: Sequence[Restaurant]) -> None:
        doc = RestaurantDoc(restaurants=list(records)).to_disk_doc()
        with DOCUMENT_LOCKS.hold(self._path):
            try:
                atomic_write_json(self._path, doc)
            except (OSError, TypeError, ValueError, RecursionError) as e:
                logger.error("RESTAURANT SAVE: failed to write %s: %r", self._path, e)
                raise StorageError(f"Could not write {self._path.name}") from e
