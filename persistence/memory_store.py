from __future__ import annotations

import threading
from typing import Any, Iterable, Sequence

from .interfaces import RestaurantStore
from .restaurant_state import Restaurant, RestaurantDoc


class InMemoryRestaurantStore(RestaurantStore):
    """
    Keeps the collection as plain JSON-like dicts, so callers only ever get copies
    and must save() to make a change visible, exactly like the disk store.
    """

    def __init__(self, initial: Iterable[Restaurant | dict[str, Any]] = ()):
        self._lock = threading.Lock()
        self._doc = RestaurantDoc.from_disk_doc(
            [r.model_dump(mode="json") if isinstance(r, Restaurant) else r for r in initial]
        ).to_disk_doc()
        self.save_count = 0

    def load(self) -> list[Restaurant]:
        with self._lock:
            return RestaurantDoc.from_disk_doc(self._doc).restaurants

    def save(self, records: Sequence[Restaurant]) -> None:
        doc = RestaurantDoc(restaurants=list(records)).to_disk_doc()
        with self._lock:
            self._doc = doc
            self.save_count += 1

    def snapshot(self) -> list[dict[str, Any]]:
        with self._lock:
            return [dict(r) for r in self._doc]
