from __future__ import annotations

import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


def document_key(path: Path | str) -> str:
    # "data/../data/restaurants.json" and an absolute spelling must share one lock.
    return str(Path(path).expanduser().resolve())


class DocumentLockRegistry:
    """
    One lock per restaurant document, shared by every store in the process that points at it.

    Only single reads and single writes are guarded; a load-mutate-save cycle is not.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(self, path: Path | str) -> threading.Lock:
        key = document_key(path)
        with self._guard:
            return self._locks.setdefault(key, threading.Lock())

    @contextmanager
    def hold(self, path: Path | str) -> Iterator[None]:
        with self.lock_for(path):
            yield

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


DOCUMENT_LOCKS = DocumentLockRegistry()
