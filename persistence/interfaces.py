from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from .restaurant_state import Restaurant


class RestaurantStore(Protocol):
    """
    Whole-collection persistence: every call reads or replaces the full list of restaurants.
    """

    def load(self) -> list["Restaurant"]:
        """Load and return the full collection (empty on missing/unreadable/invalid data, never raises)."""
        ...

    def save(self, records: Sequence["Restaurant"]) -> None:
        """Replace the stored collection with `records`. Raises StorageError on failure."""
        ...
