from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Mapping, Protocol

from settings import IdStrategy, Settings

from .disk_store import DiskRestaurantStore
from .interfaces import RestaurantStore
from .paths import resolve_data_file
from .restaurant_state import Restaurant, RestaurantRepository


class AsyncRestaurantRepository(Protocol):
    """
    Domain-level restaurant persistence interface used by the HTTP layer.
    """

    async def list_restaurants(self) -> list[Restaurant]: ...
    async def create_restaurant(self, payload: Mapping[str, Any]) -> Restaurant: ...
    async def update_restaurant(self, restaurant_id: Any, payload: Mapping[str, Any]) -> Restaurant: ...
    async def delete_restaurant(self, restaurant_id: Any) -> None: ...


class AsyncStoreRestaurantRepository(AsyncRestaurantRepository):
    """
    Async wrapper around RestaurantRepository.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, store: RestaurantStore, *, id_strategy: IdStrategy = "length") -> None:
        self._repo = RestaurantRepository(store, id_strategy=id_strategy)

    @property
    def store(self) -> RestaurantStore:
        return self._repo.store

    async def list_restaurants(self) -> list[Restaurant]:
        return await asyncio.to_thread(self._repo.list_restaurants)

    async def create_restaurant(self, payload: Mapping[str, Any]) -> Restaurant:
        return await asyncio.to_thread(self._repo.create_restaurant, payload)

    async def update_restaurant(self, restaurant_id: Any, payload: Mapping[str, Any]) -> Restaurant:
        return await asyncio.to_thread(self._repo.update_restaurant, restaurant_id, payload)

    async def delete_restaurant(self, restaurant_id: Any) -> None:
        await asyncio.to_thread(self._repo.delete_restaurant, restaurant_id)


class AsyncDiskRestaurantRepository(AsyncStoreRestaurantRepository):
    """Disk-backed repository over a single restaurants.json document."""

    def __init__(self, path: Path | str | None = None, *, id_strategy: IdStrategy = "length") -> None:
        super().__init__(DiskRestaurantStore(resolve_data_file(path)), id_strategy=id_strategy)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AsyncDiskRestaurantRepository":
        return cls(settings.data_file_path, id_strategy=settings.id_strategy)
