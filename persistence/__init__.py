from __future__ import annotations

from .disk_store import DiskRestaurantStore
from .interfaces import RestaurantStore
from .memory_store import InMemoryRestaurantStore
from .repositories import (
    AsyncDiskRestaurantRepository,
    AsyncRestaurantRepository,
    AsyncStoreRestaurantRepository,
)
from .restaurant_state import Restaurant, RestaurantRepository, parse_restaurant_id

__all__ = [
    "Restaurant",
    "RestaurantStore",
    "DiskRestaurantStore",
    "InMemoryRestaurantStore",
    "RestaurantRepository",
    "AsyncRestaurantRepository",
    "AsyncStoreRestaurantRepository",
    "AsyncDiskRestaurantRepository",
    "parse_restaurant_id",
]
