from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from errors import NotFoundError, ValidationError
from settings import IdStrategy
from validation import (
    EDITABLE_FIELDS,
    ValidationMode,
    parse_capacity,
    parse_rating,
    validation_errors,
)

from .interfaces import RestaurantStore

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = "Invalid restaurant ID"


class Restaurant(BaseModel):
    # Unknown keys already in the document are kept so a load/save round trip never drops them.
    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    description: str
    area: str
    city: str
    image: str
    capacity: int | None = None
    rating: float | None = None
    cuisine: str | None = None


class RestaurantDoc(BaseModel):
    """
    Mirrors the on-disk restaurants.json schema: a top-level JSON array of restaurant objects
      [ { "id": 1, "name": "...", ..., "capacity": 40 | null, "rating": 4.5 | null, "cuisine": "..." | null } ]
    """

    restaurants: list[Restaurant] = Field(default_factory=list)

    @classmethod
    def from_disk_doc(cls, doc: Any) -> "RestaurantDoc":
        if doc is None:
            return cls()
        if not isinstance(doc, list):
            logger.warning("RESTAURANT LOAD: expected a JSON array, got %s; treating as empty", type(doc).__name__)
            return cls()
        restaurants: list[Restaurant] = []
        for i, raw in enumerate(doc):
            try:
                restaurants.append(Restaurant.model_validate(raw))
            except (PydanticValidationError, RecursionError) as e:
                detail = e.errors() if isinstance(e, PydanticValidationError) else repr(e)
                logger.warning("RESTAURANT LOAD: skipping invalid entry at index %d: %s", i, detail)
        return cls(restaurants=restaurants)

    def to_disk_doc(self) -> list[dict[str, Any]]:
        return [r.model_dump(mode="json") for r in self.restaurants]


def parse_restaurant_id(raw: Any) -> int:
    if isinstance(raw, bool):
        raise ValidationError(INVALID_ID_MESSAGE)
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdigit():
        value = int(raw.strip())
    else:
        raise ValidationError(INVALID_ID_MESSAGE)
    if value < 1:
        raise ValidationError(INVALID_ID_MESSAGE)
    return value


def next_restaurant_id(records: list[Restaurant], strategy: IdStrategy = "length") -> int:
    if strategy == "max":
        return max((r.id for r in records), default=0) + 1
    # Length-based ids can repeat after a deletion; kept as the default for existing documents.
    return len(records) + 1


class RestaurantRepository:
    """
    List/create/update/delete over a RestaurantStore.

    Each mutation is one load-mutate-save cycle on the whole collection; nothing is cached
    between calls, and concurrent callers race with last-writer-wins semantics.
    """

    def __init__(self, store: RestaurantStore, *, id_strategy: IdStrategy = "length"):
        self._store = store
        self._id_strategy = id_strategy

    @property
    def store(self) -> RestaurantStore:
        return self._store

    def list_restaurants(self) -> list[Restaurant]:
        return self._store.load()

    def create_restaurant(self, payload: Mapping[str, Any]) -> Restaurant:
        errors = validation_errors(payload, ValidationMode.CREATION)
        if errors:
            raise ValidationError(details=errors)

        restaurants = self._store.load()
        restaurant = Restaurant(
            id=next_restaurant_id(restaurants, self._id_strategy),
            name=payload["name"],
            description=payload["description"],
            area=payload["area"],
            city=payload["city"],
            image=payload["image"],
            capacity=parse_capacity(payload.get("capacity")),
            rating=parse_rating(payload.get("rating")),
            cuisine=payload.get("cuisine") or None,
        )
        restaurants.append(restaurant)
        self._store.save(restaurants)
        logger.info("restaurant created id=%s name=%r", restaurant.id, restaurant.name)
        return restaurant

    def update_restaurant(self, restaurant_id: Any, payload: Mapping[str, Any]) -> Restaurant:
        rid = parse_restaurant_id(restaurant_id)
        errors = validation_errors(payload, ValidationMode.UPDATE)
        if errors:
            raise ValidationError(details=errors)

        restaurants = self._store.load()
        index = next((i for i, r in enumerate(restaurants) if r.id == rid), None)
        if index is None:
            raise NotFoundError()

        merged = restaurants[index].model_dump()
        for field in EDITABLE_FIELDS:
            if field not in payload:
                continue
            value = payload[field]
            if field == "capacity" and value is not None:
                value = parse_capacity(value)
            elif field == "rating" and value is not None:
                value = parse_rating(value)
            merged[field] = value

        updated = Restaurant.model_validate(merged)
        restaurants[index] = updated
        self._store.save(restaurants)
        logger.info("restaurant updated id=%s fields=%s", rid, sorted(f for f in EDITABLE_FIELDS if f in payload))
        return updated

    def delete_restaurant(self, restaurant_id: Any) -> None:
        rid = parse_restaurant_id(restaurant_id)
        restaurants = self._store.load()
        remaining = [r for r in restaurants if r.id != rid]
        self._store.save(remaining)
        logger.info("restaurant deleted id=%s removed=%d", rid, len(restaurants) - len(remaining))
