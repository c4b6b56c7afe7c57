from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status

from errors import ValidationError
from persistence.repositories import AsyncRestaurantRepository

router = APIRouter(prefix="/api/restaurants", tags=["restaurants"])
logger = logging.getLogger(__name__)


def get_repository(request: Request) -> AsyncRestaurantRepository:
    return request.app.state.restaurant_repository


async def _read_json_object(request: Request) -> dict[str, Any]:
    raw = await request.body()
    if not raw.strip():
        raise ValidationError(details=["request body must be a JSON object"])
    try:
        body = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise ValidationError(details=["request body is not valid JSON"]) from e
    if not isinstance(body, dict):
        raise ValidationError(details=["request body must be a JSON object"])
    return body


@router.get("")
async def list_restaurants(repo: AsyncRestaurantRepository = Depends(get_repository)) -> list[dict[str, Any]]:
    restaurants = await repo.list_restaurants()
    return [r.model_dump(mode="json") for r in restaurants]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_restaurant(
    request: Request,
    repo: AsyncRestaurantRepository = Depends(get_repository),
) -> dict[str, Any]:
    payload = await _read_json_object(request)
    restaurant = await repo.create_restaurant(payload)
    return restaurant.model_dump(mode="json")


@router.put("/{restaurant_id}")
async def update_restaurant(
    restaurant_id: str,
    request: Request,
    repo: AsyncRestaurantRepository = Depends(get_repository),
) -> dict[str, Any]:
    payload = await _read_json_object(request)
    restaurant = await repo.update_restaurant(restaurant_id, payload)
    return restaurant.model_dump(mode="json")


@router.delete("/{restaurant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_restaurant(
    restaurant_id: str,
    repo: AsyncRestaurantRepository = Depends(get_repository),
) -> Response:
    await repo.delete_restaurant(restaurant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
