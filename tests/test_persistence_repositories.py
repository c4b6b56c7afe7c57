from __future__ import annotations

import asyncio

import pytest

from errors import NotFoundError, ValidationError
from persistence.memory_store import InMemoryRestaurantStore
from persistence.repositories import AsyncDiskRestaurantRepository, AsyncStoreRestaurantRepository
from persistence.restaurant_state import RestaurantRepository, next_restaurant_id, parse_restaurant_id


def _seeded_store(count: int) -> InMemoryRestaurantStore:
    return InMemoryRestaurantStore(
        {"id": i, "name": f"R{i}", "description": "d", "area": "a", "city": "c", "image": "i"}
        for i in range(1, count + 1)
    )


@pytest.mark.parametrize("count", [0, 1, 3])
def test_create_assigns_length_plus_one(count, valid_payload):
    store = _seeded_store(count)
    repo = RestaurantRepository(store)

    created = repo.create_restaurant(valid_payload)

    assert created.id == count + 1
    assert len(store.load()) == count + 1


def test_create_normalizes_fields(valid_payload):
    repo = RestaurantRepository(InMemoryRestaurantStore())

    created = repo.create_restaurant(dict(valid_payload, id=99, capacity="40", rating="4.5", cuisine=""))

    assert created.id == 1
    assert created.capacity == 40
    assert created.rating == 4.5
    assert created.cuisine is None

    bare = repo.create_restaurant(valid_payload)
    assert (bare.capacity, bare.rating, bare.cuisine) == (None, None, None)


@pytest.mark.parametrize("missing", ["name", "description", "area", "city", "image"])
def test_create_rejects_missing_required_field(missing, valid_payload):
    store = InMemoryRestaurantStore()
    repo = RestaurantRepository(store)
    del valid_payload[missing]

    with pytest.raises(ValidationError) as exc:
        repo.create_restaurant(valid_payload)

    assert exc.value.http_status == 400
    assert store.save_count == 0


def test_update_merges_only_supplied_fields(valid_payload):
    store = InMemoryRestaurantStore()
    repo = RestaurantRepository(store)
    created = repo.create_restaurant(dict(valid_payload, capacity=20, rating=3, cuisine="Thai"))

    updated = repo.update_restaurant(created.id, {"name": "X"})

    assert updated.name == "X"
    assert updated.model_dump(exclude={"name"}) == created.model_dump(exclude={"name"})
    assert store.load()[0].name == "X"


def test_update_coerces_numbers_and_keeps_id(valid_payload):
    repo = RestaurantRepository(InMemoryRestaurantStore())
    repo.create_restaurant(valid_payload)

    updated = repo.update_restaurant("1", {"capacity": "12", "rating": "4.5", "id": 7})

    assert updated.id == 1
    assert updated.capacity == 12
    assert updated.rating == 4.5


def test_update_unknown_id_is_not_found_and_leaves_collection(valid_payload):
    store = _seeded_store(2)
    repo = RestaurantRepository(store)
    before = store.snapshot()

    with pytest.raises(NotFoundError):
        repo.update_restaurant(5, {"name": "X"})

    assert store.snapshot() == before
    assert store.save_count == 0


@pytest.mark.parametrize("bad_id", ["abc", "0", "-1", "1.5", "", 0, True, None])
def test_update_and_delete_reject_malformed_ids(bad_id):
    repo = RestaurantRepository(_seeded_store(1))

    with pytest.raises(ValidationError):
        repo.update_restaurant(bad_id, {"name": "X"})
    with pytest.raises(ValidationError):
        repo.delete_restaurant(bad_id)


def test_update_rejects_invalid_data():
    store = _seeded_store(1)
    repo = RestaurantRepository(store)

    with pytest.raises(ValidationError) as exc:
        repo.update_restaurant(1, {"rating": 5.1})

    assert exc.value.details == ["rating must be a number between 0 and 5"]
    assert store.save_count == 0


def test_delete_removes_exactly_matching_record():
    store = _seeded_store(3)
    repo = RestaurantRepository(store)

    repo.delete_restaurant(2)

    assert [r.id for r in store.load()] == [1, 3]


def test_delete_unknown_id_is_not_an_error():
    store = _seeded_store(2)
    repo = RestaurantRepository(store)
    before = store.snapshot()

    repo.delete_restaurant(9)

    assert store.snapshot() == before


def test_length_ids_can_repeat_after_delete_but_max_ids_do_not(valid_payload):
    length_repo = RestaurantRepository(_seeded_store(3))
    length_repo.delete_restaurant(1)
    assert length_repo.create_restaurant(valid_payload).id == 3

    max_repo = RestaurantRepository(_seeded_store(3), id_strategy="max")
    max_repo.delete_restaurant(1)
    assert max_repo.create_restaurant(valid_payload).id == 4


def test_id_helpers():
    assert parse_restaurant_id(" 12 ") == 12
    assert parse_restaurant_id(3) == 3
    assert next_restaurant_id([]) == 1
    assert next_restaurant_id([], "max") == 1


def test_async_disk_repository_scenario(data_file, valid_payload):
    async def _run():
        repo = AsyncDiskRestaurantRepository(data_file)

        assert await repo.list_restaurants() == []

        created = await repo.create_restaurant(valid_payload)
        assert created.id == 1
        assert created.name == "A"
        assert len(await repo.list_restaurants()) == 1

        updated = await repo.update_restaurant("1", {"rating": 4.5})
        assert updated.rating == 4.5
        assert updated.name == "A"

        await repo.delete_restaurant("1")
        assert await repo.list_restaurants() == []

    asyncio.run(_run())
    assert data_file.exists()


def test_async_repository_propagates_domain_errors():
    async def _run():
        repo = AsyncStoreRestaurantRepository(InMemoryRestaurantStore())
        with pytest.raises(NotFoundError):
            await repo.update_restaurant(1, {"name": "X"})
        with pytest.raises(ValidationError):
            await repo.create_restaurant({"name": "only"})

    asyncio.run(_run())
