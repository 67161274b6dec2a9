"""Tests for the in-memory and Redis repository backends."""
from datetime import date

import pytest

from petclinic.domain.entities import Owner, Pet, PetType
from petclinic.infrastructure.factories.repository_factory import RepositoryFactory
from petclinic.infrastructure.redis_client import RedisClientFactory
from petclinic.infrastructure.repositories import (
    InMemoryOwnerRepository,
    InMemoryPetRepository,
    RedisOwnerRepository,
    RedisPetRepository,
)


class FakeRedis:
    """Dict-backed stand-in for the handful of Redis commands the repositories use."""

    def __init__(self):
        self.values = {}
        self.hashes = {}

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        self.values[key] = value
        return True

    def incr(self, key):
        self.values[key] = int(self.values.get(key, 0)) + 1
        return self.values[key]

    def hset(self, key, field, value):
        self.hashes.setdefault(key, {})[field] = value
        return 1

    def hgetall(self, key):
        return dict(self.hashes.get(key, {}))


@pytest.fixture(params=["memory", "redis"])
def repositories(request):
    if request.param == "memory":
        return RepositoryFactory.create_repositories("memory")
    client = FakeRedis()
    return RedisOwnerRepository(client), RedisPetRepository(client)


@pytest.fixture
def dog(repositories):
    _, pets = repositories
    pets.save_pet_type(PetType(id=None, name="snake"))
    return pets.save_pet_type(PetType(id=None, name="dog"))


@pytest.fixture
def saved_owner(repositories):
    owners, _ = repositories
    owner = Owner(first_name="Jean", last_name="Coleman", city="Monona")
    owners.save(owner)
    return owner


def add_pet(pets, owner, name, pet_type):
    pet = Pet(name=name, birth_date=date(2019, 6, 1), type=pet_type)
    owner.add_pet(pet)
    return pets.save(pet)


def test_pet_types_sorted_by_name(repositories, dog):
    _, pets = repositories
    assert [pet_type.name for pet_type in pets.find_pet_types()] == ["dog", "snake"]
    assert dog.id is not None


def test_save_owner_assigns_id(repositories, saved_owner):
    owners, _ = repositories
    assert saved_owner.id is not None
    found = owners.find_by_id(saved_owner.id)
    assert found.last_name == "Coleman"
    assert found.pets == []


def test_find_missing_entities_returns_none(repositories):
    owners, pets = repositories
    assert owners.find_by_id(404) is None
    assert pets.find_by_id(404) is None


def test_save_new_pet_visible_through_owner(repositories, saved_owner, dog):
    owners, pets = repositories
    pet = add_pet(pets, saved_owner, "Samantha", dog)

    assert pet.id is not None
    owner = owners.find_by_id(saved_owner.id)
    stored = owner.get_pet("samantha")
    assert stored.id == pet.id
    assert stored.type == dog
    assert stored.birth_date == date(2019, 6, 1)
    assert stored.owner is owner


def test_find_pet_attaches_owner(repositories, saved_owner, dog):
    _, pets = repositories
    pet = add_pet(pets, saved_owner, "Max", dog)

    found = pets.find_by_id(pet.id)
    assert found.name == "Max"
    assert found.owner.id == saved_owner.id
    assert found in found.owner.pets


def test_loaded_owner_is_detached(repositories, saved_owner, dog):
    owners, _ = repositories
    owner = owners.find_by_id(saved_owner.id)
    owner.add_pet(Pet(name="Ghost"))
    owner.first_name = "Changed"

    reloaded = owners.find_by_id(saved_owner.id)
    assert reloaded.pets == []
    assert reloaded.first_name == "Jean"


def test_update_pet_keeps_position(repositories, saved_owner, dog):
    owners, pets = repositories
    first = add_pet(pets, saved_owner, "Max", dog)
    add_pet(pets, saved_owner, "Lucky", dog)

    pet = pets.find_by_id(first.id)
    pet.name = "Maximus"
    pets.save(pet)

    assert [p.name for p in owners.find_by_id(saved_owner.id).pets] == ["Maximus", "Lucky"]


def test_pet_save_does_not_write_owner_attributes(repositories, saved_owner, dog):
    owners, pets = repositories
    pet = add_pet(pets, saved_owner, "Max", dog)

    pet.owner.first_name = "Bound"
    pets.save(pet)

    assert owners.find_by_id(saved_owner.id).first_name == "Jean"


def test_pet_moved_to_other_owner(repositories, saved_owner, dog):
    owners, pets = repositories
    pet = add_pet(pets, saved_owner, "Max", dog)
    other = Owner(first_name="Carlos", last_name="Estaban")
    owners.save(other)

    moved = pets.find_by_id(pet.id)
    other.add_pet(moved)
    pets.save(moved)

    assert owners.find_by_id(saved_owner.id).pets == []
    assert owners.find_by_id(other.id).get_pet("Max").id == pet.id


def test_save_pet_without_owner_rejected(repositories):
    _, pets = repositories
    with pytest.raises(ValueError):
        pets.save(Pet(name="Stray"))


def test_memory_factory_shares_store():
    owners, pets = RepositoryFactory.create_repositories("memory")
    assert isinstance(owners, InMemoryOwnerRepository)
    assert isinstance(pets, InMemoryPetRepository)
    assert owners.store is pets.store


def test_redis_factory_falls_back_to_memory(monkeypatch):
    monkeypatch.setattr(RedisClientFactory, "get_client", classmethod(lambda cls, url: None))
    owners, pets = RepositoryFactory.create_repositories("redis", "redis://localhost:6379/0")
    assert isinstance(owners, InMemoryOwnerRepository)


def test_factory_rejects_unknown_storage():
    with pytest.raises(ValueError):
        RepositoryFactory.create_repositories("mongodb")
