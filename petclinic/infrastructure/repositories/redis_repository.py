"""Owner and pet repositories using Redis (Repository Pattern)."""
import json
import logging
from datetime import date
from typing import Any, Dict, List, Optional

import redis

from petclinic.domain.entities import Owner, Pet, PetType
from petclinic.domain.interfaces.owner_repository import IOwnerRepository
from petclinic.domain.interfaces.pet_repository import IPetRepository

KEY_PREFIX = "petclinic:"
PET_TYPES_KEY = f"{KEY_PREFIX}pet_types"
OWNER_FIELDS = ("first_name", "last_name", "address", "city", "telephone")

logger = logging.getLogger(__name__)


def _owner_key(owner_id: int) -> str:
    return f"{KEY_PREFIX}owner:{owner_id}"


def _pet_key(pet_id: int) -> str:
    return f"{KEY_PREFIX}pet:{pet_id}"


def _sequence_key(name: str) -> str:
    return f"{KEY_PREFIX}{name}:seq"


def _load_pet_types(client: redis.Redis) -> Dict[int, PetType]:
    raw = client.hgetall(PET_TYPES_KEY)
    return {int(type_id): PetType(id=int(type_id), name=name) for type_id, name in raw.items()}


def _load_document(client: redis.Redis, key: str) -> Optional[Dict[str, Any]]:
    data = client.get(key)
    return json.loads(data) if data else None


def _load_owner(client: redis.Redis, owner_id: int) -> Optional[Owner]:
    """Rebuild an owner aggregate with its pets and their types."""
    document = _load_document(client, _owner_key(owner_id))
    if document is None:
        return None

    owner = Owner(id=document["id"], **{name: document.get(name, "") for name in OWNER_FIELDS})
    pet_types = _load_pet_types(client)
    for pet_id in document.get("pet_ids", []):
        pet_document = _load_document(client, _pet_key(pet_id))
        if pet_document is None:
            logger.warning(f"Owner {owner_id} references missing pet {pet_id}")
            continue
        birth_date = pet_document.get("birth_date")
        pet = Pet(
            id=pet_document["id"],
            name=pet_document.get("name"),
            birth_date=date.fromisoformat(birth_date) if birth_date else None,
            type=pet_types.get(pet_document.get("type_id")),
            owner=owner,
        )
        owner.pets.append(pet)
    return owner


class RedisOwnerRepository(IOwnerRepository):
    """
    Owner repository using Redis.

    Each owner is a JSON document holding its attributes and the ids of its
    pets; pets are separate documents written by ``RedisPetRepository``.
    """

    def __init__(self, redis_client: redis.Redis):
        """
        Initialize the owner repository.

        Args:
            redis_client: Redis client instance (Dependency Injection)
        """
        self.redis = redis_client
        self._logger = logging.getLogger(__name__)

    def find_by_id(self, owner_id: int) -> Optional[Owner]:
        try:
            return _load_owner(self.redis, owner_id)
        except (redis.RedisError, json.JSONDecodeError) as e:
            self._logger.error(f"Error retrieving owner {owner_id}: {e}")
            raise

    def save(self, owner: Owner) -> Owner:
        try:
            if owner.is_new:
                owner.id = int(self.redis.incr(_sequence_key("owner")))
            stored = _load_document(self.redis, _owner_key(owner.id)) or {}
            document = {"id": owner.id, "pet_ids": stored.get("pet_ids", [])}
            document.update({name: getattr(owner, name) for name in OWNER_FIELDS})
            self.redis.set(_owner_key(owner.id), json.dumps(document))
        except redis.RedisError as e:
            self._logger.error(f"Error saving owner {owner.id}: {e}")
            raise
        self._logger.debug(f"Owner {owner.id} saved")
        return owner


class RedisPetRepository(IPetRepository):
    """Pet repository using Redis."""

    def __init__(self, redis_client: redis.Redis):
        """
        Initialize the pet repository.

        Args:
            redis_client: Redis client instance (Dependency Injection)
        """
        self.redis = redis_client
        self._logger = logging.getLogger(__name__)

    def find_pet_types(self) -> List[PetType]:
        try:
            pet_types = _load_pet_types(self.redis)
        except redis.RedisError as e:
            self._logger.error(f"Error retrieving pet types: {e}")
            raise
        return sorted(pet_types.values(), key=lambda pet_type: pet_type.name)

    def save_pet_type(self, pet_type: PetType) -> PetType:
        try:
            if pet_type.id is None:
                pet_type = PetType(id=int(self.redis.incr(_sequence_key("pet_type"))), name=pet_type.name)
            self.redis.hset(PET_TYPES_KEY, str(pet_type.id), pet_type.name)
        except redis.RedisError as e:
            self._logger.error(f"Error saving pet type {pet_type.name}: {e}")
            raise
        return pet_type

    def find_by_id(self, pet_id: int) -> Optional[Pet]:
        try:
            document = _load_document(self.redis, _pet_key(pet_id))
            if document is None:
                return None
            owner = _load_owner(self.redis, document["owner_id"])
        except (redis.RedisError, json.JSONDecodeError) as e:
            self._logger.error(f"Error retrieving pet {pet_id}: {e}")
            raise

        if owner is None:
            self._logger.warning(f"Pet {pet_id} references missing owner {document['owner_id']}")
            return None
        return next((pet for pet in owner.pets if pet.id == pet_id), None)

    def _move_pet_id(self, pet_id: int, from_owner_id: Optional[int], to_owner_id: int) -> None:
        if from_owner_id is not None and from_owner_id != to_owner_id:
            previous = _load_document(self.redis, _owner_key(from_owner_id))
            if previous is not None:
                previous["pet_ids"] = [i for i in previous.get("pet_ids", []) if i != pet_id]
                self.redis.set(_owner_key(from_owner_id), json.dumps(previous))

        owner_document = _load_document(self.redis, _owner_key(to_owner_id))
        if owner_document is None:
            raise ValueError(f"Owner {to_owner_id} is not stored")
        pet_ids = owner_document.setdefault("pet_ids", [])
        if pet_id not in pet_ids:
            pet_ids.append(pet_id)
            self.redis.set(_owner_key(to_owner_id), json.dumps(owner_document))

    def save(self, pet: Pet) -> Pet:
        if pet.owner is None or pet.owner.id is None:
            raise ValueError("pet must belong to a saved owner")

        try:
            previous_owner_id = None
            if pet.is_new:
                pet.id = int(self.redis.incr(_sequence_key("pet")))
            else:
                previous = _load_document(self.redis, _pet_key(pet.id))
                previous_owner_id = previous["owner_id"] if previous else None

            self._move_pet_id(pet.id, previous_owner_id, pet.owner.id)
            document = {
                "id": pet.id,
                "name": pet.name,
                "birth_date": pet.birth_date.isoformat() if pet.birth_date else None,
                "type_id": pet.type.id if pet.type else None,
                "owner_id": pet.owner.id,
            }
            self.redis.set(_pet_key(pet.id), json.dumps(document))
        except redis.RedisError as e:
            self._logger.error(f"Error saving pet {pet.id}: {e}")
            raise
        self._logger.debug(f"Pet {pet.id} saved for owner {pet.owner.id}")
        return pet
