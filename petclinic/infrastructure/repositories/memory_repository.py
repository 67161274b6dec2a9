"""In-memory owner and pet repositories."""
import copy
import logging
from itertools import count
from threading import Lock
from typing import Dict, List, Optional

from petclinic.domain.entities import Owner, Pet, PetType
from petclinic.domain.interfaces.owner_repository import IOwnerRepository
from petclinic.domain.interfaces.pet_repository import IPetRepository


class InMemoryClinicStore:
    """
    Shared storage behind the in-memory repositories.

    Owners are stored with their pets. Every read returns a deep copy so
    request-scoped changes never leak into the store without a save.
    """

    def __init__(self):
        self.lock = Lock()
        self.owners: Dict[int, Owner] = {}
        self.pet_types: Dict[int, PetType] = {}
        self.owner_ids = count(1)
        self.pet_ids = count(1)
        self.pet_type_ids = count(1)

    def find_stored_pet(self, pet_id: int) -> Optional[Pet]:
        for owner in self.owners.values():
            for pet in owner.pets:
                if pet.id == pet_id:
                    return pet
        return None


class InMemoryOwnerRepository(IOwnerRepository):
    """Owner repository backed by an ``InMemoryClinicStore``."""

    def __init__(self, store: InMemoryClinicStore):
        self.store = store
        self._logger = logging.getLogger(__name__)

    def find_by_id(self, owner_id: int) -> Optional[Owner]:
        with self.store.lock:
            owner = self.store.owners.get(owner_id)
            return copy.deepcopy(owner) if owner is not None else None

    def save(self, owner: Owner) -> Owner:
        with self.store.lock:
            if owner.is_new:
                owner.id = next(self.store.owner_ids)
            stored = self.store.owners.get(owner.id)
            pets = stored.pets if stored is not None else []
            record = copy.deepcopy(owner)
            record.pets = pets
            for pet in pets:
                pet.owner = record
            self.store.owners[owner.id] = record
        self._logger.debug(f"Owner {owner.id} saved")
        return owner


class InMemoryPetRepository(IPetRepository):
    """Pet repository backed by an ``InMemoryClinicStore``."""

    def __init__(self, store: InMemoryClinicStore):
        self.store = store
        self._logger = logging.getLogger(__name__)

    def find_pet_types(self) -> List[PetType]:
        with self.store.lock:
            return sorted(self.store.pet_types.values(), key=lambda pet_type: pet_type.name)

    def save_pet_type(self, pet_type: PetType) -> PetType:
        with self.store.lock:
            if pet_type.id is None:
                pet_type = PetType(id=next(self.store.pet_type_ids), name=pet_type.name)
            self.store.pet_types[pet_type.id] = pet_type
        return pet_type

    def find_by_id(self, pet_id: int) -> Optional[Pet]:
        with self.store.lock:
            pet = self.store.find_stored_pet(pet_id)
            if pet is None:
                return None
            # Copy through the owner so the back-reference stays consistent
            owner = copy.deepcopy(pet.owner)
            return next(p for p in owner.pets if p.id == pet_id)

    def save(self, pet: Pet) -> Pet:
        if pet.owner is None or pet.owner.id is None:
            raise ValueError("pet must belong to a saved owner")

        with self.store.lock:
            owner = self.store.owners.get(pet.owner.id)
            if owner is None:
                raise ValueError(f"Owner {pet.owner.id} is not stored")

            previous = None
            if pet.is_new:
                pet.id = next(self.store.pet_ids)
            else:
                previous = self.store.find_stored_pet(pet.id)

            record = Pet(id=pet.id, name=pet.name, birth_date=pet.birth_date, type=pet.type, owner=owner)
            if previous is not None and previous.owner is owner:
                owner.pets = [record if p.id == pet.id else p for p in owner.pets]
            else:
                if previous is not None:
                    previous.owner.pets = [p for p in previous.owner.pets if p.id != pet.id]
                owner.pets.append(record)
        self._logger.debug(f"Pet {pet.id} saved for owner {owner.id}")
        return pet
