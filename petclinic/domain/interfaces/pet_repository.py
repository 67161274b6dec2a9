"""Interface for pet repository (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import List, Optional

from petclinic.domain.entities.pet import Pet, PetType


class IPetRepository(ABC):
    """
    Interface for pet storage following Repository Pattern.

    Allows switching storage backends (in-memory, Redis, ...) without
    changing the form handling logic.
    """

    @abstractmethod
    def find_pet_types(self) -> List[PetType]:
        """
        Retrieve all pet types.

        Returns:
            Pet types ordered by name
        """
        pass

    @abstractmethod
    def find_by_id(self, pet_id: int) -> Optional[Pet]:
        """
        Retrieve a pet with its owner attached.

        Args:
            pet_id: Pet identifier

        Returns:
            Pet if it exists, None otherwise
        """
        pass

    @abstractmethod
    def save(self, pet: Pet) -> Pet:
        """
        Store a pet under its owner.

        New pets are assigned an identifier. Only the pet and the owner's
        pet membership are written; other owner attributes are left as stored.

        Args:
            pet: Pet to store, with ``owner`` set

        Returns:
            The saved pet
        """
        pass

    @abstractmethod
    def save_pet_type(self, pet_type: PetType) -> PetType:
        """
        Store a pet type, assigning an identifier when it has none.

        Args:
            pet_type: Pet type to store

        Returns:
            The stored pet type
        """
        pass
