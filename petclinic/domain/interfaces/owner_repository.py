"""Interface for owner repository (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import Optional

from petclinic.domain.entities.owner import Owner


class IOwnerRepository(ABC):
    """Interface for owner storage following Repository Pattern."""

    @abstractmethod
    def find_by_id(self, owner_id: int) -> Optional[Owner]:
        """
        Retrieve an owner together with its pets.

        Args:
            owner_id: Owner identifier

        Returns:
            Owner if it exists, None otherwise
        """
        pass

    @abstractmethod
    def save(self, owner: Owner) -> Owner:
        """
        Store an owner's own attributes, assigning an identifier when new.

        Pets are stored through the pet repository.

        Args:
            owner: Owner to store

        Returns:
            The saved owner
        """
        pass
