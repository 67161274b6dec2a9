"""Owner aggregate root."""
from dataclasses import dataclass, field
from typing import List, Optional

from petclinic.domain.entities.pet import Pet


@dataclass
class Owner:
    """
    Domain entity representing a pet owner.

    The owner is the aggregate root for its pets: pets are attached through
    ``add_pet`` which also maintains the pet's back-reference.
    """

    id: Optional[int] = None
    first_name: str = ""
    last_name: str = ""
    address: str = ""
    city: str = ""
    telephone: str = ""
    pets: List[Pet] = field(default_factory=list)

    @property
    def is_new(self) -> bool:
        return self.id is None

    def add_pet(self, pet: Pet) -> None:
        """
        Attach a pet to this owner.

        Only new pets are appended; a persisted pet already belongs to the
        owner's collection. The back-reference is always updated.

        Args:
            pet: Pet to attach
        """
        if pet.is_new:
            self.pets.append(pet)
        pet.owner = self

    def get_pet(self, name: str, ignore_new: bool = False) -> Optional[Pet]:
        """
        Find a pet by name, ignoring case.

        Args:
            name: Pet name to look up
            ignore_new: Skip pets that have not been saved yet

        Returns:
            Matching pet, or None if there is none
        """
        wanted = name.lower()
        for pet in self.pets:
            if ignore_new and pet.is_new:
                continue
            if pet.name and pet.name.lower() == wanted:
                return pet
        return None
