"""Pet and PetType domain entities."""
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from petclinic.domain.entities.owner import Owner


@dataclass(frozen=True)
class PetType:
    """Reference value classifying a pet (cat, dog, ...)."""

    id: Optional[int]
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class Pet:
    """
    Domain entity representing a pet.

    A pet is "new" until the repository assigns it an identifier.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    birth_date: Optional[date] = None
    type: Optional[PetType] = None
    owner: Optional["Owner"] = field(default=None, repr=False, compare=False)

    @property
    def is_new(self) -> bool:
        return self.id is None
