"""Domain entities - core business objects."""
from petclinic.domain.entities.pet import Pet, PetType
from petclinic.domain.entities.owner import Owner

__all__ = [
    "Owner",
    "Pet",
    "PetType",
]
