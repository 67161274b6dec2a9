"""Domain interfaces following Dependency Inversion Principle."""

from petclinic.domain.interfaces.owner_repository import IOwnerRepository
from petclinic.domain.interfaces.pet_repository import IPetRepository

__all__ = [
    "IOwnerRepository",
    "IPetRepository",
]
