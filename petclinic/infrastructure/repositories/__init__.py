"""Repository implementations (Infrastructure Layer).

These implement the domain interfaces defined in petclinic.domain.interfaces.
"""
from petclinic.infrastructure.repositories.memory_repository import (
    InMemoryClinicStore,
    InMemoryOwnerRepository,
    InMemoryPetRepository,
)
from petclinic.infrastructure.repositories.redis_repository import (
    RedisOwnerRepository,
    RedisPetRepository,
)

__all__ = [
    "InMemoryClinicStore",
    "InMemoryOwnerRepository",
    "InMemoryPetRepository",
    "RedisOwnerRepository",
    "RedisPetRepository",
]
