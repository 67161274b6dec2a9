"""Factory for creating repository instances (Factory Pattern)."""
import logging
from typing import Optional, Tuple

from petclinic.domain.interfaces.owner_repository import IOwnerRepository
from petclinic.domain.interfaces.pet_repository import IPetRepository
from petclinic.infrastructure.redis_client import RedisClientFactory
from petclinic.infrastructure.repositories.memory_repository import (
    InMemoryClinicStore,
    InMemoryOwnerRepository,
    InMemoryPetRepository,
)
from petclinic.infrastructure.repositories.redis_repository import (
    RedisOwnerRepository,
    RedisPetRepository,
)


logger = logging.getLogger(__name__)


class RepositoryFactory:
    """
    Factory for the owner and pet repositories.

    Both repositories of a pair share one backend so a pet saved through one
    is visible to owner lookups through the other.
    """

    @staticmethod
    def create_repositories(
        storage_type: str = "memory",
        redis_url: Optional[str] = None
    ) -> Tuple[IOwnerRepository, IPetRepository]:
        """
        Create an owner and pet repository pair.

        Args:
            storage_type: "memory" or "redis"
            redis_url: Redis connection URL for the redis backend

        Returns:
            Tuple of (owner repository, pet repository)

        Raises:
            ValueError: If storage type is not supported
        """
        storage_type = storage_type.lower()

        if storage_type == "redis":
            redis_client = RedisClientFactory.get_client(redis_url)
            if redis_client is not None:
                return RedisOwnerRepository(redis_client), RedisPetRepository(redis_client)
            logger.warning("Redis unavailable, falling back to in-memory storage")
            storage_type = "memory"

        if storage_type == "memory":
            store = InMemoryClinicStore()
            return InMemoryOwnerRepository(store), InMemoryPetRepository(store)

        raise ValueError(f"Unsupported storage type: {storage_type}")
