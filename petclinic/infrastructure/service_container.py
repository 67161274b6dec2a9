"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from typing import Optional

from petclinic.application.use_cases.pet_form_handler import PetFormHandler
from petclinic.config.settings import Config, get_config
from petclinic.domain.interfaces.owner_repository import IOwnerRepository
from petclinic.domain.interfaces.pet_repository import IPetRepository
from petclinic.infrastructure.factories.repository_factory import RepositoryFactory
from petclinic.infrastructure.sample_data import seed_sample_data


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.

    Follows Singleton pattern: one set of repositories per process.
    """

    _instance: Optional['ServiceContainer'] = None
    _config: Optional[type[Config]] = None
    _owner_repository: Optional[IOwnerRepository] = None
    _pet_repository: Optional[IPetRepository] = None
    _pet_form_handler: Optional[PetFormHandler] = None

    def __new__(cls, config: Optional[type[Config]] = None):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config: Optional[type[Config]] = None):
        """Initialize service container."""
        self._logger = logging.getLogger(__name__)
        if config is not None or self._config is None:
            type(self)._config = config or get_config()

    def _create_repositories(self) -> None:
        storage_type = self._config.PET_STORAGE_TYPE
        try:
            owners, pets = RepositoryFactory.create_repositories(
                storage_type=storage_type,
                redis_url=self._config.REDIS_URL
            )
        except Exception as e:
            self._logger.error(f"Failed to create repositories: {e}")
            raise
        type(self)._owner_repository = owners
        type(self)._pet_repository = pets
        self._logger.info(f"Repositories created with {storage_type} storage")

        if self._config.SEED_SAMPLE_DATA:
            seed_sample_data(owners, pets)

    def get_owner_repository(self) -> IOwnerRepository:
        """Get or create owner repository instance."""
        if self._owner_repository is None:
            self._create_repositories()
        return self._owner_repository

    def get_pet_repository(self) -> IPetRepository:
        """Get or create pet repository instance."""
        if self._pet_repository is None:
            self._create_repositories()
        return self._pet_repository

    def get_pet_form_handler(self) -> PetFormHandler:
        """Get or create pet form handler instance."""
        if self._pet_form_handler is None:
            type(self)._pet_form_handler = PetFormHandler(
                pets=self.get_pet_repository(),
                owners=self.get_owner_repository()
            )
            self._logger.info("PetFormHandler created")
        return self._pet_form_handler

    @classmethod
    def reset(cls) -> None:
        """Reset all service instances (useful for testing)."""
        cls._instance = None
        cls._config = None
        cls._owner_repository = None
        cls._pet_repository = None
        cls._pet_form_handler = None
