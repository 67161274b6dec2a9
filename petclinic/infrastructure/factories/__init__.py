"""Factory implementations for creating infrastructure components."""
from petclinic.infrastructure.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
