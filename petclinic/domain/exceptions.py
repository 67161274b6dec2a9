"""Domain exceptions."""


class EntityNotFoundError(LookupError):
    """Raised when a repository lookup finds nothing for an identifier."""

    entity_name = "Entity"

    def __init__(self, entity_id):
        self.entity_id = entity_id
        super().__init__(f"{self.entity_name} {entity_id} not found")


class OwnerNotFoundError(EntityNotFoundError):
    entity_name = "Owner"


class PetNotFoundError(EntityNotFoundError):
    entity_name = "Pet"
