"""Domain layer - core business objects and interfaces.

This layer contains:
- Domain entities (Owner, Pet, PetType)
- Repository interfaces
- Not-found exceptions
"""
