"""Application layer - request-scoped use cases."""
