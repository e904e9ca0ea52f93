"""Application layer: repositories, use cases and DTOs."""
