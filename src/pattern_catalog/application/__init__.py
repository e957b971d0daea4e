"""Application layer - services, DTOs and mappers."""
