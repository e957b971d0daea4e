"""Infrastructure layer - persistence and logging."""
