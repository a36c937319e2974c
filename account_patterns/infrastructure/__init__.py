"""Infrastructure layer - logging and instance management."""
