"""Infrastructure layer - database bootstrap and logging."""
