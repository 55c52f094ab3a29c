"""Application core: configuration and logging."""
