"""Domain layer - record table concepts independent of Redis."""
