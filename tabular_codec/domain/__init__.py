"""Domain layer: entities and pure services with no I/O."""
