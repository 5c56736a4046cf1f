"""Domain layer: repository contracts independent of storage."""
