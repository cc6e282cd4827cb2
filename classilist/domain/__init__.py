"""Domain layer: formatting entities and pure table-writing services."""
