"""Domain layer: entities, enums, ports and validated types."""
