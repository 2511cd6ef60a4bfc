"""Domain layer: enums, entities, errors, ports and pure naming rules."""
