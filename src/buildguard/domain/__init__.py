"""Domain layer: enumerations, records and the role catalog."""
