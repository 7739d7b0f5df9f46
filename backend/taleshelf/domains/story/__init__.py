"""Story domain: entity, store and fixtures."""
