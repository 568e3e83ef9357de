"""Domain layer: models, value objects, services and repository interfaces."""
