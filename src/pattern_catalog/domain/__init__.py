"""Domain layer: value objects and the exception hierarchy."""
