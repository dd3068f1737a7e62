"""Domain layer: stores, ratings and shared exceptions."""
