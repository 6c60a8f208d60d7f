"""Infrastructure layer: configuration loading, providers and logging."""
