"""Domain layer: graph model, configuration, diagnostics and ports."""
