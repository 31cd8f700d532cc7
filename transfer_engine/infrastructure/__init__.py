"""Infrastructure layer: configuration, logging and outbound adapters."""
