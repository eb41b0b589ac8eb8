class ConfigurationError(ValueError):
    """Invalid comparison configuration: bad sample grid, orders or backend."""
