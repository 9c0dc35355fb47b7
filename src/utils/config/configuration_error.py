"""Error raised when a market or holiday definition cannot be loaded."""


class ConfigurationError(ValueError):
    """Malformed static configuration detected at load time."""
