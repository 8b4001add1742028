"""Exceptions raised by the configuration layer. Scoring and ranking never raise."""


class ConfigError(ValueError):
    """Sort options could not be loaded from the environment or a file."""
