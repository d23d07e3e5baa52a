"""Engine exceptions."""


class ConfigurationError(ValueError):
    """Settings or slot catalog the engine refuses to run with."""
