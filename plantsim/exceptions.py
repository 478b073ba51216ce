"""
Custom exceptions for the plantsim library.
"""


class PlantSimError(Exception):
    """Base exception for all plantsim errors."""
    pass


class InvalidArgumentError(PlantSimError, ValueError):
    """Control input outside the accepted domain."""

    def __init__(self, argument: str, value, message: str = None):
        super().__init__(message or f"Invalid value for {argument}: {value!r}")
        self.argument = argument
        self.value = value


class ConfigurationError(PlantSimError):
    """Simulation configuration could not be loaded or validated."""
    pass
