"""
Exception classes for the genetic algorithm

Configuration problems are reported separately from population handling
problems so callers can tell a bad run request from a broken run.
"""


class GAException(Exception):
    """Base exception for all genetic algorithm related errors."""
    pass


class ConfigurationError(GAException, ValueError):
    """Raised when GA configuration is invalid."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.field = field


class PopulationError(GAException):
    """Raised when population operations fail."""
    pass
