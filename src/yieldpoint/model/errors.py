"""
Error types raised by the pure model.
"""


class YieldPointError(Exception):
    """Base class for all errors raised by the simulator core."""


class ConfigurationError(YieldPointError):
    """
    The material constants or thresholds are inconsistent.

    Raised once at start-up. Not recoverable: the application must not run
    with a misordered threshold model.
    """


class InvalidArgumentError(YieldPointError, ValueError):
    """A core function was called with an argument outside its domain."""
