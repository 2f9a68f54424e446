"""
errors.py - Exception types raised by the Connect Four engine

A full column is deliberately absent here: it is reported through a rejected
DropResult, not an exception.
"""


class ConnectFourError(Exception):
    """Base class for all engine errors."""


class OutOfRangeError(ConnectFourError, IndexError):
    """A column or row argument falls outside the grid."""

    def __init__(self, name: str, value: int, limit: int):
        super().__init__(f"{name} {value} out of range [0, {limit})")
        self.name = name
        self.value = value
        self.limit = limit


class InvalidStateError(ConnectFourError, RuntimeError):
    """A mutating call was made after the game reached a terminal state."""


class ConfigurationError(ConnectFourError, ValueError):
    """Invalid board dimensions, victory condition or players."""
