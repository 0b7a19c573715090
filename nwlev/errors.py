"""
errors.py — exception types raised by nwlev

Both errors are programmer-error faults raised synchronously at the call
that violates the contract; nothing inside the package catches them.
"""


class NWLevError(Exception):
    """Base class for all nwlev errors."""


class InvalidArgumentError(NWLevError, ValueError):
    """A required argument (a sequence, a goal name) is missing or invalid."""


class OutOfRangeError(NWLevError, IndexError):
    """A matrix query position lies outside the (n+1) x (m+1) grid."""
