"""
Error types for the DustWatch System.

All analytics failures are immediate and local to the call that raised them.
Each error also derives from the built-in exception a caller would naturally
catch (ValueError for bad input, KeyError for a failed lookup).
"""

from typing import Optional


class DustWatchError(Exception):
    """Base class for all DustWatch errors."""


class EmptyInputError(DustWatchError, ValueError):
    """Raised when an aggregation is attempted over zero units."""

    def __init__(self, operation: str = "aggregation"):
        super().__init__(f"{operation} requires at least one unit")
        self.operation = operation


class UnknownUnitError(DustWatchError, KeyError):
    """Raised when a ward or route identifier has no match."""

    def __init__(self, unit_id: str):
        super().__init__(unit_id)
        self.unit_id = unit_id

    def __str__(self) -> str:
        return f"unknown unit: {self.unit_id!r}"


class MissingDerivedValueError(DustWatchError, ValueError):
    """
    Raised when a derived value is requested for a unit that lacks its inputs.

    For routes this means asking for the effectiveness of a route that has
    no "after" reading yet.
    """

    def __init__(self, unit_id: str, field: str, reason: Optional[str] = None):
        message = f"{field} is not available for {unit_id!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.unit_id = unit_id
        self.field = field
