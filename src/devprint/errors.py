"""Exception types raised by devprint.

Contract violations indicate a bug in an upstream collaborator (type
validation, ownership/layout computation) rather than a recoverable runtime
condition, so they derive from ``AssertionError``.
"""

__all__ = ["PrintContractError", "UnsupportedTypeError", "CoordinateRankError", "InvalidPrefixError"]


class PrintContractError(AssertionError):
    """Base class for violations of the print lowering contract."""


class UnsupportedTypeError(PrintContractError):
    """A value's type lies outside the closed set of printable types."""


class CoordinateRankError(PrintContractError):
    """An element coordinate does not match its operand's rank."""


class InvalidPrefixError(ValueError):
    """A user-supplied print prefix cannot be embedded in a format string."""
