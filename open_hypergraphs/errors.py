"""Exceptions raised by open_hypergraphs.

Every error derives from ``OpenHypergraphsError`` and from the closest builtin
exception, so callers can catch either the library-specific class or the
usual ``IndexError`` / ``ValueError`` / ``ZeroDivisionError``.
"""


class OpenHypergraphsError(Exception):
    """Base class for all open_hypergraphs errors."""


class OutOfRangeError(OpenHypergraphsError, IndexError):
    """An index (or table entry) is not below the relevant length."""


class LengthMismatchError(OpenHypergraphsError, ValueError):
    """Two arrays or ranges were expected to have equal length."""


class InvalidRangeError(OpenHypergraphsError, ValueError):
    """A start/stop pair or slice is malformed."""


class DivisionByZeroError(OpenHypergraphsError, ZeroDivisionError):
    """Elementwise division by zero."""


class InvalidCoproductError(OpenHypergraphsError, ValueError):
    """Segment lengths disagree with the payload length or declared codomain."""


class InconsistentMergeError(OpenHypergraphsError, ValueError):
    """Identified positions carry different values."""


class DomainMismatchError(OpenHypergraphsError, ValueError):
    """A mapping's domain does not match the codomain it is composed with."""
