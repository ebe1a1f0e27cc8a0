"""Exceptions raised by polysecret.

Each error also derives from the builtin it refines, so callers that
only know about ZeroDivisionError / ValueError still catch them.
"""

from polysecret.digits import to_decimal


class PolysecretError(Exception):
    """Base class for all polysecret failures."""


class DivisionByZero(PolysecretError, ZeroDivisionError):
    """Zero denominator, or division by the zero rational."""


class DuplicateAbscissa(PolysecretError, ValueError):
    """Two interpolation points share an x-coordinate."""

    def __init__(self, x: int):
        super().__init__(f"Duplicate x-coordinate {to_decimal(x)} among interpolation points")
        self.x = x


class InsufficientShares(PolysecretError, ValueError):
    """Fewer usable shares than the threshold requires."""

    def __init__(self, found: int, needed: int):
        super().__init__(f"Not enough points: found {to_decimal(found)}, need {to_decimal(needed)}")
        self.found = found
        self.needed = needed


class InvalidEncoding(PolysecretError, ValueError):
    """Malformed share document, base, or encoded value."""
