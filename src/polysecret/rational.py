"""Exact rationals over Python ints.

Every value is stored reduced: denominator > 0 and gcd(|num|, den) = 1,
so equal values always have equal (numerator, denominator) pairs.
Python int is arbitrary precision, so nothing here can overflow.
"""

import math
import re

from polysecret.digits import parse_digits, parse_signed, to_decimal
from polysecret.errors import DivisionByZero, InvalidEncoding

_CANONICAL = re.compile(r"^\s*([+-]?[0-9]+)(?:\s*/\s*([0-9]+))?\s*$")


class Rational:
    """Immutable reduced fraction numerator/denominator."""

    __slots__ = ('_num', '_den')

    def __init__(self, numerator: int, denominator: int = 1):
        if denominator == 0:
            raise DivisionByZero("Zero denominator")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        # gcd(0, d) == d, so zero reduces to 0/1
        g = math.gcd(numerator, denominator)
        object.__setattr__(self, '_num', numerator // g)
        object.__setattr__(self, '_den', denominator // g)

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    @classmethod
    def of(cls, value) -> 'Rational':
        """Lift an int to a Rational; Rationals pass through unchanged."""
        if isinstance(value, Rational):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value, 1)
        raise TypeError(f"Cannot convert {type(value).__name__} to Rational")

    @classmethod
    def parse(cls, text: str) -> 'Rational':
        """Parse "<int>" or "<int>/<int>", the inverse of str()."""
        m = _CANONICAL.match(text)
        if m is None:
            raise InvalidEncoding(f"Not a rational: {text!r}")
        den = parse_digits(m.group(2), 10) if m.group(2) is not None else 1
        return cls(parse_signed(m.group(1)), den)

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    # -- arithmetic ---------------------------------------------------------

    def add(self, other) -> 'Rational':
        o = Rational.of(other)
        return Rational(self._num * o._den + o._num * self._den,
                        self._den * o._den)

    def sub(self, other) -> 'Rational':
        o = Rational.of(other)
        return Rational(self._num * o._den - o._num * self._den,
                        self._den * o._den)

    def mul(self, other) -> 'Rational':
        o = Rational.of(other)
        return Rational(self._num * o._num, self._den * o._den)

    def div(self, other) -> 'Rational':
        o = Rational.of(other)
        if o._num == 0:
            raise DivisionByZero("Division by zero rational")
        return Rational(self._num * o._den, self._den * o._num)

    def neg(self) -> 'Rational':
        return Rational(-self._num, self._den)

    def is_zero(self) -> bool:
        return self._num == 0

    def is_integer(self) -> bool:
        return self._den == 1

    def to_canonical_string(self) -> str:
        if self._den == 1:
            return to_decimal(self._num)
        return f"{to_decimal(self._num)}/{to_decimal(self._den)}"

    # -- operator protocol --------------------------------------------------

    def _coerce(self, other):
        if isinstance(other, Rational):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Rational(other)
        return None

    def __add__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self.add(o)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self.sub(o)

    def __rsub__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else o.sub(self)

    def __mul__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self.mul(o)

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self.div(o)

    def __rtruediv__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else o.div(self)

    def __neg__(self):
        return self.neg()

    def __pos__(self):
        return self

    def __abs__(self):
        return Rational(abs(self._num), self._den)

    def __bool__(self):
        return self._num != 0

    # -- comparison ---------------------------------------------------------

    def __eq__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._num == o._num and self._den == o._den

    def __hash__(self):
        if self._den == 1:
            return hash(self._num)
        return hash((self._num, self._den))

    def _cmp(self, other):
        o = self._coerce(other)
        if o is None:
            return None
        lhs = self._num * o._den
        rhs = o._num * self._den
        return (lhs > rhs) - (lhs < rhs)

    def __lt__(self, other):
        c = self._cmp(other)
        return NotImplemented if c is None else c < 0

    def __le__(self, other):
        c = self._cmp(other)
        return NotImplemented if c is None else c <= 0

    def __gt__(self, other):
        c = self._cmp(other)
        return NotImplemented if c is None else c > 0

    def __ge__(self, other):
        c = self._cmp(other)
        return NotImplemented if c is None else c >= 0

    def __str__(self):
        return self.to_canonical_string()

    def __repr__(self):
        return f"Rational({to_decimal(self._num)}, {to_decimal(self._den)})"


ZERO = Rational(0)
ONE = Rational(1)
