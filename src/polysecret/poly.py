"""Polynomial helpers over Rational coefficients.

A polynomial is a list of Rationals, lowest degree first:
poly[i] is the coefficient of x^i. Every function returns a fresh list
and leaves its inputs untouched.
"""

from polysecret.rational import Rational, ZERO


def mul_by_linear(poly: list, root: int) -> list:
    """Return poly * (x - root).

    The result is one coefficient longer than poly. Coefficient i of the
    input adds -root * c to slot i and c to slot i+1.
    """
    neg_root = Rational.of(-root)
    out = [ZERO] * (len(poly) + 1)
    for i, c in enumerate(poly):
        out[i] = out[i] + c * neg_root
        out[i + 1] = out[i + 1] + c
    return out


def poly_add(a: list, b: list) -> list:
    """Pointwise sum; the shorter polynomial is padded with zeros."""
    m = max(len(a), len(b))
    return [
        (a[i] if i < len(a) else ZERO) + (b[i] if i < len(b) else ZERO)
        for i in range(m)
    ]


def poly_scale(a: list, s) -> list:
    """Multiply every coefficient by the scalar s."""
    s = Rational.of(s)
    return [c * s for c in a]


def trim(poly: list) -> list:
    """Drop zero leading (highest-degree) coefficients, keeping at least one."""
    out = list(poly)
    while len(out) > 1 and out[-1].is_zero():
        out.pop()
    return out


def degree(poly: list) -> int:
    """Degree of the trimmed polynomial. The zero polynomial has degree 0."""
    return len(trim(poly)) - 1


def poly_eval(poly: list, x) -> Rational:
    """Evaluate at x using Horner's method.

    poly = [a_0, a_1, ..., a_d] (lowest degree first).
    """
    x = Rational.of(x)
    result = ZERO
    for c in reversed(poly):
        result = result * x + c
    return result


def high_to_low(poly: list) -> list:
    """Coefficients as strings, highest degree first."""
    return [str(c) for c in reversed(poly)]
