"""Exact Lagrange interpolation over the rationals.

Given k points (x_i, y_i) with distinct integer x_i and integer y_i,
the unique polynomial of degree <= k-1 through them is

    L(x) = sum_i y_i * prod_{j!=i} (x - x_j) / (x_i - x_j).

Two ways to use it:

``interpolate_polynomial``
    Build every coefficient of L (Mode A).

``interpolate_at_zero``
    Compute only L(0), the secret, without building coefficient lists
    (Mode B). ``interpolate_at`` generalises this to any point.

Both agree exactly: interpolate_polynomial(p).eval_at(0) equals
interpolate_at_zero(p) for every input.
"""

import logging
from dataclasses import dataclass

from polysecret.errors import DuplicateAbscissa, InsufficientShares
from polysecret.poly import (
    mul_by_linear, poly_add, poly_scale, trim, poly_eval, high_to_low,
)
from polysecret.rational import Rational, ZERO, ONE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InterpolatedPolynomial:
    """Result of full reconstruction; coeffs are lowest degree first."""

    coeffs: tuple

    @property
    def degree(self) -> int:
        return len(self.coeffs) - 1

    @property
    def coefficients_high_to_low(self) -> list:
        return high_to_low(self.coeffs)

    def eval_at(self, x) -> Rational:
        return poly_eval(list(self.coeffs), x)


def require_distinct(points: list):
    """Raise unless points is non-empty with pairwise distinct x."""
    if not points:
        raise InsufficientShares(0, 1)
    seen = set()
    for x, _ in points:
        if x in seen:
            raise DuplicateAbscissa(x)
        seen.add(x)


def interpolate_polynomial(points: list) -> InterpolatedPolynomial:
    """Reconstruct all coefficients of the polynomial through points.

    Args:
        points: List of (x_i, y_i) int tuples with distinct x_i.

    Returns:
        InterpolatedPolynomial, trimmed to its true degree.
    """
    require_distinct(points)
    k = len(points)
    logger.debug("Interpolating full polynomial through %d points", k)

    result = [ZERO]
    for i in range(k):
        xi, yi = points[i]
        basis = [ONE]
        denom = 1
        for j in range(k):
            if j == i:
                continue
            xj = points[j][0]
            basis = mul_by_linear(basis, xj)
            denom *= xi - xj
        scale = Rational(yi, denom)
        result = poly_add(result, poly_scale(basis, scale))

    coeffs = trim(result)
    if len(coeffs) < k:
        logger.debug("Trimmed degree %d -> %d", k - 1, len(coeffs) - 1)
    return InterpolatedPolynomial(tuple(coeffs))


def interpolate_at(points: list, target) -> Rational:
    """Evaluate the interpolating polynomial at target without building it.

    Returns sum_i y_i * prod_{j!=i} (target - x_j)/(x_i - x_j).
    target may be an int or a Rational.
    """
    require_distinct(points)
    k = len(points)
    logger.debug("Interpolating value at x=%s through %d points", target, k)

    total = ZERO
    for i in range(k):
        xi, yi = points[i]
        num = 1
        den = 1
        for j in range(k):
            if j == i:
                continue
            xj = points[j][0]
            num *= target - xj
            den *= xi - xj
        total = total + Rational.of(yi * num) / den
    return total


def interpolate_at_zero(points: list) -> Rational:
    """The secret: the interpolating polynomial's value at x = 0."""
    return interpolate_at(points, 0)
