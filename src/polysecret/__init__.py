"""polysecret: recover a polynomial, or its secret, from threshold shares.

Exact rational Lagrange interpolation over base-encoded (x, y) shares.
"""

from polysecret.errors import (
    PolysecretError, DivisionByZero, DuplicateAbscissa,
    InsufficientShares, InvalidEncoding,
)
from polysecret.rational import Rational
from polysecret.interpolate import (
    InterpolatedPolynomial,
    interpolate_polynomial, interpolate_at_zero, interpolate_at,
)
from polysecret.shares import Share, ShareSet, load_share_set, parse_share_set, select_points
from polysecret.recover import (
    Mode, Outcome,
    reconstruct_polynomial, reconstruct_secret, recover_one, recover_batch,
)

__version__ = "0.1.0"

__all__ = [
    "PolysecretError", "DivisionByZero", "DuplicateAbscissa",
    "InsufficientShares", "InvalidEncoding",
    "Rational",
    "InterpolatedPolynomial",
    "interpolate_polynomial", "interpolate_at_zero", "interpolate_at",
    "Share", "ShareSet", "load_share_set", "parse_share_set", "select_points",
    "Mode", "Outcome",
    "reconstruct_polynomial", "reconstruct_secret", "recover_one", "recover_batch",
]
