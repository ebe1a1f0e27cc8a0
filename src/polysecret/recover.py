"""End-to-end recovery from share sets, one at a time or in batches."""

import logging
from dataclasses import dataclass
from enum import Enum

from polysecret.errors import PolysecretError
from polysecret.interpolate import (
    InterpolatedPolynomial, interpolate_polynomial, interpolate_at_zero,
)
from polysecret.rational import Rational
from polysecret.shares import ShareSet, load_share_set, parse_share_set, select_points

logger = logging.getLogger(__name__)


class Mode(Enum):
    POLYNOMIAL = "polynomial"
    SECRET = "secret"


@dataclass
class Outcome:
    """Result or error of recovering one share set."""

    label: str
    result: object = None  # InterpolatedPolynomial | Rational
    error: PolysecretError = None

    @property
    def ok(self) -> bool:
        return self.error is None


def reconstruct_polynomial(share_set: ShareSet) -> InterpolatedPolynomial:
    """Full coefficient list from the first k shares."""
    return interpolate_polynomial(select_points(share_set))


def reconstruct_secret(share_set: ShareSet) -> Rational:
    """Value at x=0 from the first k shares."""
    return interpolate_at_zero(select_points(share_set))


def _as_share_set(source) -> ShareSet:
    if isinstance(source, ShareSet):
        return source
    if isinstance(source, (str, bytes)):
        return parse_share_set(source)
    return load_share_set(source)


def recover_one(source, mode: Mode = Mode.POLYNOMIAL, label: str = "") -> Outcome:
    """Recover one share set, capturing polysecret errors in the Outcome.

    Args:
        source: ShareSet, JSON text or bytes, or a parsed share document.
        mode: Mode.POLYNOMIAL or Mode.SECRET.
        label: Name reported with the outcome.
    """
    try:
        share_set = _as_share_set(source)
        if mode is Mode.SECRET:
            result = reconstruct_secret(share_set)
        else:
            result = reconstruct_polynomial(share_set)
    except PolysecretError as e:
        logger.warning("Recovery failed for %s: %s: %s",
                       label or "<input>", type(e).__name__, e)
        return Outcome(label=label, error=e)
    return Outcome(label=label, result=result)


def recover_batch(items: list, mode: Mode = Mode.POLYNOMIAL) -> list:
    """Recover independent share sets; one failure never affects another.

    Args:
        items: List of (label, source) pairs.

    Returns:
        List of Outcome, in input order.
    """
    outcomes = [recover_one(source, mode, label) for label, source in items]
    failed = sum(1 for o in outcomes if not o.ok)
    logger.info("Batch of %d: %d ok, %d failed",
                len(outcomes), len(outcomes) - failed, failed)
    return outcomes
