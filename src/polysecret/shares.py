"""Share documents: parse, decode base-encoded values, select points.

A share document looks like::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"}
    }

Index i becomes the x-coordinate; the decoded value is y.
"""

import json
import logging
import re
import string
from dataclasses import dataclass, field

from polysecret.digits import parse_digits, parse_signed, to_decimal
from polysecret.errors import InsufficientShares, InvalidEncoding

logger = logging.getLogger(__name__)

MIN_BASE = 2
MAX_BASE = 36

_DIGITS = string.digits + string.ascii_lowercase
_DECIMAL = re.compile(r"^\s*[+-]?[0-9]+\s*$")

SAMPLE_DOCUMENT = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


def _parse_int(raw, what: str) -> int:
    if isinstance(raw, bool):
        raise InvalidEncoding(f"{what} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _DECIMAL.match(raw):
        return parse_signed(raw.strip())
    raise InvalidEncoding(f"{what} must be an integer, got {raw!r}")


def parse_base(raw) -> int:
    """Parse a base given as int or decimal string; must be in 2..36."""
    base = _parse_int(raw, "base")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidEncoding(f"Base must be in [{MIN_BASE}, {MAX_BASE}], got {to_decimal(base)}")
    return base


def decode_value(value: str, base: int) -> int:
    """Decode value written in base (case-insensitive, optional sign).

    Stricter than int(): no whitespace, underscores or radix prefixes.
    """
    if not isinstance(value, str):
        raise InvalidEncoding(f"Value must be a string, got {value!r}")
    allowed = _DIGITS[:base]
    body = value[1:] if value[:1] in ("+", "-") else value
    if not body or any(ch not in allowed for ch in body.lower()):
        raise InvalidEncoding(f"Invalid digits for base {base}: {value!r}")
    return parse_signed(value, base)


@dataclass(frozen=True)
class Share:
    """One share as received: index (x), base, and the encoded y."""

    index: int
    base: int
    value: str

    def decode(self) -> tuple:
        """Return (x, y) with y decoded from its base."""
        return (self.index, decode_value(self.value, self.base))


@dataclass(frozen=True)
class ShareSet:
    """Declared n and k plus the shares, keyed by index."""

    n: int
    k: int
    shares: dict = field(default_factory=dict)

    def __post_init__(self):
        if self.k < 1:
            raise InvalidEncoding(f"Threshold k must be >= 1, got {to_decimal(self.k)}")
        if self.n < 1:
            raise InvalidEncoding(f"n must be >= 1, got {to_decimal(self.n)}")


def load_share_set(document) -> ShareSet:
    """Build a ShareSet from a parsed share document (a mapping)."""
    if not isinstance(document, dict):
        raise InvalidEncoding(f"Share document must be an object, got {type(document).__name__}")
    keys = document.get("keys")
    if not isinstance(keys, dict):
        raise InvalidEncoding("Missing 'keys' object")
    if "n" not in keys or "k" not in keys:
        raise InvalidEncoding("'keys' must contain 'n' and 'k'")
    n = _parse_int(keys["n"], "n")
    k = _parse_int(keys["k"], "k")

    shares = {}
    for key, entry in document.items():
        if isinstance(key, int) and not isinstance(key, bool):
            index = key
        elif isinstance(key, str) and key.isascii() and key.isdigit():
            index = parse_digits(key, 10)
        else:
            continue
        if index < 1:
            raise InvalidEncoding(f"Share index must be positive, got {key!r}")
        if index > n:
            # never scanned, so never validated
            continue
        if not isinstance(entry, dict) or "base" not in entry or "value" not in entry:
            raise InvalidEncoding(f"Share {key} must have 'base' and 'value'")
        shares[index] = Share(index, parse_base(entry["base"]), entry["value"])

    logger.debug("Loaded share set n=%s k=%s with %d shares",
                 to_decimal(n), to_decimal(k), len(shares))
    return ShareSet(n=n, k=k, shares=shares)


def parse_share_set(text) -> ShareSet:
    """Parse JSON text (str or bytes) into a ShareSet."""
    try:
        document = json.loads(text)
    except ValueError as e:
        # JSONDecodeError, undecodable bytes, or an over-long int literal
        raise InvalidEncoding(f"Invalid JSON: {e}") from e
    return load_share_set(document)


def select_points(share_set: ShareSet) -> list:
    """Decode shares at indices 1..n and keep the first k.

    Absent indices are skipped; indices above n are never considered.

    Returns:
        List of k (x, y) tuples in ascending x.
    """
    points = []
    for i in sorted(i for i in share_set.shares if 1 <= i <= share_set.n):
        points.append(share_set.shares[i].decode())

    if len(points) < share_set.k:
        raise InsufficientShares(len(points), share_set.k)
    return points[:share_set.k]
