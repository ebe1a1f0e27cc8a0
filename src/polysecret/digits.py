"""Digit-string conversion for ints of any length.

int(text, base) and str(n) refuse more than sys.get_int_max_str_digits()
digits for non-power-of-two bases. These helpers work in fixed-size
chunks, each well under that limit, so share values and rendered
coefficients are never rejected for being large.
"""

CHUNK = 1000

_TEN_CHUNK = 10 ** CHUNK


def parse_digits(body: str, base: int) -> int:
    """Value of an unsigned digit string in base (digits already validated)."""
    value = 0
    for start in range(0, len(body), CHUNK):
        chunk = body[start:start + CHUNK]
        value = value * base ** len(chunk) + int(chunk, base)
    return value


def parse_signed(text: str, base: int = 10) -> int:
    """Like parse_digits, with an optional leading '+' or '-'."""
    if text[:1] in ("+", "-"):
        magnitude = parse_digits(text[1:], base)
        return -magnitude if text[0] == "-" else magnitude
    return parse_digits(text, base)


def to_decimal(n: int) -> str:
    """Decimal string of n."""
    if n < 0:
        return "-" + to_decimal(-n)
    if n < _TEN_CHUNK:
        return str(n)
    parts = []
    while n:
        n, r = divmod(n, _TEN_CHUNK)
        parts.append(r)
    head = str(parts.pop())
    return head + "".join(f"{p:0{CHUNK}d}" for p in reversed(parts))
