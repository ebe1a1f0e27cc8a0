"""JSON and text output for recovery outcomes."""

import json

from polysecret.interpolate import InterpolatedPolynomial
from polysecret.recover import Outcome

FORMATS = ('json', 'text')


def polynomial_to_dict(p: InterpolatedPolynomial) -> dict:
    return {
        'degree': p.degree,
        'coefficients_high_to_low': p.coefficients_high_to_low,
    }


def secret_to_dict(secret) -> dict:
    return {'secret': str(secret)}


def outcome_to_dict(o: Outcome) -> dict:
    """Result fields, or an error object, tagged with the outcome label."""
    entry = {'label': o.label}
    if not o.ok:
        entry['error'] = {'type': type(o.error).__name__, 'message': str(o.error)}
    elif isinstance(o.result, InterpolatedPolynomial):
        entry.update(polynomial_to_dict(o.result))
    else:
        entry.update(secret_to_dict(o.result))
    return entry


def to_json(outcomes: list) -> str:
    """A single outcome renders as an object, several as an array."""
    data = [outcome_to_dict(o) for o in outcomes]
    if len(data) == 1:
        return json.dumps(data[0], indent=2)
    return json.dumps(data, indent=2)


def _text_line(o: Outcome) -> str:
    if not o.ok:
        return f"error ({type(o.error).__name__}): {o.error}"
    if isinstance(o.result, InterpolatedPolynomial):
        coeffs = ' '.join(o.result.coefficients_high_to_low)
        return f"degree {o.result.degree}: {coeffs}"
    return f"secret: {o.result}"


def to_text(outcomes: list) -> str:
    """One line per outcome; labels are shown only for batches."""
    if len(outcomes) == 1:
        return _text_line(outcomes[0])
    return '\n'.join(f"{o.label}: {_text_line(o)}" for o in outcomes)


def render(outcomes: list, fmt: str = 'json') -> str:
    if fmt == 'json':
        return to_json(outcomes)
    if fmt == 'text':
        return to_text(outcomes)
    raise ValueError(f"Unknown format: {fmt}")
