"""Runtime settings read from the environment.

POLYSECRET_MODE       polynomial | secret        (default polynomial)
POLYSECRET_FORMAT     json | text                (default json)
POLYSECRET_LOG_LEVEL  standard logging level name (default WARNING)

Command-line options take precedence over these.
"""

import logging
import os
from dataclasses import dataclass

from polysecret.recover import Mode
from polysecret.report import FORMATS

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class Settings:
    mode: Mode = Mode.POLYNOMIAL
    fmt: str = 'json'
    log_level: str = 'WARNING'

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(environ=None) -> Settings:
    """Build Settings from environ (defaults to os.environ)."""
    env = os.environ if environ is None else environ

    raw_mode = env.get('POLYSECRET_MODE', Mode.POLYNOMIAL.value).strip().lower()
    try:
        mode = Mode(raw_mode)
    except ValueError:
        raise ValueError(f"POLYSECRET_MODE must be one of "
                         f"{[m.value for m in Mode]}, got {raw_mode!r}") from None

    fmt = env.get('POLYSECRET_FORMAT', 'json').strip().lower()
    if fmt not in FORMATS:
        raise ValueError(f"POLYSECRET_FORMAT must be one of {list(FORMATS)}, got {fmt!r}")

    level = env.get('POLYSECRET_LOG_LEVEL', 'WARNING').strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"POLYSECRET_LOG_LEVEL must be one of {list(LOG_LEVELS)}, got {level!r}")

    return Settings(mode=mode, fmt=fmt, log_level=level)
