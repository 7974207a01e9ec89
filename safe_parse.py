from __future__ import annotations
"""Lenient coercion helpers for config files and command-line values.

Config values arrive from hand-edited JSON, so ``"800"``, ``800.0`` and
``800`` should all be accepted.  Anything that cannot be read as a finite
number logs a warning and yields the caller's default instead of aborting
scene generation.
"""

from typing import Any, Optional, Tuple
import math
import logging

logger = logging.getLogger(__name__)


def to_float(value: Any, default: Optional[float] = 0.0) -> Optional[float]:
    """Coerce ``value`` to a finite ``float`` or return ``default``."""
    if value is None:
        return default
    if isinstance(value, bool):
        logger.warning("to_float: refusing boolean %r, using %r", value, default)
        return default
    if isinstance(value, (int, float)):
        f = float(value)
    elif isinstance(value, str):
        try:
            f = float(value.strip())
        except ValueError:
            logger.warning("to_float: coercing %r to default %r", value, default)
            return default
    else:
        logger.warning("to_float: coercing %r to default %r", value, default)
        return default
    if not math.isfinite(f):
        logger.warning("to_float: non-finite %r, using %r", value, default)
        return default
    return f


def to_int(value: Any, default: Optional[int] = 0) -> Optional[int]:
    """Coerce ``value`` to ``int``.

    Integral floats (``"720.0"``, ``720.0``) are accepted; fractional ones
    are truncated with a warning since pixel sizes and counts are whole.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    f = to_float(value, default=None)
    if f is None:
        if value is not None:
            logger.warning("to_int: coercing %r to default %r", value, default)
        return default
    if not f.is_integer():
        logger.warning("to_int: truncating %r", value)
    return int(f)


def parse_size(text: str) -> Tuple[int, int]:
    """Parse ``"WIDTHxHEIGHT"`` into a positive ``(width, height)`` pair."""
    parts = text.lower().replace(" ", "").split("x")
    if len(parts) != 2:
        raise ValueError(f"expected WIDTHxHEIGHT, got {text!r}")
    w = to_int(parts[0], default=None)
    h = to_int(parts[1], default=None)
    if w is None or h is None or w <= 0 or h <= 0:
        raise ValueError(f"invalid viewport size {text!r}")
    return w, h
