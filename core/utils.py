"""Utility functions for sutja application."""

import math
import re
import sys

_INTEGER_RE = re.compile(r'^[+-]?\d+$')

# Stands in for bounds too large to represent; clamped to the system max later
HUGE_BOUND = sys.maxsize


def coerce_range_value(value, default: int) -> int:
    """Turn a raw range bound from a settings form into a non-negative int.

    Missing values fall back to default. Negative or non-numeric input becomes 0
    so the quiz always has something to ask; values too large to convert
    (infinity, very long digit strings) are capped at HUGE_BOUND.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return min(max(0, value), HUGE_BOUND)
    if isinstance(value, float):
        if math.isnan(value) or value < 0:
            return 0
        if math.isinf(value):
            return HUGE_BOUND
        return min(int(value), HUGE_BOUND)
    text = str(value).strip()
    if not text:
        return default
    if not _INTEGER_RE.match(text):
        return 0
    if text.startswith('-'):
        return 0
    digits = text.lstrip('+').lstrip('0')
    if len(digits) > len(str(HUGE_BOUND)):
        return HUGE_BOUND
    return min(int(text), HUGE_BOUND)


def normalize_answer(text) -> str:
    """Strip surrounding whitespace from an answer; None counts as empty."""
    if text is None:
        return ''
    return str(text).strip()
