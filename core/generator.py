"""Random question selection with recent-repeat avoidance."""

import logging
import random

from .config import (
    DEFAULT_MIN_RANGE, DEFAULT_MAX_RANGE,
    RECENT_HISTORY_SIZE, SMALL_RANGE_SPAN, MAX_REPEAT_ATTEMPTS
)
from .numerals import get_max_number
from .utils import coerce_range_value

logger = logging.getLogger(__name__)


def effective_range(min_range, max_range, number_system: str) -> tuple[int, int]:
    """Resolve configured bounds to an inclusive (low, high) pair.

    Both bounds are clamped to [0, max for the system]; an inverted pair is
    swapped rather than rejected.
    """
    system_max = get_max_number(number_system)
    low = min(coerce_range_value(min_range, DEFAULT_MIN_RANGE), system_max)
    high = min(coerce_range_value(max_range, DEFAULT_MAX_RANGE), system_max)
    if low > high:
        low, high = high, low
    return low, high


class QuestionGenerator:
    """Draws quiz numbers, steering away from the last few questions."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def _draw(self, low: int, span: int) -> int:
        return int(self.rng.random() * span) + low

    def next(self, min_range, max_range, number_system: str,
             recent: list[int] | None = None) -> tuple[int, list[int]]:
        """Pick the next number.

        Returns (number, updated_recent). Ranges of SMALL_RANGE_SPAN values or
        fewer are drawn without looking at recent, which is returned as is.
        """
        recent = list(recent or [])
        low, high = effective_range(min_range, max_range, number_system)
        span = high - low + 1

        if span <= SMALL_RANGE_SPAN:
            return self._draw(low, span), recent

        attempts = 0
        while True:
            number = self._draw(low, span)
            attempts += 1
            if number not in recent or attempts >= MAX_REPEAT_ATTEMPTS:
                break

        if number in recent:
            logger.debug(f"Accepting repeat {number} after {attempts} attempts in [{low}, {high}]")

        recent.append(number)
        return number, recent[-RECENT_HISTORY_SIZE:]
