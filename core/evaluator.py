"""Answer checking."""

from .config import KOREAN_TO_ENGLISH, ENGLISH_TO_KOREAN
from .numerals import get_korean_text
from .utils import normalize_answer


def expected_answer(number: int, number_system: str, direction: str) -> str:
    """Get the answer expected for number under the given settings."""
    if direction == KOREAN_TO_ENGLISH:
        return str(number)
    if direction == ENGLISH_TO_KOREAN:
        return get_korean_text(number, number_system)
    raise ValueError(f"Unknown direction: {direction!r}")


def evaluate(user_answer: str, number: int, number_system: str, direction: str) -> tuple[bool, str]:
    """Check an answer. Returns (is_correct, expected).

    Surrounding whitespace is ignored on both sides; everything else must match
    exactly, so "05" is not "5".
    """
    expected = expected_answer(number, number_system, direction)
    is_correct = normalize_answer(user_answer) == normalize_answer(expected)
    return is_correct, expected
