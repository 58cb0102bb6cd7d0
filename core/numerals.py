"""Korean numeral tables and number-to-text conversion."""

from .config import NATIVE, SINO, NATIVE_MAX, SINO_MAX, OUT_OF_RANGE_TEXT

ZERO_WORD = '영'

# Native Korean numbers, index == value (0-99)
NATIVE_KOREAN = [
    '영', '하나', '둘', '셋', '넷', '다섯', '여섯', '일곱', '여덟', '아홉', '열',
    '열하나', '열둘', '열셋', '열넷', '열다섯', '열여섯', '열일곱', '열여덟', '열아홉', '스물',
    '스물하나', '스물둘', '스물셋', '스물넷', '스물다섯', '스물여섯', '스물일곱', '스물여덟', '스물아홉', '서른',
    '서른하나', '서른둘', '서른셋', '서른넷', '서른다섯', '서른여섯', '서른일곱', '서른여덟', '서른아홉', '마흔',
    '마흔하나', '마흔둘', '마흔셋', '마흔넷', '마흔다섯', '마흔여섯', '마흔일곱', '마흔여덟', '마흔아홉', '쉰',
    '쉰하나', '쉰둘', '쉰셋', '쉰넷', '쉰다섯', '쉰여섯', '쉰일곱', '쉰여덟', '쉰아홉', '예순',
    '예순하나', '예순둘', '예순셋', '예순넷', '예순다섯', '예순여섯', '예순일곱', '예순여덟', '예순아홉', '일흔',
    '일흔하나', '일흔둘', '일흔셋', '일흔넷', '일흔다섯', '일흔여섯', '일흔일곱', '일흔여덟', '일흔아홉', '여든',
    '여든하나', '여든둘', '여든셋', '여든넷', '여든다섯', '여든여섯', '여든일곱', '여든여덟', '여든아홉', '아흔',
    '아흔하나', '아흔둘', '아흔셋', '아흔넷', '아흔다섯', '아흔여섯', '아흔일곱', '아흔여덟', '아흔아홉'
]

# Sino-Korean digit words (index 0 unused) and place units
SINO_DIGITS = ['', '일', '이', '삼', '사', '오', '육', '칠', '팔', '구']
SINO_UNITS = ['', '십', '백', '천']


class InvalidNumberError(ValueError):
    """Raised for values that cannot be spoken at all (negative or non-integer)."""


def _check_number(num) -> None:
    if isinstance(num, bool) or not isinstance(num, int):
        raise InvalidNumberError(f"Expected a whole number, got {num!r}")
    if num < 0:
        raise InvalidNumberError(f"Negative numbers are not supported: {num}")


def get_max_number(number_system: str) -> int:
    """Get the largest number quizzed in a number system."""
    if number_system == NATIVE:
        return NATIVE_MAX
    if number_system == SINO:
        return SINO_MAX
    raise ValueError(f"Unknown number system: {number_system!r}")


def convert_to_native_korean(num: int) -> str:
    """Look up the native Korean word for num, or the out-of-range marker above 99."""
    _check_number(num)
    if num < len(NATIVE_KOREAN):
        return NATIVE_KOREAN[num]
    return OUT_OF_RANGE_TEXT


def convert_to_sino_korean(num: int) -> str:
    """Build the Sino-Korean reading of num (0-9999).

    Digits are read from the most significant one. A digit of one in any
    place above the ones is dropped so 10 reads 십 and 100 reads 백, and
    zero digits contribute nothing (2005 reads 이천오).
    """
    _check_number(num)
    if num == 0:
        return ZERO_WORD
    if num > SINO_MAX:
        return OUT_OF_RANGE_TEXT

    digits = str(num)
    parts = []
    for i, ch in enumerate(digits):
        digit = int(ch)
        position = len(digits) - i - 1
        if digit == 0:
            continue
        if digit == 1 and position > 0:
            parts.append(SINO_UNITS[position])
        else:
            parts.append(SINO_DIGITS[digit] + SINO_UNITS[position])
    return ''.join(parts)


def get_korean_text(num: int, number_system: str) -> str:
    """Get the Korean text for num in the given number system."""
    if number_system == NATIVE:
        return convert_to_native_korean(num)
    if number_system == SINO:
        return convert_to_sino_korean(num)
    raise ValueError(f"Unknown number system: {number_system!r}")
