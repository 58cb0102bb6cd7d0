from .models import Score, QuizSettings, QuizRound, QuizSession, QuizStateError
from .interfaces import AdvanceScheduler
from .numerals import (
    InvalidNumberError, get_korean_text, get_max_number,
    convert_to_native_korean, convert_to_sino_korean
)
from .generator import QuestionGenerator, effective_range
from .evaluator import evaluate, expected_answer
from .utils import coerce_range_value, normalize_answer
from .config import (
    NATIVE, SINO, NUMBER_SYSTEMS,
    KOREAN_TO_ENGLISH, ENGLISH_TO_KOREAN, DIRECTIONS,
    RECENT_HISTORY_SIZE, MAX_REPEAT_ATTEMPTS, AUTO_ADVANCE_DELAY_SECONDS,
    OUT_OF_RANGE_TEXT
)

__all__ = [
    'Score', 'QuizSettings', 'QuizRound', 'QuizSession', 'QuizStateError',
    'AdvanceScheduler',
    'InvalidNumberError', 'get_korean_text', 'get_max_number',
    'convert_to_native_korean', 'convert_to_sino_korean',
    'QuestionGenerator', 'effective_range',
    'evaluate', 'expected_answer',
    'coerce_range_value', 'normalize_answer',
    'NATIVE', 'SINO', 'NUMBER_SYSTEMS',
    'KOREAN_TO_ENGLISH', 'ENGLISH_TO_KOREAN', 'DIRECTIONS',
    'RECENT_HISTORY_SIZE', 'MAX_REPEAT_ATTEMPTS', 'AUTO_ADVANCE_DELAY_SECONDS',
    'OUT_OF_RANGE_TEXT'
]
