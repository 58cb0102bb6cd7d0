"""Domain models for sutja application."""

import logging

from .config import (
    NUMBER_SYSTEMS, DIRECTIONS, KOREAN_TO_ENGLISH,
    DEFAULT_NUMBER_SYSTEM, DEFAULT_DIRECTION,
    DEFAULT_MIN_RANGE, DEFAULT_MAX_RANGE,
    AUTO_ADVANCE_DELAY_SECONDS
)
from .evaluator import evaluate
from .generator import QuestionGenerator, effective_range
from .interfaces import AdvanceScheduler
from .numerals import get_korean_text, get_max_number
from .utils import coerce_range_value, normalize_answer

logger = logging.getLogger(__name__)


class QuizStateError(Exception):
    """Raised when an action does not fit the current state of the quiz."""


class Score:
    """Running tally of answers in a session."""

    def __init__(self, correct: int = 0, total: int = 0):
        self.correct = correct
        self.total = total

    def record(self, is_correct: bool) -> None:
        self.total += 1
        if is_correct:
            self.correct += 1

    @property
    def percentage(self) -> int:
        if self.total == 0:
            return 0
        return round(self.correct * 100 / self.total)

    def get_display(self) -> str:
        return f"{self.correct}/{self.total}"

    def to_dict(self) -> dict:
        return {
            'correct': self.correct,
            'total': self.total,
            'percentage': self.percentage,
            'display': self.get_display()
        }


class QuizSettings:
    """Number system, direction and range of a quiz."""

    def __init__(self, number_system: str = DEFAULT_NUMBER_SYSTEM,
                 direction: str = DEFAULT_DIRECTION,
                 min_range=DEFAULT_MIN_RANGE, max_range=DEFAULT_MAX_RANGE):
        if number_system not in NUMBER_SYSTEMS:
            raise ValueError(f"Unknown number system: {number_system!r}")
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction: {direction!r}")
        self.number_system = number_system
        self.direction = direction
        self.min_range = coerce_range_value(min_range, DEFAULT_MIN_RANGE)
        self.max_range = coerce_range_value(max_range, DEFAULT_MAX_RANGE)

    @property
    def max_number(self) -> int:
        return get_max_number(self.number_system)

    def get_effective_range(self) -> tuple[int, int]:
        """Range actually drawn from, after clamping to the system and swapping."""
        return effective_range(self.min_range, self.max_range, self.number_system)

    def to_dict(self) -> dict:
        low, high = self.get_effective_range()
        return {
            'number_system': self.number_system,
            'direction': self.direction,
            'min_range': self.min_range,
            'max_range': self.max_range,
            'effective_min': low,
            'effective_max': high,
            'max_number': self.max_number
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'QuizSettings':
        return cls(
            number_system=data.get('number_system', DEFAULT_NUMBER_SYSTEM),
            direction=data.get('direction', DEFAULT_DIRECTION),
            min_range=data.get('min_range', DEFAULT_MIN_RANGE),
            max_range=data.get('max_range', DEFAULT_MAX_RANGE)
        )


class QuizRound:
    """A single question and, once answered, its outcome."""

    def __init__(self, round_id: int, number: int):
        self.round_id = round_id
        self.number = number
        self.answer = None
        self.expected = None
        self.is_correct = None
        self.answered = False

    def to_dict(self) -> dict:
        return {
            'round_id': self.round_id,
            'number': self.number,
            'answer': self.answer,
            'expected': self.expected,
            'is_correct': self.is_correct,
            'answered': self.answered
        }


class QuizSession:
    """State of one person's drill: settings, score, recent questions and the current round.

    The session is owned by whoever drives the quiz (HTTP server or console);
    nothing here is global.
    """

    def __init__(self, settings: QuizSettings = None,
                 generator: QuestionGenerator = None,
                 scheduler: AdvanceScheduler = None,
                 advance_delay: float = AUTO_ADVANCE_DELAY_SECONDS):
        self.settings = settings or QuizSettings()
        self.generator = generator or QuestionGenerator()
        self.scheduler = scheduler
        self.advance_delay = advance_delay
        self.score = Score()
        self.recent_numbers = []
        self.current_round = None
        self._round_counter = 0

    def _cancel_pending_advance(self) -> None:
        if self.scheduler:
            self.scheduler.cancel()

    def next_question(self) -> QuizRound:
        """Generate a new question with the active settings."""
        self._cancel_pending_advance()
        number, self.recent_numbers = self.generator.next(
            self.settings.min_range, self.settings.max_range,
            self.settings.number_system, self.recent_numbers
        )
        self._round_counter += 1
        self.current_round = QuizRound(self._round_counter, number)
        return self.current_round

    def get_current_round(self) -> QuizRound:
        """Get the active round, generating the first question if needed."""
        if self.current_round is None:
            return self.next_question()
        return self.current_round

    def current_prompt(self) -> str:
        """Text shown for the current question under the active settings."""
        round = self.get_current_round()
        if self.settings.direction == KOREAN_TO_ENGLISH:
            return get_korean_text(round.number, self.settings.number_system)
        return str(round.number)

    def submit_answer(self, answer: str) -> dict:
        """Check an answer to the current question and update the score.

        Correctness uses the settings active now, not those in effect when the
        question was generated. A correct answer schedules an automatic advance.
        """
        round = self.current_round
        if round is None:
            raise QuizStateError("No active round")
        if round.answered:
            raise QuizStateError("Round already answered")
        if not normalize_answer(answer):
            raise QuizStateError("Answer is empty")

        is_correct, expected = evaluate(
            answer, round.number, self.settings.number_system, self.settings.direction
        )
        round.answer = answer
        round.expected = expected
        round.is_correct = is_correct
        round.answered = True
        self.score.record(is_correct)

        if is_correct and self.scheduler:
            round_id = round.round_id
            self.scheduler.schedule(self.advance_delay, lambda: self.advance(round_id))

        return {
            'round_id': round.round_id,
            'is_correct': is_correct,
            'expected': expected,
            'score': self.score.to_dict(),
            'auto_advance': is_correct,
            'advance_delay_ms': int(self.advance_delay * 1000)
        }

    def advance(self, round_id: int = None) -> QuizRound:
        """Move to a new question.

        With round_id, only advances if that round is still current, so a timer
        and a manual request for the same answered round advance once between them.
        """
        if round_id is not None and self.current_round is not None \
                and self.current_round.round_id != round_id:
            logger.debug(f"Ignoring advance for stale round {round_id}")
            return self.current_round
        return self.next_question()

    def apply_settings(self, settings: QuizSettings) -> QuizRound:
        """Switch to new settings and ask a fresh question. The score is kept."""
        self.settings = settings
        self.recent_numbers = []
        low, high = settings.get_effective_range()
        logger.info(f"Settings applied: {settings.number_system}, {settings.direction}, range [{low}, {high}]")
        return self.next_question()

    def reset(self) -> QuizRound:
        """Start over with a zero score."""
        self.score = Score()
        self.recent_numbers = []
        return self.next_question()

    def question_dict(self) -> dict:
        round = self.get_current_round()
        return {
            'round_id': round.round_id,
            'prompt': self.current_prompt(),
            'number_system': self.settings.number_system,
            'direction': self.settings.direction,
            'answered': round.answered,
            'is_correct': round.is_correct,
            'expected': round.expected if round.answered else None
        }

    def to_dict(self) -> dict:
        return {
            'settings': self.settings.to_dict(),
            'score': self.score.to_dict(),
            'recent_numbers': list(self.recent_numbers),
            'current_round': self.current_round.to_dict() if self.current_round else None
        }
