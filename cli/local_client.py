"""In-process client that drives a QuizSession without a server."""

from typing import Optional

from core.models import QuizSession, QuizSettings, QuizStateError
from core.numerals import get_korean_text


class LocalQuizClient:
    """Same interface as SutjaAPIClient, backed by a local session.

    No scheduler is attached: the console does the auto-advance wait itself.
    """

    def __init__(self, settings: QuizSettings = None, user_id: str = "default"):
        self.base_url = 'local'
        self.user_id = user_id
        self.quiz = QuizSession(settings=settings)

    def health_check(self) -> dict:
        return {'service': 'sutja (local)'}

    def get_question(self) -> dict:
        return self.quiz.question_dict()

    def next_question(self, round_id: Optional[int] = None) -> dict:
        self.quiz.advance(round_id)
        return self.quiz.question_dict()

    def submit_answer(self, answer: str, round_id: Optional[int] = None) -> dict:
        current = self.quiz.current_round
        if round_id is not None and (current is None or current.round_id != round_id):
            raise QuizStateError("Question has changed")
        return self.quiz.submit_answer(answer)

    def get_status(self) -> dict:
        return {
            'settings': self.quiz.settings.to_dict(),
            'score': self.quiz.score.to_dict()
        }

    def get_settings(self) -> dict:
        return self.quiz.settings.to_dict()

    def update_settings(self, **settings) -> dict:
        current = self.quiz.settings
        new_settings = QuizSettings(
            number_system=settings.get('number_system') or current.number_system,
            direction=settings.get('direction') or current.direction,
            min_range=settings['min_range'] if settings.get('min_range') is not None else current.min_range,
            max_range=settings['max_range'] if settings.get('max_range') is not None else current.max_range
        )
        self.quiz.apply_settings(new_settings)
        return new_settings.to_dict()

    def reset(self) -> dict:
        self.quiz.reset()
        return self.quiz.question_dict()

    def convert(self, number: int, system: str = 'sino') -> dict:
        return {'number': number, 'number_system': system, 'text': get_korean_text(number, system)}
