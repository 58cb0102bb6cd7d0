"""FastAPI server for sutja application."""

import asyncio
import logging
from typing import Callable, Literal, Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

logger = logging.getLogger(__name__)

from core.config import AUTO_ADVANCE_DELAY_SECONDS
from core.interfaces import AdvanceScheduler
from core.models import QuizSession, QuizSettings, QuizStateError
from core.numerals import InvalidNumberError, get_korean_text

from server.config_file import ConfigFile

VERSION = "0.1.0"


# Pydantic models for API
class AnswerRequest(BaseModel):
    answer: str
    user_id: str = "default"
    round_id: Optional[int] = None  # Question the answer was typed for


class NextRequest(BaseModel):
    user_id: str = "default"
    round_id: Optional[int] = None  # Only advance if this question is still current


class SettingsRequest(BaseModel):
    user_id: str = "default"
    number_system: Optional[Literal['native', 'sino']] = None
    direction: Optional[Literal['korean_to_english', 'english_to_korean']] = None
    # Raw form values; coerced leniently (negative or non-numeric becomes 0)
    min_range: Optional[Union[int, float, str]] = None
    max_range: Optional[Union[int, float, str]] = None


class ResetRequest(BaseModel):
    user_id: str = "default"


class ScoreResponse(BaseModel):
    correct: int
    total: int
    percentage: int
    display: str


class SettingsResponse(BaseModel):
    number_system: str
    direction: str
    min_range: int
    max_range: int
    effective_min: int
    effective_max: int
    max_number: int


class QuestionResponse(BaseModel):
    round_id: int
    prompt: str
    number_system: str
    direction: str
    answered: bool
    is_correct: Optional[bool]
    expected: Optional[str]


class AnswerResponse(BaseModel):
    round_id: int
    is_correct: bool
    expected: str
    score: ScoreResponse
    auto_advance: bool
    advance_delay_ms: int


class StatusResponse(BaseModel):
    settings: SettingsResponse
    score: ScoreResponse


class ConvertResponse(BaseModel):
    number: int
    number_system: str
    text: str


class AsyncioScheduler(AdvanceScheduler):
    """Runs the auto-advance callback on the server's event loop."""

    def __init__(self):
        self._handle: Optional[asyncio.TimerHandle] = None

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(delay_seconds, self._run, callback)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _run(self, callback: Callable[[], None]) -> None:
        self._handle = None
        try:
            callback()
        except Exception as e:
            logger.error(f"Auto-advance failed: {type(e).__name__}: {e}")


# Global state (in production, use proper DI)
config_file: ConfigFile = ConfigFile()
default_settings: QuizSettings = QuizSettings()
advance_delay: float = AUTO_ADVANCE_DELAY_SECONDS
user_sessions: dict[str, QuizSession] = {}


app = FastAPI(title="Sutja API", description="Korean number drill API")


@app.on_event("startup")
async def startup():
    """Load default quiz settings from the config file."""
    global default_settings, advance_delay

    config = config_file.load_config()
    default_settings = config_file.default_settings(config)
    advance_delay = config_file.advance_delay(config)
    low, high = default_settings.get_effective_range()
    logger.info(f"Defaults: {default_settings.number_system}, {default_settings.direction}, "
                f"range [{low}, {high}], advance after {advance_delay}s")


def get_session(user_id: str = "default") -> QuizSession:
    """Get or create the quiz session for a user."""
    if user_id not in user_sessions:
        settings = QuizSettings.from_dict(default_settings.to_dict())
        user_sessions[user_id] = QuizSession(
            settings=settings, scheduler=AsyncioScheduler(), advance_delay=advance_delay
        )
        logger.info(f"New session for {user_id}")
    return user_sessions[user_id]


@app.get("/")
async def root():
    """Health check."""
    return {"service": "sutja", "version": VERSION}


@app.get("/api/convert", response_model=ConvertResponse)
async def convert(number: int, system: Literal['native', 'sino'] = 'sino'):
    """Convert a number to Korean text."""
    try:
        text = get_korean_text(number, system)
    except InvalidNumberError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"number": number, "number_system": system, "text": text}


@app.get("/api/question", response_model=QuestionResponse)
async def get_question(user_id: str = "default"):
    """Get the current question, generating one if needed."""
    session = get_session(user_id)
    return session.question_dict()


@app.post("/api/next", response_model=QuestionResponse)
async def next_question(request: NextRequest):
    """Move to a new question."""
    session = get_session(request.user_id)
    session.advance(request.round_id)
    return session.question_dict()


@app.post("/api/answer", response_model=AnswerResponse)
async def submit_answer(request: AnswerRequest):
    """Check an answer to the current question."""
    session = get_session(request.user_id)
    current = session.current_round
    if request.round_id is not None and (current is None or current.round_id != request.round_id):
        raise HTTPException(status_code=409, detail="Question has changed")
    try:
        result = session.submit_answer(request.answer)
    except QuizStateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info(f"Answer from {request.user_id}: round {result['round_id']}, "
                f"correct={result['is_correct']}, score {result['score']['display']}")
    return result


@app.get("/api/settings", response_model=SettingsResponse)
async def get_settings(user_id: str = "default"):
    """Get the active settings."""
    return get_session(user_id).settings.to_dict()


@app.post("/api/settings", response_model=SettingsResponse)
async def update_settings(request: SettingsRequest):
    """Apply new settings and start a fresh question. Omitted fields keep their value."""
    session = get_session(request.user_id)
    current = session.settings
    settings = QuizSettings(
        number_system=request.number_system or current.number_system,
        direction=request.direction or current.direction,
        min_range=current.min_range if request.min_range is None else request.min_range,
        max_range=current.max_range if request.max_range is None else request.max_range
    )
    session.apply_settings(settings)
    return settings.to_dict()


@app.get("/api/status", response_model=StatusResponse)
async def get_status(user_id: str = "default"):
    """Get score and settings."""
    session = get_session(user_id)
    return {
        "settings": session.settings.to_dict(),
        "score": session.score.to_dict()
    }


@app.post("/api/reset", response_model=QuestionResponse)
async def reset(request: ResetRequest):
    """Zero the score and start over."""
    session = get_session(request.user_id)
    session.reset()
    logger.info(f"Session reset for {request.user_id}")
    return session.question_dict()


def create_app():
    """Factory function for creating the app (useful for testing)."""
    return app
