"""Business logic for managing quiz sessions shared with the API layer."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable
import logging
from threading import Lock
from uuid import uuid4

from color_quiz.constants.quiz_constants import MAX_ACTIVE_SESSIONS, NUM_QUESTIONS
from color_quiz.core.color_convert import parse_hex_answer
from color_quiz.core.color_generator import ColorGenerator
from color_quiz.core.models import ColorQuestion, ScoreReport
from color_quiz.core.services.quiz_session import QuizSession, SessionState

logger = logging.getLogger(__name__)


class QuizManager:
    """Facade owning one QuizSession per browser session id.

    Sessions are kept in least-recently-used order; once more than
    ``max_sessions`` exist the oldest is dropped.
    """

    def __init__(
        self,
        num_questions: int = NUM_QUESTIONS,
        max_sessions: int = MAX_ACTIVE_SESSIONS,
        generator_factory: Callable[[], ColorGenerator] = ColorGenerator,
    ) -> None:
        self._lock = Lock()
        self._num_questions = num_questions
        self._max_sessions = max_sessions
        self._generator_factory = generator_factory
        self._sessions: OrderedDict[str, QuizSession] = OrderedDict()

    # --- Session table ---

    def new_session_id(self) -> str:
        return uuid4().hex

    def has_session(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions

    def get_session_count(self) -> int:
        with self._lock:
            return len(self._sessions)

    def discard_session(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    # --- Quiz flow ---

    def start_quiz(self, session_id: str) -> list[ColorQuestion]:
        """Set up fresh questions for the session, creating it if needed."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                session = QuizSession(
                    num_questions=self._num_questions,
                    generator=self._generator_factory(),
                )
                self._sessions[session_id] = session
                self._evict_oldest()
            self._sessions.move_to_end(session_id)
            questions = session.setup_questions()
        logger.info("Started quiz with %d questions for session %s", len(questions), session_id[:8])
        return questions

    def get_questions(self, session_id: str) -> list[ColorQuestion]:
        with self._lock:
            session = self._sessions.get(session_id)
            return session.get_questions() if session else []

    def get_state(self, session_id: str) -> SessionState:
        with self._lock:
            session = self._sessions.get(session_id)
            return session.get_state() if session else SessionState.IDLE

    def get_last_report(self, session_id: str) -> ScoreReport | None:
        with self._lock:
            session = self._sessions.get(session_id)
            return session.get_last_report() if session else None

    def submit_answers(self, session_id: str, answers: list[str]) -> ScoreReport:
        """Validate, store and score a full set of answers.

        Raises ``ValueError`` for malformed answers or a wrong answer count and
        ``RuntimeError`` when the session has no quiz or answers are missing.
        """
        cleaned = [parse_hex_answer(answer) for answer in answers]
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                raise RuntimeError("Quiz has not been set up yet.")
            self._sessions.move_to_end(session_id)
            session.set_answers(cleaned)
            report = session.calculate_score()
        logger.info("Scored session %s: rmse=%s", session_id[:8], report.format_rmse())
        return report

    def _evict_oldest(self) -> None:
        while len(self._sessions) > self._max_sessions:
            evicted_id, _session = self._sessions.popitem(last=False)
            logger.debug("Evicted quiz session %s", evicted_id[:8])
