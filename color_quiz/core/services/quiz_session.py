"""Service holding the questions and answers of one quiz attempt."""

from __future__ import annotations

from enum import Enum

from color_quiz.constants.quiz_constants import HEX_ANSWER_LENGTH, NUM_QUESTIONS
from color_quiz.core.color_generator import ColorGenerator
from color_quiz.core.models import ColorQuestion, ScoreReport
from color_quiz.core.scorer import calculate_score


class SessionState(Enum):
    """Lifecycle of a quiz attempt."""

    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    SCORED = "scored"


class QuizSession:
    """Manages the state of one quiz attempt.

    ``setup_questions`` is the only way questions and answers come into
    existence; calling it again throws the previous attempt away, including
    any score. The cycle IN_PROGRESS -> SCORED -> IN_PROGRESS repeats for as
    long as the session lives.
    """

    def __init__(
        self,
        num_questions: int = NUM_QUESTIONS,
        generator: ColorGenerator | None = None,
    ) -> None:
        if num_questions <= 0:
            raise ValueError("Quiz must contain at least one question.")
        self._num_questions = num_questions
        self._generator = generator or ColorGenerator()
        self._state = SessionState.IDLE
        self._questions: list[ColorQuestion] = []
        self._answers: list[str] = []
        self._last_report: ScoreReport | None = None

    def setup_questions(self) -> list[ColorQuestion]:
        self._questions = [self._generator.next_question() for _ in range(self._num_questions)]
        self._answers = [""] * self._num_questions
        self._last_report = None
        self._state = SessionState.IN_PROGRESS
        return list(self._questions)

    def get_state(self) -> SessionState:
        return self._state

    def get_num_questions(self) -> int:
        return self._num_questions

    def get_questions(self) -> list[ColorQuestion]:
        return list(self._questions)

    def get_answers(self) -> list[str]:
        return list(self._answers)

    def get_last_report(self) -> ScoreReport | None:
        return self._last_report

    def set_answer(self, index: int, value: str) -> None:
        self._require_questions()
        if not 0 <= index < len(self._answers):
            raise IndexError(f"Answer index {index} out of range")
        self._answers[index] = value

    def set_answers(self, values: list[str]) -> None:
        """Replace every answer at once; the count must match the questions."""
        self._require_questions()
        if len(values) != len(self._answers):
            raise ValueError(
                f"Expected {len(self._answers)} answers, got {len(values)}."
            )
        self._answers = list(values)

    def all_answers_filled(self) -> bool:
        """True when every answer holds a full RRGGBB value."""
        return bool(self._answers) and all(len(a) == HEX_ANSWER_LENGTH for a in self._answers)

    def calculate_score(self) -> ScoreReport:
        self._require_questions()
        if not self.all_answers_filled():
            raise RuntimeError("Every question needs a 6-digit answer before scoring.")
        report = calculate_score(self._questions, self._answers)
        self._last_report = report
        self._state = SessionState.SCORED
        return report

    def _require_questions(self) -> None:
        if self._state is SessionState.IDLE:
            raise RuntimeError("Quiz has not been set up yet.")
