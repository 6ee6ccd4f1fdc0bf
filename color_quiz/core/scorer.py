"""Scoring of hex-color guesses against the generated questions.

Every RGB channel error is normalised to [-1, 1] by dividing by 255. Hue
error is the shorter way round the color wheel divided by 180, so it is an
unsigned value in [0, 1]; saturation and lightness errors keep their sign
and are divided by 100. Per-channel averages are reported in percent.

RMSE pools all 3 x N normalised RGB errors together rather than computing
one value per channel.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from color_quiz.constants.quiz_constants import EMPTY_ANSWER_FALLBACK
from color_quiz.core.color_convert import hex_to_rgb, rgb_to_hsl
from color_quiz.core.models import ColorQuestion, ScoreReport


def hue_error(user_hue: float, correct_hue: float) -> float:
    """Circular hue distance normalised by the largest possible distance (180)."""
    diff = abs(user_hue - correct_hue)
    return min(diff, 360 - diff) / 180


def calculate_score(questions: Sequence[ColorQuestion], answers: Sequence[str]) -> ScoreReport:
    """Compare each answer with its question and aggregate the errors.

    An empty answer counts as black (``000000``), not as a skipped question.
    """
    if not questions:
        raise ValueError("Cannot score a quiz without questions.")
    if len(answers) != len(questions):
        raise ValueError(
            f"Expected {len(questions)} answers, got {len(answers)}."
        )

    total_rgb_error = [0.0, 0.0, 0.0]
    total_hsl_error = [0.0, 0.0, 0.0]
    squared_errors: list[float] = []

    for question, answer in zip(questions, answers):
        correct_rgb = question.rgb
        user_rgb = hex_to_rgb("#" + (answer or EMPTY_ANSWER_FALLBACK))

        correct_hsl = rgb_to_hsl(*correct_rgb)
        user_hsl = rgb_to_hsl(*user_rgb)

        for channel in range(3):
            rgb_error = (user_rgb[channel] - correct_rgb[channel]) / 255
            total_rgb_error[channel] += rgb_error
            squared_errors.append(rgb_error ** 2)

            if channel == 0:
                hsl_error = hue_error(user_hsl[0], correct_hsl[0])
            else:
                hsl_error = (user_hsl[channel] - correct_hsl[channel]) / 100
            total_hsl_error[channel] += hsl_error

    count = len(questions)
    mean_squared_error = sum(squared_errors) / len(squared_errors)
    rmse = math.sqrt(mean_squared_error) * 100

    return ScoreReport(
        avg_rgb_error=_average_percent(total_rgb_error, count),
        avg_hsl_error=_average_percent(total_hsl_error, count),
        rmse=rmse,
    )


def _average_percent(totals: list[float], count: int) -> tuple[float, float, float]:
    return (totals[0] / count * 100, totals[1] / count * 100, totals[2] / count * 100)
