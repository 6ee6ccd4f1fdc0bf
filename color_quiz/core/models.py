"""Domain models for the color quiz."""

from __future__ import annotations

from dataclasses import dataclass

from color_quiz.constants.quiz_constants import PERCENT_DECIMALS, RMSE_DECIMALS


@dataclass(frozen=True, slots=True)
class ColorQuestion:
    """Ground-truth color shown for a single quiz item."""

    hex: str  # canonical "#RRGGBB", uppercase
    r: int
    g: int
    b: int

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True, slots=True)
class ScoreReport:
    """Average per-channel errors (percent) and pooled RGB RMSE (percent)."""

    avg_rgb_error: tuple[float, float, float]
    avg_hsl_error: tuple[float, float, float]
    rmse: float

    def rounded(self) -> ScoreReport:
        """Return a copy rounded to the precision the results page shows."""
        return ScoreReport(
            avg_rgb_error=_round_triple(self.avg_rgb_error, PERCENT_DECIMALS),
            avg_hsl_error=_round_triple(self.avg_hsl_error, PERCENT_DECIMALS),
            rmse=round(self.rmse, RMSE_DECIMALS),
        )

    def format_rgb_error(self) -> str:
        r, g, b = self.avg_rgb_error
        return f"R: {r:.{PERCENT_DECIMALS}f}%, G: {g:.{PERCENT_DECIMALS}f}%, B: {b:.{PERCENT_DECIMALS}f}%"

    def format_hsl_error(self) -> str:
        h, s, l = self.avg_hsl_error
        return f"H: {h:.{PERCENT_DECIMALS}f}%, S: {s:.{PERCENT_DECIMALS}f}%, L: {l:.{PERCENT_DECIMALS}f}%"

    def format_rmse(self) -> str:
        return f"{self.rmse:.{RMSE_DECIMALS}f}"


def _round_triple(values: tuple[float, float, float], digits: int) -> tuple[float, float, float]:
    return (round(values[0], digits), round(values[1], digits), round(values[2], digits))
