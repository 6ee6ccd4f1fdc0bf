"""Random color generation for quiz questions."""

from __future__ import annotations

import random

from color_quiz.core.color_convert import rgb_to_hex
from color_quiz.core.models import ColorQuestion


class ColorGenerator:
    """Draws uniformly random RGB colors from its own ``random.Random``."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def next_color(self) -> tuple[str, int, int, int]:
        r = self._rng.randint(0, 255)
        g = self._rng.randint(0, 255)
        b = self._rng.randint(0, 255)
        return (rgb_to_hex(r, g, b), r, g, b)

    def next_question(self) -> ColorQuestion:
        hex_color, r, g, b = self.next_color()
        return ColorQuestion(hex=hex_color, r=r, g=g, b=b)


_default_generator = ColorGenerator()


def generate_random_color() -> tuple[str, int, int, int]:
    """Return ``(hex, r, g, b)`` for a fresh uniformly random color."""
    return _default_generator.next_color()
