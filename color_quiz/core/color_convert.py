"""Conversions between hex strings, RGB triples and HSL triples.

``hex_to_rgb`` is deliberately lenient: it reads the longest run of hex
digits that follows the leading character and ignores whatever comes after,
so a partially typed or malformed value degrades to some color (black when
nothing parses) rather than failing. Strict checking of raw user input is the
job of ``parse_hex_answer``, which the API layer calls before scoring.
"""

from __future__ import annotations

import string

from color_quiz.constants.quiz_constants import HEX_ANSWER_LENGTH

_HEX_DIGITS = frozenset(string.hexdigits)


class InvalidHexColorError(ValueError):
    """Raised when a user answer is not a 6-digit hex color."""


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert ``#RRGGBB`` into an ``(r, g, b)`` tuple of 0-255 integers."""
    digits = _leading_hex_digits(hex_color[1:])
    value = int(digits, 16) if digits else 0
    r = (value >> 16) & 255
    g = (value >> 8) & 255
    b = value & 255
    return (r, g, b)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format RGB components as an uppercase ``#RRGGBB`` string."""
    return f"#{r:02x}{g:02x}{b:02x}".upper()


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert RGB (0-255) to HSL with hue in degrees and S/L in percent."""
    r_norm = r / 255
    g_norm = g / 255
    b_norm = b / 255

    max_value = max(r_norm, g_norm, b_norm)
    min_value = min(r_norm, g_norm, b_norm)
    lightness = (max_value + min_value) / 2

    if max_value == min_value:
        # Achromatic
        hue = saturation = 0.0
    else:
        delta = max_value - min_value
        if lightness > 0.5:
            saturation = delta / (2 - max_value - min_value)
        else:
            saturation = delta / (max_value + min_value)

        # Red wins ties, then green, then blue.
        if max_value == r_norm:
            hue = (g_norm - b_norm) / delta + (6 if g_norm < b_norm else 0)
        elif max_value == g_norm:
            hue = (b_norm - r_norm) / delta + 2
        else:
            hue = (r_norm - g_norm) / delta + 4
        hue /= 6

    return (hue * 360, saturation * 100, lightness * 100)


def parse_hex_answer(text: str) -> str:
    """Validate a raw answer: empty, or exactly six hex digits without ``#``."""
    if text == "":
        return text
    if len(text) != HEX_ANSWER_LENGTH or not all(ch in _HEX_DIGITS for ch in text):
        raise InvalidHexColorError(
            f"Answer must be {HEX_ANSWER_LENGTH} hexadecimal digits (RRGGBB), got {text!r}."
        )
    return text


def _leading_hex_digits(text: str) -> str:
    end = 0
    while end < len(text) and text[end] in _HEX_DIGITS:
        end += 1
    return text[:end]
