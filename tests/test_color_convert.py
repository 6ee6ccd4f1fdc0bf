"""Tests for color_quiz.core.color_convert — hex, RGB and HSL conversions."""

import pytest

from color_quiz.core.color_convert import (
    InvalidHexColorError,
    hex_to_rgb,
    parse_hex_answer,
    rgb_to_hex,
    rgb_to_hsl,
)


class TestHexToRgb:
    def test_red(self):
        assert hex_to_rgb("#FF0000") == (255, 0, 0)

    def test_black(self):
        assert hex_to_rgb("#000000") == (0, 0, 0)

    def test_mixed(self):
        assert hex_to_rgb("#2563EB") == (37, 99, 235)

    def test_lowercase(self):
        assert hex_to_rgb("#2563eb") == (37, 99, 235)

    def test_inverse_of_rgb_to_hex(self):
        for r, g, b in [(0, 0, 0), (255, 255, 255), (1, 2, 3), (16, 15, 240), (128, 64, 200)]:
            assert hex_to_rgb(rgb_to_hex(r, g, b)) == (r, g, b)


class TestHexToRgbLenient:
    def test_nothing_after_hash_is_black(self):
        assert hex_to_rgb("#") == (0, 0, 0)

    def test_no_leading_hex_digit_is_black(self):
        assert hex_to_rgb("#ZZ0000") == (0, 0, 0)

    def test_stops_at_first_non_hex_digit(self):
        # only "12" is read, so the value lands in the blue byte
        assert hex_to_rgb("#12G456") == (0, 0, 18)

    def test_short_value_fills_low_bytes(self):
        assert hex_to_rgb("#FF") == (0, 0, 255)

    def test_extra_digits_are_masked(self):
        assert hex_to_rgb("#FFFFFFFF") == (255, 255, 255)


class TestRgbToHex:
    def test_uppercase(self):
        assert rgb_to_hex(171, 205, 239) == "#ABCDEF"

    def test_zero_padding(self):
        assert rgb_to_hex(0, 10, 255) == "#000AFF"

    def test_length(self):
        assert len(rgb_to_hex(1, 1, 1)) == 7


class TestRgbToHsl:
    def test_black(self):
        assert rgb_to_hsl(0, 0, 0) == (0, 0, 0)

    def test_white(self):
        assert rgb_to_hsl(255, 255, 255) == (0, 0, 100)

    def test_gray_has_no_hue_or_saturation(self):
        for value in (1, 64, 128, 200, 254):
            h, s, l = rgb_to_hsl(value, value, value)
            assert h == 0
            assert s == 0
            assert l == pytest.approx(value / 255 * 100)

    def test_primaries(self):
        assert rgb_to_hsl(255, 0, 0) == pytest.approx((0, 100, 50))
        assert rgb_to_hsl(0, 255, 0) == pytest.approx((120, 100, 50))
        assert rgb_to_hsl(0, 0, 255) == pytest.approx((240, 100, 50))

    def test_secondaries_with_tied_maximum(self):
        assert rgb_to_hsl(255, 255, 0) == pytest.approx((60, 100, 50))
        assert rgb_to_hsl(0, 255, 255) == pytest.approx((180, 100, 50))
        assert rgb_to_hsl(255, 0, 255) == pytest.approx((300, 100, 50))

    def test_red_branch_wraps_when_blue_exceeds_green(self):
        h, _s, _l = rgb_to_hsl(255, 0, 51)
        assert h == pytest.approx(348)

    def test_light_color_uses_upper_saturation_formula(self):
        h, s, l = rgb_to_hsl(255, 128, 128)
        assert h == pytest.approx(0)
        assert s == pytest.approx(100)
        assert l == pytest.approx((255 + 128) / 2 / 255 * 100)

    def test_dark_color_uses_lower_saturation_formula(self):
        h, s, l = rgb_to_hsl(0, 0, 128)
        assert h == pytest.approx(240)
        assert s == pytest.approx(100)
        assert l == pytest.approx(128 / 2 / 255 * 100)


class TestParseHexAnswer:
    def test_empty_is_allowed(self):
        assert parse_hex_answer("") == ""

    def test_returns_value_unchanged(self):
        assert parse_hex_answer("a1B2c3") == "a1B2c3"

    @pytest.mark.parametrize("text", ["12345", "1234567", "GGGGGG", "#12345", "12 456"])
    def test_rejects_malformed(self, text):
        with pytest.raises(InvalidHexColorError):
            parse_hex_answer(text)

    def test_error_is_value_error(self):
        assert issubclass(InvalidHexColorError, ValueError)
