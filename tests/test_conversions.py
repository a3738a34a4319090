"""Tests for contrastlab.core.conversions: hex, RGB and HSL conversions."""

import pytest

from contrastlab.core.conversions import (
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    normalize_hex,
    rgb_to_hex,
)
from contrastlab.core.errors import InvalidColorFormat
from contrastlab.core.types import HSL, RGB

SAMPLE = [
    '#000000', '#ffffff', '#ff0000', '#00ff00', '#0000ff', '#777777',
    '#944B89', '#2563EB', '#F8F9FA', '#123456', '#abcdef', '#0f1724',
    '#ff00a8', '#5b2be6', '#808000', '#fe01fd',
]


class TestHexToRgb:
    def test_white(self):
        assert hex_to_rgb('#ffffff') == (255, 255, 255)

    def test_black(self):
        assert hex_to_rgb('#000000') == (0, 0, 0)

    def test_blue600(self):
        assert hex_to_rgb('#2563eb') == RGB(37, 99, 235)

    def test_uppercase(self):
        assert hex_to_rgb('#2563EB') == (37, 99, 235)

    def test_named_fields(self):
        rgb = hex_to_rgb('#102030')
        assert (rgb.red, rgb.green, rgb.blue) == (16, 32, 48)

    @pytest.mark.parametrize('value', ['red', '#12', '#GGGGGG', 'ffffff', '#fffffff', '#fff', '', ' #ffffff', None, 255])
    def test_invalid_raises(self, value):
        with pytest.raises(InvalidColorFormat):
            hex_to_rgb(value)

    def test_error_carries_value(self):
        with pytest.raises(InvalidColorFormat) as exc:
            hex_to_rgb('#12')
        assert exc.value.value == '#12'
        assert '#12' in str(exc.value)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            hex_to_rgb('nope')


class TestValidation:
    def test_is_valid_hex(self):
        assert is_valid_hex('#A1b2C3')
        assert not is_valid_hex('A1B2C3')
        assert not is_valid_hex(None)

    def test_normalize_lowercases(self):
        assert normalize_hex('#ABCDEF') == '#abcdef'


class TestRgbToHex:
    def test_zero_padded_lowercase(self):
        assert rgb_to_hex((0, 15, 171)) == '#000fab'

    def test_accepts_named_tuple(self):
        assert rgb_to_hex(RGB(255, 0, 0)) == '#ff0000'

    @pytest.mark.parametrize('rgb', [(256, 0, 0), (-1, 0, 0), (1.5, 0, 0), (True, 0, 0), (1, 2)])
    def test_out_of_range_raises(self, rgb):
        with pytest.raises(InvalidColorFormat):
            rgb_to_hex(rgb)

    @pytest.mark.parametrize('hex_code', SAMPLE)
    def test_round_trip(self, hex_code):
        assert rgb_to_hex(hex_to_rgb(hex_code)) == hex_code.lower()


class TestHexToHsl:
    def test_red(self):
        assert hex_to_hsl('#ff0000') == HSL(0.0, 1.0, 0.5)

    def test_green(self):
        h, s, l = hex_to_hsl('#00ff00')
        assert h == pytest.approx(1 / 3)
        assert (s, l) == (1.0, 0.5)

    def test_blue(self):
        assert hex_to_hsl('#0000ff').hue == pytest.approx(2 / 3)

    def test_magenta_wraps(self):
        # red is max and green < blue: +6 correction keeps hue positive
        assert hex_to_hsl('#ff00ff').hue == pytest.approx(5 / 6)

    def test_gray_has_no_hue_or_saturation(self):
        assert hex_to_hsl('#808080') == HSL(0.0, 0.0, 128 / 255)

    def test_light_color_saturation_branch(self):
        # lightness > 0.5: delta / (2 - max - min)
        h, s, l = hex_to_hsl('#ff8080')
        assert l == pytest.approx((1 + 128 / 255) / 2)
        assert s == pytest.approx((1 - 128 / 255) / (2 - 1 - 128 / 255))
        assert h == 0.0

    @pytest.mark.parametrize('hex_code', SAMPLE)
    def test_ranges(self, hex_code):
        h, s, l = hex_to_hsl(hex_code)
        assert 0.0 <= h < 1.0
        assert 0.0 <= s <= 1.0
        assert 0.0 <= l <= 1.0


class TestHslToHex:
    def test_red(self):
        assert hsl_to_hex(HSL(0.0, 1.0, 0.5)) == '#ff0000'

    def test_gray_rounds_half_up(self):
        assert hsl_to_hex(HSL(0.0, 0.0, 0.5)) == '#808080'

    def test_white_and_black(self):
        assert hsl_to_hex(HSL(0.3, 0.7, 1.0)) == '#ffffff'
        assert hsl_to_hex(HSL(0.3, 0.7, 0.0)) == '#000000'

    def test_plain_tuple(self):
        assert hsl_to_hex((2 / 3, 1.0, 0.5)) == '#0000ff'

    def test_hsl_to_rgb_returns_ints(self):
        rgb = hsl_to_rgb(HSL(0.5, 0.5, 0.5))
        assert all(isinstance(v, int) for v in rgb)

    @pytest.mark.parametrize('hex_code', SAMPLE)
    def test_round_trip_within_one(self, hex_code):
        original = hex_to_rgb(hex_code)
        restored = hex_to_rgb(hsl_to_hex(hex_to_hsl(hex_code)))
        assert all(abs(a - b) <= 1 for a, b in zip(original, restored))
