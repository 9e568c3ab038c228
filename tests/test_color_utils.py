"""Tests for color parsing, adjustment and contrast helpers."""

import pytest

from color_utils import (DARK_BASE, contrast_ratio, darken, generate_color_palette, get_contrast_color,
                         hex_to_rgb, is_light, lighten, mix_colors, rgb_to_hex, rgb_to_hsl, rotate_hue,
                         saturate, shade, tint, to_grayscale)


class TestParsing:
    """Hex parsing and formatting."""

    def test_long_and_short_hex(self):
        assert hex_to_rgb('#ff0000') == (255, 0, 0)
        assert hex_to_rgb('#f00') == (255, 0, 0)

    def test_invalid_colors_are_none(self):
        assert hex_to_rgb('currentColor') is None
        assert hex_to_rgb('') is None
        assert hex_to_rgb(None) is None
        assert hex_to_rgb('#zzzzzz') is None

    def test_rgb_to_hex_clamps_channels(self):
        assert rgb_to_hex(255, 0, 0) == '#ff0000'
        assert rgb_to_hex(300, -5, 12.4) == '#ff000c'

    def test_rgb_to_hsl(self):
        h, s, l = rgb_to_hsl(255, 0, 0)
        assert h == pytest.approx(0)
        assert s == pytest.approx(100)
        assert l == pytest.approx(50)


class TestAdjustments:
    """Lightness, saturation, hue and mixing."""

    def test_lighten_and_darken(self):
        assert lighten('#000000', 50) == '#808080'
        assert darken('#ffffff', 100) == '#000000'

    def test_rotate_hue(self):
        assert rotate_hue('#ff0000', 120) == '#00ff00'

    def test_desaturate_to_gray(self):
        assert saturate('#ff0000', -100) == '#808080'

    def test_invalid_color_passes_through(self):
        assert lighten('currentColor', 10) == 'currentColor'
        assert mix_colors('currentColor', '#ffffff') == 'currentColor'
        assert to_grayscale('nope') == 'nope'

    def test_mix_tint_shade(self):
        assert mix_colors('#000000', '#ffffff', 0.5) == '#808080'
        assert tint('#ff0000', 1.0) == '#ffffff'
        assert shade('#ff0000', 1.0) == '#000000'
        assert tint('#ff0000', 0.0) == '#ff0000'

    def test_grayscale(self):
        assert to_grayscale('#ffffff') == '#ffffff'
        assert to_grayscale('#000000') == '#000000'


class TestContrast:
    """WCAG luminance and contrast."""

    def test_black_on_white_is_21(self):
        assert contrast_ratio('#000000', '#ffffff') == pytest.approx(21.0)
        assert contrast_ratio('#ffffff', '#000000') == pytest.approx(21.0)

    def test_same_color_is_1(self):
        assert contrast_ratio('#3366ff', '#3366ff') == pytest.approx(1.0)

    def test_contrast_color(self):
        assert is_light('#ffffff')
        assert not is_light(DARK_BASE)
        assert get_contrast_color('#ffffff') == '#000000'
        assert get_contrast_color(DARK_BASE) == '#ffffff'


class TestPalette:
    def test_palette_swatches(self):
        palette = generate_color_palette('#ff0000')
        assert set(palette) == {'primary', 'secondary', 'accent', 'light', 'dark', 'muted'}
        assert palette['primary'] == '#ff0000'
        assert palette['accent'] == '#00ffff'

    def test_palette_of_invalid_color(self):
        palette = generate_color_palette('currentColor')
        assert all(value == 'currentColor' for value in palette.values())
