"""Tests for contrastlab.logic.palette.engine: palette assembly and placeholders."""

import pytest

from contrastlab.core.contrast import passes_wcag
from contrastlab.core.conversions import is_valid_hex
from contrastlab.core.errors import InvalidColorFormat
from contrastlab.core.types import Palette, PaletteRequest, WcagCheck
from contrastlab.logic.palette.engine import generate_palette

LIGHTER_PLACEHOLDER = 'No accessible lighter variant found'
DARKER_PLACEHOLDER = 'No accessible darker variant found'

SAMPLE = ['#000000', '#ffffff', '#777777', '#944B89', '#2563eb', '#ff0000', '#00FF00', '#f8f9fa', '#0f1724', '#808000']


class TestGeneratePalette:
    def test_mid_gray_has_only_darker(self):
        palette = generate_palette(PaletteRequest('#777777'))
        assert palette == Palette(base='#777777', lighter=LIGHTER_PLACEHOLDER, darker='#040404')

    def test_base_is_verbatim(self):
        palette = generate_palette(PaletteRequest('#FFFFFF'))
        assert palette.base == '#FFFFFF'
        assert palette.lighter == LIGHTER_PLACEHOLDER
        assert palette.darker == '#737373'

    def test_black_has_only_lighter(self):
        palette = generate_palette(PaletteRequest('#000000'))
        assert palette.darker == DARKER_PLACEHOLDER
        assert is_valid_hex(palette.lighter)

    def test_invalid_base_raises(self):
        with pytest.raises(InvalidColorFormat):
            generate_palette(PaletteRequest('944B89'))

    def test_invalid_level_raises(self):
        with pytest.raises(ValueError):
            PaletteRequest('#944B89', level='AAAA')

    def test_failure_is_logged(self, capsys):
        generate_palette(PaletteRequest('#777777'))
        err = capsys.readouterr().err
        assert 'no accessible lighten variant found for #777777' in err

    def test_to_dict(self):
        palette = generate_palette(PaletteRequest('#777777'))
        assert palette.to_dict() == {'base': '#777777', 'lighter': LIGHTER_PLACEHOLDER, 'darker': '#040404'}

    def test_variant_requests_share_settings(self):
        request = PaletteRequest('#944B89', 'AAA', True, explore_hue_saturation=True)
        darker = request.variant_request('darken')
        assert (darker.base_color, darker.level, darker.is_large_text, darker.direction) == ('#944B89', 'AAA', True, 'darken')
        assert darker.explore_hue_saturation

    @pytest.mark.parametrize('hex_code', SAMPLE)
    @pytest.mark.parametrize('level,large', [('AA', False), ('AAA', False), ('AA', True), ('AAA', True)])
    def test_always_complete(self, hex_code, level, large):
        palette = generate_palette(PaletteRequest(hex_code, level, large))
        assert palette.base == hex_code
        assert palette.lighter == LIGHTER_PLACEHOLDER or is_valid_hex(palette.lighter)
        assert palette.darker == DARKER_PLACEHOLDER or is_valid_hex(palette.darker)
        for variant in (palette.lighter, palette.darker):
            if is_valid_hex(variant):
                assert passes_wcag(WcagCheck(variant, hex_code, level, large))
