"""
Test cases for the color converter: notation parsing, conversions and the endpoint.
"""

import sys
import os

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))

from api.colors import (
    DEFAULT_COLOR, FORMATS, convert_color, hex_to_rgb, hsl_to_rgb, hwb_to_rgb,
    parse_color, rgb_to_cmyk, rgb_to_hex, rgb_to_hsl,
)
from api.exceptions import InvalidInputError, UnsupportedOptionError


class TestConvertColor:
    """Rendering a hex color in every notation."""

    def setup_method(self):
        self.formats = {fmt.name: fmt.value for fmt in convert_color(DEFAULT_COLOR)}

    def test_all_formats_present(self):
        assert list(self.formats) == FORMATS

    def test_default_color(self):
        assert self.formats['HEX'] == '#4ade80'
        assert self.formats['RGB'] == 'rgb(74, 222, 128)'
        assert self.formats['RGBA'] == 'rgba(74, 222, 128, 1)'
        assert self.formats['HSL'] == 'hsl(142, 69%, 58%)'
        assert self.formats['HSV'] == 'hsv(142, 67%, 87%)'
        assert self.formats['HSB'] == 'hsb(142, 67%, 87%)'
        assert self.formats['HWB'] == 'hwb(142, 29%, 13%)'
        assert self.formats['CMYK'] == 'cmyk(67%, 0%, 42%, 13%)'

    def test_lab_and_lch_notation(self):
        assert self.formats['LAB'].startswith('lab(')
        assert self.formats['LCH'].startswith('lch(')

    def test_white(self):
        formats = {fmt.name: fmt.value for fmt in convert_color('#ffffff')}
        assert formats['HSL'] == 'hsl(0, 0%, 100%)'
        assert formats['CMYK'] == 'cmyk(0%, 0%, 0%, 0%)'
        assert formats['LAB'] == 'lab(100, 0, 0)'

    def test_black(self):
        formats = {fmt.name: fmt.value for fmt in convert_color('000000')}
        assert formats['CMYK'] == 'cmyk(0%, 0%, 0%, 100%)'
        assert formats['HWB'] == 'hwb(0, 0%, 100%)'

    def test_invalid(self):
        with pytest.raises(InvalidInputError, match="Invalid color"):
            convert_color('#12345')


class TestParseColor:
    """Parsing each input notation to hex."""

    def test_hex(self):
        assert parse_color('#4ADE80') == '#4ade80'

    def test_short_hex(self):
        assert parse_color('FFF') == '#ffffff'

    def test_invalid_hex(self):
        with pytest.raises(InvalidInputError, match="Example format: #4ade80 or 4ade80"):
            parse_color('GGG')

    def test_rgb(self):
        assert parse_color('rgb(74, 222, 128)', 'RGB') == '#4ade80'

    def test_rgb_clamped(self):
        assert parse_color('rgb(300, 0, 0)', 'RGB') == '#ff0000'

    def test_rgba(self):
        assert parse_color('rgba(74, 222, 128, 0.5)', 'RGBA') == '#4ade80'

    def test_hsl(self):
        assert parse_color('hsl(0, 100%, 50%)', 'HSL') == '#ff0000'

    def test_hsv(self):
        assert parse_color('hsv(120, 100%, 100%)', 'HSV') == '#00ff00'

    def test_hsb_same_as_hsv(self):
        assert parse_color('hsb(240, 100%, 100%)', 'hsb') == '#0000ff'

    def test_hwb(self):
        assert parse_color('hwb(0, 0%, 0%)', 'HWB') == '#ff0000'

    def test_hwb_gray(self):
        assert parse_color('hwb(0, 50%, 50%)', 'HWB') == '#808080'

    def test_cmyk(self):
        assert parse_color('cmyk(100%, 0%, 0%, 0%)', 'CMYK') == '#00ffff'

    def test_lab_extremes(self):
        assert parse_color('lab(100, 0, 0)', 'LAB') == '#ffffff'
        assert parse_color('lab(0, 0, 0)', 'LAB') == '#000000'

    def test_wrong_notation(self):
        with pytest.raises(InvalidInputError, match=r"Example format: rgb\(74, 222, 128\)"):
            parse_color('hsl(0, 100%, 50%)', 'RGB')

    def test_unknown_format(self):
        with pytest.raises(UnsupportedOptionError):
            parse_color('x', 'XYZ')


class TestConversions:
    """Individual color model conversions."""

    def test_hex_to_rgb(self):
        assert hex_to_rgb('#4ade80') == (74, 222, 128)
        assert hex_to_rgb('nope') is None

    def test_rgb_to_hex_lowercase(self):
        assert rgb_to_hex(255, 170, 0) == '#ffaa00'

    def test_hsl_round_trip(self):
        h, s, l = rgb_to_hsl(74, 222, 128)
        assert hsl_to_rgb(h, s, l) == (74, 222, 128)

    def test_cmyk_black(self):
        assert rgb_to_cmyk(0, 0, 0) == (0.0, 0.0, 0.0, 1.0)

    def test_hwb_saturated_whiteness(self):
        assert hwb_to_rgb(0, 1.0, 0.0) == (255, 255, 255)


class TestColorEndpoint:
    """HTTP endpoint for the color converter."""

    pytestmark = pytest.mark.api

    def test_convert(self, client):
        response = client.post('/api/color/convert', json={'value': 'rgb(74, 222, 128)', 'format': 'RGB'})
        assert response.status_code == 200
        data = response.get_json()
        assert data['hex'] == '#4ade80'
        assert data['formats'][3] == {'name': 'HSL', 'value': 'hsl(142, 69%, 58%)'}

    def test_invalid_value(self, client):
        response = client.post('/api/color/convert', json={'value': 'blue', 'format': 'RGB'})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Example format: rgb(74, 222, 128)'

    def test_empty_value(self, client):
        response = client.post('/api/color/convert', json={'value': '  '})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'No input data provided'

    def test_formats(self, client):
        data = client.get('/api/color/formats').get_json()
        assert data['default'] == '#4ade80'
        assert data['formats'] == FORMATS
