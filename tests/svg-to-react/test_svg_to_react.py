"""
Test cases for the SVG to React component converter.
"""

import sys
import os

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))

from api.exceptions import InvalidInputError
from api.svg_to_react import ComponentOptions, clean_svg, convert_svg, extract_svg_attributes

ICON = (
    '<svg width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor">'
    '<path d="M1 1" stroke-width="2"/></svg>'
)


class TestCleanSvg:
    """SVG markup to JSX markup."""

    def test_props_substitution(self):
        cleaned = clean_svg(ICON)
        assert '<svg width={width} height={height} viewBox="0 0 24 24" fill={fill} stroke={stroke}>' in cleaned
        assert '<path d="M1 1" strokeWidth="2" />' in cleaned

    def test_without_props(self):
        cleaned = clean_svg(ICON, use_props=False)
        assert 'width="24"' in cleaned
        assert 'fill="none"' in cleaned
        assert 'strokeWidth="2"' in cleaned

    def test_class_and_for(self):
        cleaned = clean_svg('<svg><g class="a"></g><label for="b"></label></svg>', use_props=False)
        assert 'className="a"' in cleaned
        assert 'htmlFor="b"' in cleaned

    def test_style_attribute(self):
        cleaned = clean_svg('<svg><g style="fill-opacity: 0.5; color: red"></g></svg>')
        assert 'style={{"fillOpacity": "0.5", "color": "red"}}' in cleaned

    def test_comments_removed(self):
        assert '<!--' not in clean_svg('<svg><!-- generated --><g></g></svg>')


class TestExtractAttributes:
    """Root and child presentation attributes."""

    def test_root_attributes(self):
        attributes = extract_svg_attributes(ICON)
        assert attributes['width'] == '24'
        assert attributes['viewBox'] == '0 0 24 24'
        assert attributes['fill'] == 'none'

    def test_child_stroke_settings(self):
        assert extract_svg_attributes(ICON)['stroke-width'] == '2'

    def test_stroke_only_on_child(self):
        attributes = extract_svg_attributes('<svg viewBox="0 0 1 1"><path stroke="red"/></svg>')
        assert attributes['stroke'] == 'red'
        assert 'fill' not in attributes


class TestConvertSvg:
    """Complete component generation."""

    def test_typescript_component(self):
        result = convert_svg(ICON)
        assert result.startswith("import { SVGProps } from 'react';\n\n")
        assert 'interface Props extends SVGProps<SVGSVGElement> {' in result
        assert '  fill?: string;' in result
        assert '  stroke?: string;' in result
        assert 'export default function ({\n  width = 24,\n  height = 24,' in result
        assert '  fill = "none",\n  stroke = "currentColor",\n  ...props\n}: Props) {' in result
        assert 'stroke={stroke} {...props}>' in result
        assert result.endswith('  );\n}')

    def test_javascript_without_props(self):
        options = ComponentOptions(use_typescript=False, use_props=False)
        result = convert_svg(ICON, options)
        assert 'import' not in result
        assert 'export default function ({\n  ...props\n}) {' in result
        assert '{...props}>' not in result

    def test_typescript_without_props(self):
        result = convert_svg(ICON, ComponentOptions(use_props=False))
        assert '}: SVGProps<SVGSVGElement>) {' in result
        assert 'interface Props' not in result

    def test_arrow_function(self):
        options = ComponentOptions(component_name='Logo', use_arrow_function=True)
        result = convert_svg(ICON, options)
        assert 'const Logo = ({' in result
        assert '}: Props) => {' in result
        assert result.endswith('};\n\nexport default Logo;')

    def test_markup_indented(self):
        result = convert_svg(ICON)
        assert '  return (\n    <svg ' in result

    def test_empty(self):
        assert convert_svg('  ') == ''

    def test_not_svg(self):
        with pytest.raises(InvalidInputError, match="does not contain an <svg> element"):
            convert_svg('<div></div>')

    def test_options_from_dict(self):
        options = ComponentOptions.from_dict({'component_name': 'Star', 'use_props': False})
        assert options.component_name == 'Star'
        assert options.use_props is False
        assert options.use_typescript is True

    def test_invalid_component_name(self):
        with pytest.raises(InvalidInputError, match="Invalid component name"):
            ComponentOptions.from_dict({'component_name': '1-icon'})


class TestSvgEndpoint:
    """HTTP endpoint for the converter."""

    pytestmark = pytest.mark.api

    def test_convert(self, client):
        response = client.post('/api/svg/to-react', json={'data': ICON, 'options': {'component_name': 'Logo'}})
        assert response.status_code == 200
        data = response.get_json()
        assert data['file_name'] == 'Logo.tsx'
        assert 'SVGProps' in data['result']

    def test_jsx_file_name(self, client):
        response = client.post('/api/svg/to-react', json={'data': ICON, 'options': {'use_typescript': False}})
        assert response.get_json()['file_name'] == 'SvgIcon.jsx'

    def test_invalid_svg(self, client):
        response = client.post('/api/svg/to-react', json={'data': '<div/>'})
        assert response.status_code == 400
        assert response.get_json()['result'].startswith('// Error converting SVG:')
