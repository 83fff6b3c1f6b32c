"""
SVG to React component converter.
Rewrites SVG markup as JSX and wraps it in a function component.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict

from api.exceptions import InvalidInputError

INDENT = '  '

_COMMENT = re.compile(r'<!--[\s\S]*?-->')
_STYLE_ATTR = re.compile(r'style="([^"]*)"')
_ATTRIBUTE = re.compile(r'([a-z-]+)="([^"]*)"', re.IGNORECASE)
_SELF_CLOSING = re.compile(r'<([a-z]+)([^>]*?)\s*/>', re.IGNORECASE)
_SVG_TAG = re.compile(r'<svg\s([^>]*)>', re.IGNORECASE)
_SVG_OPEN = re.compile(r'<svg([^>]*)>', re.IGNORECASE)
_SVG_ATTRIBUTE = re.compile(r'([a-z0-9-:]+)=["\']([^"\']*)["\']', re.IGNORECASE)
_KEBAB = re.compile(r'-([a-z])')

PROP_ATTRIBUTES = ['stroke', 'fill', 'stroke-width', 'stroke-linecap', 'stroke-linejoin']

# Presentation attributes renamed when colours come from props
_PROP_RENAMES = [
    ('stroke-width', 'strokeWidth'),
    ('stroke-linecap', 'strokeLinecap'),
    ('stroke-linejoin', 'strokeLinejoin'),
    ('fill-rule', 'fillRule'),
    ('fill-opacity', 'fillOpacity'),
    ('stroke-opacity', 'strokeOpacity'),
    ('stroke-dasharray', 'strokeDasharray'),
    ('stroke-dashoffset', 'strokeDashoffset'),
]


@dataclass
class ComponentOptions:
    """Code generation switches."""

    component_name: str = 'SvgIcon'
    use_typescript: bool = True
    use_props: bool = True
    use_arrow_function: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ComponentOptions':
        options = cls()
        for key in ('component_name', 'use_typescript', 'use_props', 'use_arrow_function'):
            if key in data and data[key] is not None:
                setattr(options, key, data[key])
        if not re.match(r'^[A-Za-z_$][A-Za-z0-9_$]*$', options.component_name or ''):
            raise InvalidInputError(f"Invalid component name: {options.component_name}")
        return options


def _camel(name: str) -> str:
    return _KEBAB.sub(lambda m: m.group(1).upper(), name)


def extract_svg_attributes(svg: str) -> Dict[str, str]:
    """Attributes of the root <svg> tag, plus stroke/fill settings found on children."""
    attributes: Dict[str, str] = {}

    match = _SVG_TAG.search(svg)
    if match:
        for name, value in _SVG_ATTRIBUTE.findall(match.group(1)):
            attributes[name] = value

    for attr in PROP_ATTRIBUTES:
        if not attributes.get(attr):
            child = re.search(rf'<[^>]+{attr}=["\']([^"\']*)["\'][^>]*>', svg, re.IGNORECASE)
            if child and child.group(1):
                attributes[attr] = child.group(1)

    return attributes


def _style_to_jsx(match: re.Match) -> str:
    entries = []
    for declaration in match.group(1).split(';'):
        if not declaration:
            continue
        prop, _, value = declaration.partition(':')
        entries.append(f'"{_camel(prop.strip())}": "{value.strip()}"')
    return 'style={{' + ', '.join(entries) + '}}'


def clean_svg(svg: str, use_props: bool = True) -> str:
    """Convert SVG markup to JSX-compatible markup."""
    cleaned = _COMMENT.sub('', svg)
    cleaned = _STYLE_ATTR.sub(_style_to_jsx, cleaned)

    if use_props:
        cleaned = re.sub(r'stroke="([^"]*)"', 'stroke={stroke}', cleaned, flags=re.IGNORECASE)
        cleaned = re.sub(r'fill="([^"]*)"', 'fill={fill}', cleaned, flags=re.IGNORECASE)
        for kebab, camel in _PROP_RENAMES:
            cleaned = re.sub(rf'{kebab}="([^"]*)"', rf'{camel}="\1"', cleaned, flags=re.IGNORECASE)

    def convert(match: re.Match) -> str:
        attr = _camel(match.group(1))
        value = match.group(2)
        if attr == 'class':
            return f'className="{value}"'
        if attr == 'for':
            return f'htmlFor="{value}"'
        if use_props and attr in ('stroke', 'fill', 'width', 'height'):
            return f'{attr}={{{attr}}}'
        return f'{attr}="{value}"'

    cleaned = _ATTRIBUTE.sub(convert, cleaned)
    return _SELF_CLOSING.sub(r'<\1\2 />', cleaned)


def generate_component(svg_code: str, attributes: Dict[str, str], options: ComponentOptions) -> str:
    """Wrap cleaned JSX markup in a React function component."""
    has_fill = 'fill' in attributes
    has_stroke = 'stroke' in attributes

    imports = "import { SVGProps } from 'react';\n\n" if options.use_typescript else ''

    props_type = ''
    if options.use_typescript and options.use_props:
        props_type = 'interface Props extends SVGProps<SVGSVGElement> {\n'
        props_type += f'{INDENT}width?: number | string;\n'
        props_type += f'{INDENT}height?: number | string;\n'
        if has_fill:
            props_type += f'{INDENT}fill?: string;\n'
        if has_stroke:
            props_type += f'{INDENT}stroke?: string;\n'
        props_type += '}\n\n'

    params = ''
    if options.use_props:
        params += f"{INDENT}width = {attributes.get('width') or '24'},\n"
        params += f"{INDENT}height = {attributes.get('height') or '24'},\n"
        if has_fill:
            params += f'{INDENT}fill = "{attributes.get("fill") or "none"}",\n'
        if has_stroke:
            params += f'{INDENT}stroke = "{attributes.get("stroke") or "currentColor"}",\n'
    params += f'{INDENT}...props\n'

    if not options.use_typescript:
        annotation = ''
    elif options.use_props:
        annotation = ': Props'
    else:
        annotation = ': SVGProps<SVGSVGElement>'

    if options.use_arrow_function:
        declaration = f'const {options.component_name} = ({{\n{params}}}{annotation}) => {{\n'
        closing = f'}};\n\nexport default {options.component_name};'
    else:
        declaration = f'export default function ({{\n{params}}}{annotation}) {{\n'
        closing = '}'

    if options.use_props:
        svg_code = _SVG_OPEN.sub(lambda m: f'<svg{m.group(1)} {{...props}}>', svg_code, count=1)

    body = '\n'.join(f'{INDENT}{INDENT}{line}' for line in svg_code.split('\n'))
    return f'{imports}{props_type}{declaration}{INDENT}return (\n{body}\n{INDENT});\n{closing}'


def convert_svg(svg: str, options: ComponentOptions = None) -> str:
    """Convert SVG markup into React component source."""
    options = options or ComponentOptions()
    if not svg.strip():
        return ''
    if not re.search(r'<svg[\s>]', svg, re.IGNORECASE):
        raise InvalidInputError('Input does not contain an <svg> element')

    cleaned = clean_svg(svg, options.use_props)
    attributes = extract_svg_attributes(svg)
    return generate_component(cleaned, attributes, options)
