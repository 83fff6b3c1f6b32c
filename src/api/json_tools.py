"""
JSON tools API.
Formatting, JSON to XML, JSON to environment variables and JSONPath queries.
"""

import json
import re
from typing import Any, Dict, List, Tuple

import xmltodict
import yaml
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError
from jsonpath_ng.ext import parse as parse_jsonpath

from api.exceptions import InvalidInputError, UnsupportedOptionError

INDENT_OPTIONS = [2, 4]

ENV_FORMATS = ['docker', 'yaml']
YAML_SUBFORMATS = ['docker', 'compose', 'kubernetes', 'azure']
SEPARATORS = [':', '__']

_YAML_SPECIAL = re.compile(r'[:#{}\[\],&*?|<>=!%@`]')


def load_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Invalid JSON: {e}")


def _render(value: Any, indent: int, level: int) -> str:
    if isinstance(value, dict):
        if not value:
            return '{}'
        pad = ' ' * (indent * (level + 1))
        items = [
            f'{pad}{json.dumps(key, ensure_ascii=False)}: {_render(item, indent, level + 1)}'
            for key, item in value.items()
        ]
        return '{\n' + ',\n'.join(items) + '\n' + ' ' * (indent * level) + '}'
    if isinstance(value, list):
        if not value:
            return '[]'
        # arrays of scalars stay on one line
        if not any(isinstance(item, (dict, list)) for item in value):
            return '[' + ', '.join(json.dumps(item, ensure_ascii=False) for item in value) + ']'
        pad = ' ' * (indent * (level + 1))
        items = [pad + _render(item, indent, level + 1) for item in value]
        return '[\n' + ',\n'.join(items) + '\n' + ' ' * (indent * level) + ']'
    return json.dumps(value, ensure_ascii=False)


def format_json(text: str, indent: int = 2) -> str:
    """Pretty-print JSON, keeping arrays of scalars on a single line."""
    if indent not in INDENT_OPTIONS:
        raise UnsupportedOptionError(f"Unsupported indentation: {indent}")
    return _render(load_json(text), indent, 0)


def minify_json(text: str) -> str:
    return json.dumps(load_json(text), separators=(',', ':'), ensure_ascii=False)


def json_to_xml(text: str, root_name: str = 'root') -> str:
    """
    Convert JSON to indented XML under a single root element.

    Arrays repeat their element once per item and null becomes an empty
    element. A top-level array is wrapped as <root><item>...</item></root>.
    """
    if not re.match(r'^[A-Za-z_][\w.\-]*$', root_name or ''):
        raise InvalidInputError(f"Invalid root element name: {root_name}")

    data = load_json(text)
    if isinstance(data, list):
        data = {'item': data}

    try:
        return xmltodict.unparse({root_name: data}, pretty=True, indent='  ')
    except ValueError as e:
        raise InvalidInputError(f"JSON to XML conversion failed: {e}")


def flatten(data: Any, separator: str = ':', preserve_case: bool = True,
            prefix: str = '') -> List[Tuple[str, Any]]:
    """Flatten nested objects into (KEY, leaf value) pairs joined by the separator."""
    if separator not in SEPARATORS:
        raise UnsupportedOptionError(f"Unsupported separator: {separator}")
    if not isinstance(data, dict):
        raise InvalidInputError("JSON input must be an object")

    pairs = []
    for key, value in data.items():
        new_key = f"{prefix}{separator}{key}" if prefix else key
        if isinstance(value, dict):
            pairs.extend(flatten(value, separator, preserve_case, new_key))
        else:
            pairs.append((new_key if preserve_case else new_key.upper(), value))
    return pairs


def _json_scalar(value: Any) -> str:
    """Render a leaf value the way JSON/JavaScript prints it."""
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return json.dumps(value, separators=(',', ':'), ensure_ascii=False)


def _quote(value: str) -> str:
    return '"' + value.replace('"', '\\"') + '"'


def _env_value(value: Any) -> str:
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, list):
        return _quote(json.dumps(value, separators=(',', ':'), ensure_ascii=False))
    if value is None:
        return '""'
    return _json_scalar(value)


def format_yaml_value(value: Any) -> str:
    """Inline YAML scalar; strings with YAML indicator characters are quoted."""
    if isinstance(value, str):
        return _quote(value) if _YAML_SPECIAL.search(value) else value
    return _json_scalar(value)


def _yaml_value(value: Any) -> Any:
    if isinstance(value, list):
        return json.dumps(value, separators=(',', ':'), ensure_ascii=False)
    return value


def _dump(document: Any) -> str:
    return yaml.safe_dump(document, sort_keys=False, default_flow_style=False,
                          allow_unicode=True).rstrip('\n')


def _docker_yaml(pairs: List[Tuple[str, Any]]) -> str:
    return _dump({
        'version': '3',
        'services': {'app': {'environment': {key: _yaml_value(value) for key, value in pairs}}},
    })


def _compose_yaml(pairs: List[Tuple[str, Any]]) -> str:
    return _dump({
        'version': '3',
        'services': {'app': {
            'image': 'your-app-image',
            'environment': [f"{key}={format_yaml_value(value)}" for key, value in pairs],
            'ports': ['3000:3000'],
            'restart': 'unless-stopped',
        }},
    })


def _kubernetes_yaml(pairs: List[Tuple[str, Any]]) -> str:
    config_map = {
        'apiVersion': 'v1',
        'kind': 'ConfigMap',
        'metadata': {'name': 'app-config'},
        'data': {key: _json_scalar(value) for key, value in pairs},
    }
    deployment = {
        'apiVersion': 'apps/v1',
        'kind': 'Deployment',
        'metadata': {'name': 'app-deployment'},
        'spec': {
            'replicas': 1,
            'selector': {'matchLabels': {'app': 'my-app'}},
            'template': {
                'metadata': {'labels': {'app': 'my-app'}},
                'spec': {'containers': [{
                    'name': 'app',
                    'image': 'your-app-image',
                    'envFrom': [{'configMapRef': {'name': 'app-config'}}],
                }]},
            },
        },
    }
    return yaml.safe_dump_all([config_map, deployment], sort_keys=False,
                              default_flow_style=False, allow_unicode=True).rstrip('\n')


def _azure_value(value: Any) -> str:
    if isinstance(value, list):
        return ','.join('' if item is None else _azure_value(item) for item in value)
    return _json_scalar(value)


def _azure_json(pairs: List[Tuple[str, Any]]) -> str:
    settings = [{'name': key, 'value': _azure_value(value)} for key, value in pairs]
    return json.dumps({'properties': {'configuration': {'appSettings': settings}}},
                      indent=2, ensure_ascii=False)


def json_to_env(text: str, fmt: str = 'docker', yaml_subformat: str = 'docker',
                separator: str = ':', preserve_case: bool = True) -> str:
    """Convert a JSON object to .env lines or one of the YAML deployment layouts."""
    if fmt not in ENV_FORMATS:
        raise UnsupportedOptionError(f"Unsupported output format: {fmt}")
    if fmt == 'yaml' and yaml_subformat not in YAML_SUBFORMATS:
        raise UnsupportedOptionError(f"Unsupported YAML subformat: {yaml_subformat}")

    pairs = flatten(load_json(text), separator, preserve_case)

    if fmt == 'docker':
        return '\n'.join(f"{key}={_env_value(value)}" for key, value in pairs)

    builders = {
        'docker': _docker_yaml,
        'compose': _compose_yaml,
        'kubernetes': _kubernetes_yaml,
        'azure': _azure_json,
    }
    return builders[yaml_subformat](pairs)


def query_json(text: str, expression: str = '$') -> Any:
    """
    Evaluate a JSONPath expression against a JSON document.

    An empty expression or '$' returns the whole document. One match is
    returned as-is, several matches as a list and no match as None.
    """
    data = load_json(text)
    expression = (expression or '').strip()
    if expression in ('', '$'):
        return data

    try:
        matches = [match.value for match in parse_jsonpath(expression).find(data)]
    except (JsonPathLexerError, JsonPathParserError, TypeError, ValueError, AttributeError) as e:
        raise InvalidInputError(f"Error executing query: {e}")

    if not matches:
        return None
    if len(matches) == 1:
        return matches[0]
    return matches
