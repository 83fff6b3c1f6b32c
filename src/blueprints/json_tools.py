import logging

from flask import Blueprint, request, jsonify
from api.json_tools import format_json, json_to_env, json_to_xml, minify_json, query_json

logger = logging.getLogger(__name__)

json_bp = Blueprint('json_tools', __name__)


def _input():
    data = request.get_json(silent=True)
    if not data:
        return None, None, (jsonify({'success': False, 'error': 'No data provided'}), 400)
    input_data = data.get('data', '')
    if not isinstance(input_data, str) or not input_data.strip():
        return None, None, (jsonify({'success': False, 'error': 'No input data provided'}), 400)
    return data, input_data, None


@json_bp.route('/api/json/format', methods=['POST'])
def api_json_format():
    """Pretty-print JSON"""
    try:
        data, input_data, error = _input()
        if error:
            return error
        indent = data.get('indent', 2)
        return jsonify({'success': True, 'result': format_json(input_data, indent)})
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception("JSON formatting failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@json_bp.route('/api/json/minify', methods=['POST'])
def api_json_minify():
    """Minify JSON"""
    try:
        data, input_data, error = _input()
        if error:
            return error
        return jsonify({'success': True, 'result': minify_json(input_data)})
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception("JSON minification failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@json_bp.route('/api/json/to-xml', methods=['POST'])
def api_json_to_xml():
    """Convert JSON to XML"""
    try:
        data, input_data, error = _input()
        if error:
            return error
        result = json_to_xml(input_data, data.get('root_name') or 'root')
        return jsonify({'success': True, 'result': result})
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception("JSON to XML conversion failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@json_bp.route('/api/json/to-env', methods=['POST'])
def api_json_to_env():
    """Convert JSON to .env lines or a YAML deployment layout"""
    try:
        data, input_data, error = _input()
        if error:
            return error
        result = json_to_env(
            input_data,
            fmt=data.get('format', 'docker'),
            yaml_subformat=data.get('yaml_subformat', 'docker'),
            separator=data.get('separator', ':'),
            preserve_case=bool(data.get('preserve_case', True)),
        )
        return jsonify({'success': True, 'result': result})
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception("JSON to ENV conversion failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@json_bp.route('/api/json/query', methods=['POST'])
def api_json_query():
    """Run a JSONPath query against a JSON document"""
    try:
        data, input_data, error = _input()
        if error:
            return error
        result = query_json(input_data, data.get('query', '$'))
        return jsonify({'success': True, 'result': result})
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception("JSON query failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500
