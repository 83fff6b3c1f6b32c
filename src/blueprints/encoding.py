import logging

from flask import Blueprint, request, jsonify
from api.encoding import (
    BASE64_FORMATS, HEX_FORMATS, base64_decode, base64_encode, base64_to_hex,
    hex_decode, hex_encode, hex_to_base64,
)

logger = logging.getLogger(__name__)

encoding_bp = Blueprint('encoding', __name__)

OPERATIONS = {
    'base64_encode': lambda text, fmt: base64_encode(text),
    'base64_decode': lambda text, fmt: base64_decode(text),
    'base64_to_hex': lambda text, fmt: base64_to_hex(text, fmt or 'plain'),
    'hex_encode': lambda text, fmt: hex_encode(text, fmt or 'plain'),
    'hex_decode': lambda text, fmt: hex_decode(text),
    'hex_to_base64': lambda text, fmt: hex_to_base64(text, fmt or 'standard'),
}


def _run(operation: str):
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({'success': False, 'error': 'No data provided'}), 400

        input_data = data.get('data', '')
        if not isinstance(input_data, str) or not input_data:
            return jsonify({'success': False, 'error': 'No input data provided'}), 400

        result = OPERATIONS[operation](input_data, data.get('format'))
        return jsonify({'success': True, 'result': result})

    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception("%s failed", operation)
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@encoding_bp.route('/api/base64/encode', methods=['POST'])
def api_base64_encode():
    """Encode text as Base64"""
    return _run('base64_encode')


@encoding_bp.route('/api/base64/decode', methods=['POST'])
def api_base64_decode():
    """Decode Base64 to text"""
    return _run('base64_decode')


@encoding_bp.route('/api/base64/to-hex', methods=['POST'])
def api_base64_to_hex():
    """Convert Base64 to hex"""
    return _run('base64_to_hex')


@encoding_bp.route('/api/hex/encode', methods=['POST'])
def api_hex_encode():
    """Encode text as hex"""
    return _run('hex_encode')


@encoding_bp.route('/api/hex/decode', methods=['POST'])
def api_hex_decode():
    """Decode hex to text"""
    return _run('hex_decode')


@encoding_bp.route('/api/hex/to-base64', methods=['POST'])
def api_hex_to_base64():
    """Convert hex to Base64"""
    return _run('hex_to_base64')


@encoding_bp.route('/api/encoding/formats')
def api_encoding_formats():
    return jsonify({'hex': HEX_FORMATS, 'base64': BASE64_FORMATS})
