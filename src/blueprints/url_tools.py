import logging

from flask import Blueprint, request, jsonify
from api.url_tools import parse_url, url_decode, url_encode

logger = logging.getLogger(__name__)

url_bp = Blueprint('url_tools', __name__)


def _input():
    data = request.get_json(silent=True)
    if not data:
        return None, (jsonify({'success': False, 'error': 'No data provided'}), 400)
    input_data = data.get('data', '')
    if not isinstance(input_data, str) or not input_data:
        return None, (jsonify({'success': False, 'error': 'No input data provided'}), 400)
    return input_data, None


@url_bp.route('/api/url/encode', methods=['POST'])
def api_url_encode():
    """Percent-encode a URL component and break the input URL into parts"""
    try:
        input_data, error = _input()
        if error:
            return error
        return jsonify({
            'success': True,
            'result': url_encode(input_data),
            'components': parse_url(input_data),
        })
    except Exception as e:
        logger.exception("URL encoding failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@url_bp.route('/api/url/decode', methods=['POST'])
def api_url_decode():
    """Decode a percent-encoded URL and break it into parts"""
    try:
        input_data, error = _input()
        if error:
            return error
        decoded = url_decode(input_data)
        return jsonify({'success': True, 'result': decoded, 'components': parse_url(decoded)})
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e), 'components': parse_url('')}), 400
    except Exception as e:
        logger.exception("URL decoding failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@url_bp.route('/api/url/parse', methods=['POST'])
def api_url_parse():
    """Break a URL into protocol, credentials, host, port, path, query and fragment"""
    try:
        input_data, error = _input()
        if error:
            return error
        return jsonify({'success': True, 'components': parse_url(input_data)})
    except Exception as e:
        logger.exception("URL parsing failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500
