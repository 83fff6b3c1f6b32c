import logging

from flask import Blueprint, request, jsonify
from api.colors import DEFAULT_COLOR, FORMAT_EXAMPLES, FORMATS, convert_color, parse_color

logger = logging.getLogger(__name__)

colors_bp = Blueprint('colors', __name__)


@colors_bp.route('/api/color/convert', methods=['POST'])
def api_color_convert():
    """Parse a color in any supported notation and render it in all of them"""
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({'success': False, 'error': 'No data provided'}), 400

        value = data.get('value', '')
        if not isinstance(value, str) or not value.strip():
            return jsonify({'success': False, 'error': 'No input data provided'}), 400

        hex_color = parse_color(value, data.get('format', 'HEX'))
        return jsonify({
            'success': True,
            'hex': hex_color,
            'formats': [fmt.to_dict() for fmt in convert_color(hex_color)],
        })

    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception("Color conversion failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@colors_bp.route('/api/color/formats')
def api_color_formats():
    return jsonify({
        'formats': FORMATS,
        'examples': FORMAT_EXAMPLES,
        'default': DEFAULT_COLOR,
    })
