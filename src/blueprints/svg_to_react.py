import logging

from flask import Blueprint, request, jsonify
from api.svg_to_react import ComponentOptions, convert_svg

logger = logging.getLogger(__name__)

svg_bp = Blueprint('svg_to_react', __name__)


@svg_bp.route('/api/svg/to-react', methods=['POST'])
def api_svg_to_react():
    """Convert SVG markup into a React component"""
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({'success': False, 'error': 'No data provided'}), 400

        svg = data.get('data', '')
        if not isinstance(svg, str) or not svg.strip():
            return jsonify({'success': False, 'error': 'No input data provided'}), 400

        options = ComponentOptions.from_dict(data.get('options') or {})
        extension = '.tsx' if options.use_typescript else '.jsx'
        return jsonify({
            'success': True,
            'result': convert_svg(svg, options),
            'file_name': f"{options.component_name}{extension}",
        })

    except ValueError as e:
        return jsonify({'success': False, 'error': str(e), 'result': f'// Error converting SVG: {e}'}), 400
    except Exception as e:
        logger.exception("SVG conversion failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500
