import io
import logging

from flask import Blueprint, request, jsonify, send_file
from api.qr_code import DEFAULT_DARK, DEFAULT_LIGHT, DEFAULT_SIZE, download_name, generate_qr, qr_data_url

logger = logging.getLogger(__name__)

qr_bp = Blueprint('qr_code', __name__)


def _options(data):
    return {
        'size': data.get('size', DEFAULT_SIZE),
        'error_correction': data.get('error_correction', 'M'),
        'dark_color': data.get('dark_color', DEFAULT_DARK),
        'light_color': data.get('light_color', DEFAULT_LIGHT),
    }


@qr_bp.route('/api/qr', methods=['POST'])
def api_qr():
    """Generate a QR code and return it as a PNG data URL"""
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({'success': False, 'error': 'No data provided'}), 400

        return jsonify({
            'success': True,
            'result': qr_data_url(data.get('data', ''), **_options(data)),
            'file_name': download_name(),
        })

    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception("QR generation failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@qr_bp.route('/api/qr/png', methods=['POST'])
def api_qr_png():
    """Generate a QR code and return it as a PNG download"""
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({'success': False, 'error': 'No data provided'}), 400

        png = generate_qr(data.get('data', ''), **_options(data))
        return send_file(io.BytesIO(png), mimetype='image/png',
                         as_attachment=True, download_name=download_name())

    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception("QR generation failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500
