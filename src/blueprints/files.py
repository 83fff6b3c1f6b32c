import io
import logging

from flask import Blueprint, request, jsonify, send_file
from api.encoding import decode_base64_bytes, hex_to_bytes
from api.file_types import (
    decode_base64_file, decode_hex_file, detect_file_types, mime_type_for, mime_types_for,
)

logger = logging.getLogger(__name__)

files_bp = Blueprint('files', __name__)

DECODERS = {
    'base64': decode_base64_file,
    'hex': decode_hex_file,
}


def _decode_to_file(encoding: str):
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({'success': False, 'error': 'No data provided'}), 400

        input_data = data.get('data', '')
        if not isinstance(input_data, str) or not input_data.strip():
            return jsonify({'success': False, 'error': 'No input data provided'}), 400

        decoded = DECODERS[encoding](input_data, data.get('file_name'))

        if data.get('download'):
            return send_file(
                io.BytesIO(decoded.content),
                mimetype=decoded.mime_type,
                as_attachment=True,
                download_name=decoded.file_name,
            )

        types = detect_file_types(decoded.content)
        return jsonify({
            'success': True,
            **decoded.to_dict(),
            'detected_types': [t.to_dict() for t in types['detected_types']],
            'default_type': types['default_type'].to_dict(),
            'mime_types': mime_types_for(decoded.extension or 'bin'),
        })

    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception("%s to file failed", encoding)
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@files_bp.route('/api/base64/to-file', methods=['POST'])
def api_base64_to_file():
    """Decode Base64 into a file, or describe it"""
    return _decode_to_file('base64')


@files_bp.route('/api/hex/to-file', methods=['POST'])
def api_hex_to_file():
    """Decode hex into a file, or describe it"""
    return _decode_to_file('hex')


@files_bp.route('/api/file-types/detect', methods=['POST'])
def api_detect_file_type():
    """Detect candidate file types for Base64 or hex encoded bytes"""
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({'success': False, 'error': 'No data provided'}), 400

        input_data = data.get('data', '')
        if not isinstance(input_data, str) or not input_data.strip():
            return jsonify({'success': False, 'error': 'No input data provided'}), 400

        encoding = data.get('encoding', 'base64')
        if encoding == 'hex':
            raw = hex_to_bytes(input_data)
        elif encoding == 'base64':
            raw = decode_base64_bytes(input_data)
        else:
            return jsonify({'success': False, 'error': f'Unsupported encoding: {encoding}'}), 400

        types = detect_file_types(raw)
        return jsonify({
            'success': True,
            'detected_types': [t.to_dict() for t in types['detected_types']],
            'default_type': types['default_type'].to_dict(),
        })

    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception("File type detection failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@files_bp.route('/api/mime-type/<extension>')
def api_mime_type(extension):
    """Look up MIME types for a file extension"""
    return jsonify({
        'extension': extension,
        'mime_type': mime_type_for(extension),
        'mime_types': mime_types_for(extension),
    })
