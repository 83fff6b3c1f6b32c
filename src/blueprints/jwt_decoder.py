import logging

from flask import Blueprint, request, jsonify
from api.jwt_decoder import SUPPORTED_ALGORITHMS, decode_jwt, verify_signature

logger = logging.getLogger(__name__)

jwt_bp = Blueprint('jwt_decoder', __name__)


@jwt_bp.route('/api/jwt/decode', methods=['POST'])
def api_jwt_decode():
    """Decode a JWT and, when a secret is supplied, verify its signature"""
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({'success': False, 'error': 'No data provided'}), 400

        token = data.get('token', '')
        if not isinstance(token, str) or not token.strip():
            return jsonify({'success': False, 'error': 'No input data provided'}), 400

        decoded = decode_jwt(token)
        secret = data.get('secret')
        decoded['signature_valid'] = None
        if secret:
            decoded['signature_valid'] = verify_signature(
                token, secret,
                secret_base64=bool(data.get('secret_base64', False)),
                algorithm=data.get('algorithm', 'HS256'),
            )

        return jsonify({'success': True, **decoded})

    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception("JWT decoding failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@jwt_bp.route('/api/jwt/algorithms')
def api_jwt_algorithms():
    return jsonify({'algorithms': SUPPORTED_ALGORITHMS})
