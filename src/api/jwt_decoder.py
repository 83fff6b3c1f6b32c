"""
JWT decoder API.
Decodes JSON Web Tokens and verifies HMAC signatures using PyJWT.
"""

import base64
import binascii
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import jwt
from jwt.algorithms import get_default_algorithms
from jwt.exceptions import DecodeError, InvalidKeyError
from jwt.utils import base64url_decode

from api.exceptions import InvalidInputError, UnsupportedOptionError

SUPPORTED_ALGORITHMS = [
    {"name": "HS256 (HMAC with SHA-256)", "value": "HS256"},
    {"name": "HS384 (HMAC with SHA-384)", "value": "HS384"},
    {"name": "HS512 (HMAC with SHA-512)", "value": "HS512"},
]

HMAC_ALGORITHMS = [alg["value"] for alg in SUPPORTED_ALGORITHMS]

TIME_CLAIMS = ("exp", "iat", "nbf")


def _split(token: str):
    parts = token.strip().split('.')
    if len(parts) != 3:
        raise InvalidInputError('Invalid JWT format. Expected 3 parts (header.payload.signature)')
    return parts


def _format_timestamp(value: Any) -> Optional[str]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc).isoformat()
    except (OverflowError, OSError, ValueError):
        return None


def decode_jwt(token: str, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Decode a token without verifying it and describe its contents."""
    parts = _split(token)
    token = '.'.join(parts)

    try:
        header = jwt.get_unverified_header(token)
        payload = jwt.decode(token, options={"verify_signature": False, "verify_exp": False})
    except DecodeError as e:
        raise InvalidInputError(f"Invalid JWT token: {e}")

    alg = header.get('alg')
    times = {claim: _format_timestamp(payload.get(claim)) for claim in TIME_CLAIMS if claim in payload}

    expired = None
    if times.get('exp'):
        now = now or datetime.now(timezone.utc)
        expired = payload['exp'] < now.timestamp()

    return {
        'header': header,
        'payload': payload,
        'signature': parts[2],
        'formatted_header': json.dumps(header, indent=2, ensure_ascii=False),
        'formatted_payload': json.dumps(payload, indent=2, ensure_ascii=False),
        'algorithm': alg,
        'algorithm_supported': alg in HMAC_ALGORITHMS,
        'times': times,
        'expired': expired,
    }


def _secret_bytes(secret: str, secret_base64: bool) -> bytes:
    if not secret_base64:
        return secret.encode('utf-8')
    try:
        return base64.b64decode(secret, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidInputError('Invalid Base64 secret key')


def verify_signature(token: str, secret: str, secret_base64: bool = False,
                     algorithm: str = 'HS256') -> bool:
    """
    Check an HMAC signature.

    The algorithm named in the token header takes precedence over the
    algorithm argument. Only HS256, HS384 and HS512 are supported.
    """
    parts = _split(token)
    header = decode_jwt(token)['header']
    alg = header.get('alg') or algorithm

    if alg not in HMAC_ALGORITHMS:
        raise UnsupportedOptionError(f"Unsupported algorithm: {alg}")

    key = _secret_bytes(secret, secret_base64)
    signer = get_default_algorithms()[alg]
    signing_input = f"{parts[0]}.{parts[1]}".encode('ascii')

    try:
        signature = base64url_decode(parts[2].encode('ascii'))
    except (binascii.Error, ValueError, UnicodeEncodeError):
        return False

    try:
        return signer.verify(signing_input, signer.prepare_key(key), signature)
    except InvalidKeyError as e:
        raise InvalidInputError(f"Invalid secret key: {e}")
