"""
Test cases for the JWT decoder and HMAC signature verification.
"""

import base64
import json
import sys
import os
from datetime import datetime, timezone

import jwt
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))

from api.exceptions import InvalidInputError, UnsupportedOptionError
from api.jwt_decoder import decode_jwt, verify_signature

SECRET = 'a-string-secret-at-least-256-bits-long'
PAYLOAD = {'sub': '1234567890', 'name': 'John Doe', 'iat': 1516239022}


def b64url(data: dict) -> str:
    raw = json.dumps(data, separators=(',', ':')).encode('utf-8')
    return base64.urlsafe_b64encode(raw).rstrip(b'=').decode('ascii')


class TestDecodeJwt:
    """Decoding without verification."""

    def setup_method(self):
        self.token = jwt.encode(PAYLOAD, SECRET, algorithm='HS256')

    def test_header_and_payload(self):
        result = decode_jwt(self.token)
        assert result['header'] == {'alg': 'HS256', 'typ': 'JWT'}
        assert result['payload'] == PAYLOAD
        assert result['signature'] == self.token.split('.')[2]
        assert result['algorithm'] == 'HS256'
        assert result['algorithm_supported'] is True

    def test_formatted_json(self):
        result = decode_jwt(self.token)
        assert json.loads(result['formatted_payload']) == PAYLOAD
        assert '\n  "name": "John Doe"' in result['formatted_payload']

    def test_time_claims(self):
        result = decode_jwt(self.token)
        assert result['times'] == {'iat': '2018-01-18T01:30:22+00:00'}
        assert result['expired'] is None

    def test_expired(self):
        token = jwt.encode({'exp': 1000}, SECRET, algorithm='HS256')
        result = decode_jwt(token, now=datetime(2024, 1, 1, tzinfo=timezone.utc))
        assert result['expired'] is True

    def test_not_expired(self):
        token = jwt.encode({'exp': 4102444800}, SECRET, algorithm='HS256')
        result = decode_jwt(token, now=datetime(2024, 1, 1, tzinfo=timezone.utc))
        assert result['expired'] is False

    def test_surrounding_whitespace(self):
        assert decode_jwt(f"  {self.token}\n")['payload'] == PAYLOAD

    def test_wrong_part_count(self):
        with pytest.raises(InvalidInputError, match="Expected 3 parts"):
            decode_jwt('abc.def')

    def test_garbage(self):
        with pytest.raises(InvalidInputError, match="Invalid JWT token"):
            decode_jwt('not.a.token')


class TestVerifySignature:
    """HMAC signature checks."""

    def test_valid(self):
        token = jwt.encode(PAYLOAD, SECRET, algorithm='HS256')
        assert verify_signature(token, SECRET) is True

    def test_wrong_secret(self):
        token = jwt.encode(PAYLOAD, SECRET, algorithm='HS256')
        assert verify_signature(token, 'another-secret-that-is-also-long-enough') is False

    def test_header_algorithm_wins(self):
        token = jwt.encode(PAYLOAD, SECRET * 2, algorithm='HS512')
        assert verify_signature(token, SECRET * 2, algorithm='HS256') is True

    def test_base64_secret(self):
        key = b'\x01\x02\x03' * 16
        token = jwt.encode(PAYLOAD, key, algorithm='HS384')
        encoded = base64.b64encode(key).decode('ascii')
        assert verify_signature(token, encoded, secret_base64=True) is True

    def test_invalid_base64_secret(self):
        token = jwt.encode(PAYLOAD, SECRET, algorithm='HS256')
        with pytest.raises(InvalidInputError, match="Invalid Base64 secret key"):
            verify_signature(token, '@@@', secret_base64=True)

    def test_unsupported_algorithm(self):
        token = f"{b64url({'alg': 'RS256', 'typ': 'JWT'})}.{b64url(PAYLOAD)}.c2ln"
        assert decode_jwt(token)['algorithm_supported'] is False
        with pytest.raises(UnsupportedOptionError, match="Unsupported algorithm: RS256"):
            verify_signature(token, SECRET)


class TestJwtEndpoints:
    """HTTP endpoints for the JWT decoder."""

    pytestmark = pytest.mark.api

    def test_decode(self, client):
        token = jwt.encode(PAYLOAD, SECRET, algorithm='HS256')
        response = client.post('/api/jwt/decode', json={'token': token})
        assert response.status_code == 200
        data = response.get_json()
        assert data['payload']['name'] == 'John Doe'
        assert data['signature_valid'] is None

    def test_decode_and_verify(self, client):
        token = jwt.encode(PAYLOAD, SECRET, algorithm='HS256')
        response = client.post('/api/jwt/decode', json={'token': token, 'secret': SECRET})
        assert response.get_json()['signature_valid'] is True

    def test_invalid_token(self, client):
        response = client.post('/api/jwt/decode', json={'token': 'abc'})
        assert response.status_code == 400
        assert 'Expected 3 parts' in response.get_json()['error']

    def test_missing_token(self, client):
        response = client.post('/api/jwt/decode', json={'secret': SECRET})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'No input data provided'

    def test_algorithms(self, client):
        data = client.get('/api/jwt/algorithms').get_json()
        assert [a['value'] for a in data['algorithms']] == ['HS256', 'HS384', 'HS512']
