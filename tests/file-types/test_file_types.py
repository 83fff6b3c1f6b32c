"""
Test cases for file type detection and Base64/hex to file decoding.
"""

import sys
import os
from datetime import datetime

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))

from api.exceptions import InvalidInputError
from api.file_types import (
    build_file_name, decode_base64_file, decode_hex_file, detect_extension,
    detect_file_types, mime_type_for, mime_types_for,
)

PNG_HEADER = bytes.fromhex("89504E470D0A1A0A")
PNG_BASE64 = "iVBORw0KGgo="


class TestDetection:
    """Magic byte sniffing."""

    def test_png(self):
        assert detect_extension(PNG_HEADER) == 'png'

    def test_pdf(self):
        assert detect_extension(b"%PDF-1.7\n") == 'pdf'

    def test_longest_signature_wins(self):
        # D0CF11E0A1B11AE1 must not be shadowed by a shorter prefix
        assert detect_extension(bytes.fromhex("D0CF11E0A1B11AE1")) == 'doc'

    def test_unknown(self):
        assert detect_extension(b"\x01\x02\x03") is None

    def test_empty(self):
        assert detect_extension(b"") is None

    def test_zip_container_candidates(self):
        result = detect_file_types(bytes.fromhex("504B0304") + b"\x00" * 10)
        extensions = [c.extension for c in result['detected_types']]
        assert extensions == ['docx', 'xlsx', 'pptx', 'zip', 'jar', 'apk']
        assert result['default_type'].extension == 'docx'
        assert result['default_type'].priority == 1

    def test_riff_candidates(self):
        result = detect_file_types(b"RIFF\x00\x00\x00\x00WAVE")
        assert [c.extension for c in result['detected_types']] == ['webp', 'wav', 'avi']

    def test_single_candidate(self):
        result = detect_file_types(PNG_HEADER)
        assert len(result['detected_types']) == 1
        assert result['default_type'].description == 'PNG Image'

    def test_binary_fallback(self):
        result = detect_file_types(b"\x01\x02")
        assert result['default_type'].to_dict() == {
            'extension': 'bin', 'description': 'Binary File', 'priority': 100
        }


class TestMimeTypes:
    """Extension to MIME type lookup."""

    def test_known(self):
        assert mime_type_for('png') == 'image/png'

    def test_leading_dot_and_case(self):
        assert mime_type_for('.PDF') == 'application/pdf'

    def test_unknown(self):
        assert mime_type_for('xyz') == 'application/octet-stream'

    def test_missing(self):
        assert mime_type_for(None) == 'application/octet-stream'

    def test_aliases(self):
        assert mime_types_for('xml') == ['application/xml', 'text/xml']

    def test_alias_only(self):
        assert mime_types_for('bz2') == ['application/x-bzip2']


class TestFileNames:
    """Download file name resolution."""

    def test_generated_name(self):
        now = datetime(2024, 1, 2, 3, 4)
        assert build_file_name(None, 'png', now) == 'file-202401020304.png'

    def test_generated_name_without_extension(self):
        now = datetime(2024, 1, 2, 3, 4)
        assert build_file_name('  ', None, now) == 'file-202401020304.bin'

    def test_name_without_extension(self):
        assert build_file_name('logo', 'png') == 'logo.png'

    def test_name_with_extension_kept(self):
        assert build_file_name('logo.dat', 'png') == 'logo.dat'


class TestDecodeToFile:
    """Base64 and hex payloads decoded into files."""

    def test_base64_png(self):
        decoded = decode_base64_file(PNG_BASE64, 'logo')
        assert decoded.content == PNG_HEADER
        assert decoded.extension == 'png'
        assert decoded.mime_type == 'image/png'
        assert decoded.file_name == 'logo.png'

    def test_base64_data_url(self):
        decoded = decode_base64_file("data:image/png;base64," + PNG_BASE64)
        assert decoded.extension == 'png'
        assert decoded.file_name.startswith('file-')

    def test_unknown_content_uses_name_for_mime(self):
        decoded = decode_hex_file("0102", 'notes.txt')
        assert decoded.extension is None
        assert decoded.mime_type == 'text/plain'

    def test_unknown_content_without_name(self):
        decoded = decode_hex_file("0102")
        assert decoded.file_name.endswith('.bin')
        assert decoded.mime_type == 'application/octet-stream'

    def test_hex_odd_length_rejected(self):
        with pytest.raises(InvalidInputError, match="even length"):
            decode_hex_file("ABC")

    def test_to_dict_excludes_content(self):
        data = decode_base64_file(PNG_BASE64, 'logo').to_dict()
        assert 'content' not in data
        assert data['size'] == 8


class TestFileEndpoints:
    """HTTP endpoints for decoding to files."""

    pytestmark = pytest.mark.api

    def test_describe(self, client):
        response = client.post('/api/base64/to-file', json={'data': PNG_BASE64, 'file_name': 'logo'})
        assert response.status_code == 200
        data = response.get_json()
        assert data['file_name'] == 'logo.png'
        assert data['mime_type'] == 'image/png'
        assert data['default_type']['extension'] == 'png'

    def test_download(self, client):
        response = client.post('/api/base64/to-file',
                               json={'data': PNG_BASE64, 'file_name': 'logo', 'download': True})
        assert response.status_code == 200
        assert response.mimetype == 'image/png'
        assert 'logo.png' in response.headers['Content-Disposition']
        assert response.data == PNG_HEADER

    def test_hex_download(self, client):
        response = client.post('/api/hex/to-file', json={'data': '25504446', 'download': True})
        assert response.mimetype == 'application/pdf'
        assert response.data == b'%PDF'

    def test_invalid_hex(self, client):
        response = client.post('/api/hex/to-file', json={'data': 'ABC'})
        assert response.status_code == 400

    def test_detect(self, client):
        response = client.post('/api/file-types/detect', json={'data': '504B0304', 'encoding': 'hex'})
        data = response.get_json()
        assert data['default_type']['extension'] == 'docx'
        assert len(data['detected_types']) == 6

    def test_detect_unknown_encoding(self, client):
        response = client.post('/api/file-types/detect', json={'data': 'AA', 'encoding': 'rot13'})
        assert response.status_code == 400

    def test_mime_type(self, client):
        data = client.get('/api/mime-type/.xml').get_json()
        assert data['mime_type'] == 'application/xml'
        assert data['mime_types'] == ['application/xml', 'text/xml']
