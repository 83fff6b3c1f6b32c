"""
Base64 and hexadecimal encoding API.
Handles text <-> Base64, text <-> hex and Base64 <-> hex conversions.
"""

import base64
import binascii
import re
from typing import Dict, List

from api.exceptions import InvalidInputError, UnsupportedOptionError


HEX_FORMATS: List[Dict[str, str]] = [
    {"label": "Plain", "value": "plain", "example": "DEADBEEF"},
    {"label": "Dashes", "value": "dashes", "example": "DE-AD-BE-EF"},
    {"label": "0x Prefix", "value": "0x", "example": "0xDE 0xAD 0xBE 0xEF"},
    {"label": "Colons", "value": "colons", "example": "DE:AD:BE:EF"},
    {"label": "Lowercase", "value": "lowercase", "example": "deadbeef"},
    {"label": "Spaces", "value": "spaces", "example": "DE AD BE EF"},
]

BASE64_FORMATS: List[Dict[str, str]] = [
    {"label": "Standard", "value": "standard", "example": "3q2+7w=="},
    {"label": "URL Safe", "value": "urlsafe", "example": "3q2-7w=="},
    {"label": "Line Breaks (76 chars)", "value": "linebreaks", "example": "3q2+7w=="},
]

# Short names used by the Base64 -> hex page
HEX_FORMAT_ALIASES = {"dash": "dashes", "prefix": "0x", "colon": "colons"}

BASE64_LINE_LENGTH = 76

_DATA_URL_PREFIX = re.compile(r"^.*?base64,", re.DOTALL)
_HEX_SEPARATORS = re.compile(r"[\s\-:]")
_HEX_PREFIX = re.compile(r"0x", re.IGNORECASE)
_HEX_DIGITS = re.compile(r"^[0-9A-Fa-f]*$")
_BASE64_ALPHABET = re.compile(r"^[A-Za-z0-9+/\-_]*={0,2}$")


def base64_encode(text: str) -> str:
    """Encode UTF-8 text as standard Base64."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_base64_bytes(data: str) -> bytes:
    """Decode Base64 (standard or URL-safe, padding optional) to raw bytes."""
    cleaned = _DATA_URL_PREFIX.sub("", data.strip()) if "base64," in data else data
    cleaned = "".join(cleaned.split())
    if not _BASE64_ALPHABET.match(cleaned):
        raise InvalidInputError("Invalid Base64 input")

    cleaned = cleaned.rstrip("=").replace("-", "+").replace("_", "/")
    if len(cleaned) % 4 == 1:
        raise InvalidInputError("Invalid Base64 input")
    cleaned += "=" * (-len(cleaned) % 4)

    try:
        return base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidInputError(f"Invalid Base64 input: {e}")


def base64_decode(data: str) -> str:
    """Decode Base64 into UTF-8 text."""
    raw = decode_base64_bytes(data)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        raise InvalidInputError("Decoded data is not valid UTF-8 text")


def format_hex(raw: bytes, fmt: str = "plain") -> str:
    """Render bytes as hex in one of the supported display formats."""
    fmt = HEX_FORMAT_ALIASES.get(fmt, fmt)
    pairs = [f"{byte:02X}" for byte in raw]

    if fmt == "plain":
        return "".join(pairs)
    if fmt == "lowercase":
        return "".join(pairs).lower()
    if fmt == "dashes":
        return "-".join(pairs)
    if fmt == "colons":
        return ":".join(pairs)
    if fmt == "spaces":
        return " ".join(pairs)
    if fmt == "0x":
        return " ".join(f"0x{pair}" for pair in pairs)

    raise UnsupportedOptionError(f"Unsupported hex format: {fmt}")


def hex_encode(text: str, fmt: str = "plain") -> str:
    """Encode UTF-8 text as hex."""
    return format_hex(text.encode("utf-8"), fmt)


def normalize_hex(text: str) -> str:
    """Strip whitespace, dashes, colons and 0x prefixes from hex input."""
    return _HEX_PREFIX.sub("", _HEX_SEPARATORS.sub("", text))


def hex_to_bytes(text: str, strict: bool = False) -> bytes:
    """
    Convert hex input in any supported format to bytes.

    With strict=False an odd number of digits is padded with a leading zero,
    otherwise it is rejected.
    """
    cleaned = normalize_hex(text)
    if not _HEX_DIGITS.match(cleaned):
        raise InvalidInputError("Input contains non-hexadecimal characters")

    if len(cleaned) % 2:
        if strict:
            raise InvalidInputError("Hex string must have an even length")
        cleaned = "0" + cleaned

    return bytes.fromhex(cleaned)


def hex_decode(text: str) -> str:
    """Decode hex into UTF-8 text."""
    raw = hex_to_bytes(text)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        raise InvalidInputError("Decoded data is not valid UTF-8 text")


def base64_to_hex(data: str, fmt: str = "plain") -> str:
    """Convert Base64 to hex."""
    return format_hex(decode_base64_bytes(data), fmt)


def hex_to_base64(text: str, fmt: str = "standard") -> str:
    """Convert hex to Base64 in the standard, URL-safe or line-wrapped layout."""
    if fmt not in ("standard", "urlsafe", "linebreaks"):
        raise UnsupportedOptionError(f"Unsupported Base64 format: {fmt}")

    try:
        raw = hex_to_bytes(text)
    except InvalidInputError:
        raise InvalidInputError("Invalid hexadecimal input")

    encoded = base64.b64encode(raw).decode("ascii")
    if fmt == "urlsafe":
        return encoded.replace("+", "-").replace("/", "_")
    if fmt == "linebreaks":
        lines = [encoded[i:i + BASE64_LINE_LENGTH] for i in range(0, len(encoded), BASE64_LINE_LENGTH)]
        return "\n".join(lines).strip()
    return encoded
