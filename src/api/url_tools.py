"""
URL encoder/decoder API.
Component-wise percent encoding and URL breakdown into its parts.
"""

import re
from typing import Dict, List
from urllib.parse import parse_qsl, quote, unquote, urlsplit

from api.exceptions import InvalidInputError

# Characters encodeURIComponent leaves untouched
URI_COMPONENT_SAFE = "-_.!~*'()"

COMPONENT_DESCRIPTIONS = [
    ("Protocol", "The protocol used (e.g., http, https)"),
    ("Username", "Optional username in URL authentication"),
    ("Password", "Optional password in URL authentication"),
    ("Domain", "The domain or hostname"),
    ("Port", "Optional port number"),
    ("Path", "The path to the resource"),
    ("Query Parameters", "Parameters passed to the server"),
    ("Hash/Fragment", "Anchor to a specific part of the page"),
]

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SPECIAL_SCHEMES = ("http", "https", "ftp", "ws", "wss")
DEFAULT_PORTS = {"http": 80, "https": 443, "ftp": 21, "ws": 80, "wss": 443}


def url_encode(text: str) -> str:
    """Percent-encode text as a single URL component."""
    return quote(text, safe=URI_COMPONENT_SAFE)


def url_decode(text: str) -> str:
    """Decode a percent-encoded URL component."""
    if _BAD_ESCAPE.search(text):
        raise InvalidInputError("Error: Invalid encoded URL")
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError:
        raise InvalidInputError("Error: Invalid encoded URL")


def _empty_components() -> List[Dict[str, str]]:
    return [{"name": name, "value": "", "description": desc} for name, desc in COMPONENT_DESCRIPTIONS]


def parse_url(url: str) -> List[Dict[str, str]]:
    """
    Break a URL into protocol, credentials, host, port, path, query and fragment.

    A URL without a scheme is parsed as https. Anything that still cannot be
    parsed yields the component list with every value empty.
    """
    components = _empty_components()
    url = (url or "").strip()
    if not url:
        return components

    if not _SCHEME.match(url):
        url = "https://" + url

    try:
        parts = urlsplit(url)
        port = parts.port
        if port == DEFAULT_PORTS.get(parts.scheme.lower()):
            port = None
    except ValueError:
        return components

    if parts.scheme.lower() in _SPECIAL_SCHEMES and not parts.hostname:
        return components
    if parts.hostname and re.search(r"\s", parts.hostname):
        return components

    values = [
        parts.scheme.lower(),
        unquote(parts.username or ""),
        unquote(parts.password or ""),
        parts.hostname or "",
        str(port) if port is not None else "",
        parts.path if parts.path and parts.path != "/" else "",
        "\n".join(f"{key}={value}" for key, value in parse_qsl(parts.query, keep_blank_values=True)),
        f"#{parts.fragment}" if parts.fragment else "",
    ]

    for component, value in zip(components, values):
        component["value"] = value
    return components
