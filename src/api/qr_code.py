"""
QR code generator API using qrcode and Pillow.
"""

import base64
import io
from datetime import datetime
from typing import Optional

import qrcode
from qrcode.exceptions import DataOverflowError
from PIL import Image, ImageColor

from api.exceptions import InvalidInputError, UnsupportedOptionError

ERROR_CORRECTION_LEVELS = {
    'L': qrcode.constants.ERROR_CORRECT_L,
    'M': qrcode.constants.ERROR_CORRECT_M,
    'Q': qrcode.constants.ERROR_CORRECT_Q,
    'H': qrcode.constants.ERROR_CORRECT_H,
}

DEFAULT_SIZE = 200
MIN_SIZE = 64
MAX_SIZE = 2048
DEFAULT_DARK = '#000000'
DEFAULT_LIGHT = '#FFFFFF'


def _parse_color(value: str, label: str):
    try:
        return ImageColor.getrgb(value)
    except ValueError:
        raise InvalidInputError(f"Invalid {label} color: {value}")


def generate_qr(data: str, size: int = DEFAULT_SIZE, error_correction: str = 'M',
                dark_color: str = DEFAULT_DARK, light_color: str = DEFAULT_LIGHT) -> bytes:
    """Render data as a size x size PNG QR code."""
    if not data or not data.strip():
        raise InvalidInputError("Please enter a URL or text to generate a QR code")

    level = ERROR_CORRECTION_LEVELS.get((error_correction or '').upper())
    if level is None:
        raise UnsupportedOptionError(f"Unsupported error correction level: {error_correction}")

    try:
        size = int(size)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Invalid size: {size}")
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise InvalidInputError(f"Size must be between {MIN_SIZE} and {MAX_SIZE} pixels")

    fill = _parse_color(dark_color, 'dark')
    back = _parse_color(light_color, 'light')

    qr = qrcode.QRCode(error_correction=level, box_size=10, border=4)
    qr.add_data(data)
    try:
        qr.make(fit=True)
    except DataOverflowError:
        raise InvalidInputError("Data is too long to fit in a QR code")

    img = qr.make_image(fill_color=fill, back_color=back).convert("RGB")
    img = img.resize((size, size), Image.Resampling.NEAREST)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def qr_data_url(data: str, **options) -> str:
    png = generate_qr(data, **options)
    return 'data:image/png;base64,' + base64.b64encode(png).decode('ascii')


def download_name(now: Optional[datetime] = None) -> str:
    """File name for a downloaded QR image: qrcode-<epoch millis>.png."""
    now = now or datetime.now()
    return f"qrcode-{int(now.timestamp() * 1000)}.png"
