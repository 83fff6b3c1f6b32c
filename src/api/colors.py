"""
Color conversion API.
Converts colors between HEX, RGB(A), HSL, HSV/HSB, HWB, CMYK, CIE Lab and LCH.
"""

import math
import re
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Tuple

from api.exceptions import InvalidInputError, UnsupportedOptionError

RGB = Tuple[int, int, int]

DEFAULT_COLOR = '#4ade80'

FORMATS = ['HEX', 'RGB', 'RGBA', 'HSL', 'HSV', 'HSB', 'HWB', 'CMYK', 'LCH', 'LAB']

FORMAT_EXAMPLES: Dict[str, str] = {
    'HEX': '#4ade80 or 4ade80',
    'RGB': 'rgb(74, 222, 128)',
    'RGBA': 'rgba(74, 222, 128, 1)',
    'HSL': 'hsl(142, 69%, 58%)',
    'HSV': 'hsv(142, 67%, 87%)',
    'HSB': 'hsb(142, 67%, 87%)',
    'HWB': 'hwb(142, 29%, 13%)',
    'CMYK': 'cmyk(67%, 0%, 42%, 13%)',
    'LCH': 'lch(80, 54, 142)',
    'LAB': 'lab(80, -47, 39)',
}

# D65 reference white
XN, YN, ZN = 0.95047, 1.0, 1.08883

_HEX_RE = re.compile(r'^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$', re.IGNORECASE)
_HEX_INPUT_RE = re.compile(r'^([A-Fa-f0-9]{3}|[A-Fa-f0-9]{6})$')

_INPUT_PATTERNS = {
    'RGB': re.compile(r'^rgb\((\d+),\s*(\d+),\s*(\d+)\)$'),
    'RGBA': re.compile(r'^rgba\((\d+),\s*(\d+),\s*(\d+),\s*(0?\.\d+|1(?:\.0)?)\)$'),
    'HSL': re.compile(r'^hsl\((\d+),\s*(\d+)%,\s*(\d+)%\)$'),
    'HSV': re.compile(r'^hsv\((\d+),\s*(\d+)%,\s*(\d+)%\)$'),
    'HSB': re.compile(r'^hsb\((\d+),\s*(\d+)%,\s*(\d+)%\)$'),
    'HWB': re.compile(r'^hwb\((\d+),\s*(\d+)%,\s*(\d+)%\)$'),
    'CMYK': re.compile(r'^cmyk\((\d+)%,\s*(\d+)%,\s*(\d+)%,\s*(\d+)%\)$'),
    'LCH': re.compile(r'^lch\((\d+),\s*(\d+),\s*(\d+)\)$'),
    'LAB': re.compile(r'^lab\((\d+),\s*(-?\d+),\s*(-?\d+)\)$'),
}


@dataclass
class ColorFormat:
    """A color rendered in one notation."""

    name: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _round(value: float) -> int:
    """Round half up, matching CSS/JavaScript rounding."""
    return int(math.floor(value + 0.5))


def _clamp_channel(value: float) -> int:
    return _round(min(max(0.0, value), 1.0) * 255)


def hex_to_rgb(hex_color: str) -> Optional[RGB]:
    """Parse a 6-digit hex color (optional #) into RGB, or None."""
    match = _HEX_RE.match(hex_color)
    if not match:
        return None
    return tuple(int(part, 16) for part in match.groups())


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def _hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    if max_c == r:
        h = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return h / 6 * 360


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """RGB -> (hue degrees, saturation 0-1, lightness 0-1)."""
    r, g, b = r / 255, g / 255, b / 255
    max_c, min_c = max(r, g, b), min(r, g, b)
    h = s = 0.0
    l = (max_c + min_c) / 2

    if max_c != min_c:
        d = max_c - min_c
        s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)
        h = _hue(r, g, b, max_c, d)

    return h, s, l


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    h /= 360

    if s == 0:
        r = g = b = l
    else:
        def hue_to_rgb(p, q, t):
            if t < 0:
                t += 1
            if t > 1:
                t -= 1
            if t < 1 / 6:
                return p + (q - p) * 6 * t
            if t < 1 / 2:
                return q
            if t < 2 / 3:
                return p + (q - p) * (2 / 3 - t) * 6
            return p

        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = hue_to_rgb(p, q, h + 1 / 3)
        g = hue_to_rgb(p, q, h)
        b = hue_to_rgb(p, q, h - 1 / 3)

    return _round(r * 255), _round(g * 255), _round(b * 255)


def rgb_to_hsv(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """RGB -> (hue degrees, saturation 0-1, value 0-1). HSB is the same model."""
    r, g, b = r / 255, g / 255, b / 255
    max_c, min_c = max(r, g, b), min(r, g, b)
    d = max_c - min_c
    s = 0.0 if max_c == 0 else d / max_c
    h = _hue(r, g, b, max_c, d) if max_c != min_c else 0.0
    return h, s, max_c


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    h /= 360
    i = math.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    r, g, b = {
        0: (v, t, p),
        1: (q, v, p),
        2: (p, v, t),
        3: (p, q, v),
        4: (t, p, v),
        5: (v, p, q),
    }[i % 6]

    return _round(r * 255), _round(g * 255), _round(b * 255)


def rgb_to_hwb(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """RGB -> (hue degrees, whiteness 0-1, blackness 0-1)."""
    h, s, v = rgb_to_hsv(r, g, b)
    return h, (1 - s) * v, 1 - v


def hwb_to_rgb(h: float, w: float, b: float) -> RGB:
    if w + b >= 1:
        gray = _round(w / (w + b) * 255)
        return gray, gray, gray
    return hsv_to_rgb(h, 1 - w / (1 - b), 1 - b)


def rgb_to_cmyk(r: int, g: int, b: int) -> Tuple[float, float, float, float]:
    r, g, b = r / 255, g / 255, b / 255
    k = 1 - max(r, g, b)
    if k == 1:
        return 0.0, 0.0, 0.0, 1.0
    return (1 - r - k) / (1 - k), (1 - g - k) / (1 - k), (1 - b - k) / (1 - k), k


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> RGB:
    return (_round(255 * (1 - c) * (1 - k)),
            _round(255 * (1 - m) * (1 - k)),
            _round(255 * (1 - y) * (1 - k)))


def _linearize(channel: float) -> float:
    return ((channel + 0.055) / 1.055) ** 2.4 if channel > 0.04045 else channel / 12.92


def _gamma(channel: float) -> float:
    return 1.055 * channel ** (1 / 2.4) - 0.055 if channel > 0.0031308 else 12.92 * channel


def _lab_f(t: float) -> float:
    return t ** (1 / 3) if t > 0.008856 else 7.787 * t + 16 / 116


def rgb_to_lab(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """sRGB -> CIE L*a*b* (D65)."""
    rl, gl, bl = _linearize(r / 255), _linearize(g / 255), _linearize(b / 255)

    x = rl * 0.4124 + gl * 0.3576 + bl * 0.1805
    y = rl * 0.2126 + gl * 0.7152 + bl * 0.0722
    z = rl * 0.0193 + gl * 0.1192 + bl * 0.9505

    fx, fy, fz = _lab_f(x / XN), _lab_f(y / YN), _lab_f(z / ZN)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_to_rgb(l: float, a: float, b: float) -> RGB:
    """CIE L*a*b* (D65) -> sRGB, clamped to the displayable range."""
    fy = (l + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    xr = fx ** 3 if fx > 0.206893 else (fx - 16 / 116) / 7.787
    yr = fy ** 3 if l > 8 else l / 903.3
    zr = fz ** 3 if fz > 0.206893 else (fz - 16 / 116) / 7.787

    x, y, z = xr * XN, yr * YN, zr * ZN

    r = x * 3.2406 + y * -1.5372 + z * -0.4986
    g = x * -0.9689 + y * 1.8758 + z * 0.0415
    bl = x * 0.0557 + y * -0.2040 + z * 1.0570

    return _clamp_channel(_gamma(r)), _clamp_channel(_gamma(g)), _clamp_channel(_gamma(bl))


def rgb_to_lch(r: int, g: int, b: int) -> Tuple[float, float, float]:
    l, a, bb = rgb_to_lab(r, g, b)
    c = math.sqrt(a * a + bb * bb)
    h = math.degrees(math.atan2(bb, a))
    if h < 0:
        h += 360
    return l, c, h


def lch_to_rgb(l: float, c: float, h: float) -> RGB:
    a = c * math.cos(math.radians(h))
    b = c * math.sin(math.radians(h))
    return lab_to_rgb(l, a, b)


def parse_color(value: str, fmt: str = 'HEX') -> str:
    """
    Parse a color written in the given notation and return it as #rrggbb.

    Channels are clamped: RGB to 255, percentages to 100 and hue modulo 360.
    """
    fmt = fmt.upper()
    if fmt not in FORMAT_EXAMPLES:
        raise UnsupportedOptionError(f"Unsupported color format: {fmt}")

    value = (value or '').strip()
    error = InvalidInputError(f"Example format: {FORMAT_EXAMPLES[fmt]}")

    if fmt == 'HEX':
        digits = value.replace('#', '', 1)
        if not _HEX_INPUT_RE.match(digits):
            raise error
        if len(digits) == 3:
            digits = ''.join(ch * 2 for ch in digits)
        return '#' + digits.lower()

    match = _INPUT_PATTERNS[fmt].match(value)
    if not match:
        raise error

    if fmt in ('RGB', 'RGBA'):
        r, g, b = (min(255, int(part)) for part in match.groups()[:3])
        return rgb_to_hex(r, g, b)

    if fmt == 'HSL':
        h, s, l = _hue_and_percents(match)
        return rgb_to_hex(*hsl_to_rgb(h, s, l))

    if fmt in ('HSV', 'HSB'):
        h, s, v = _hue_and_percents(match)
        return rgb_to_hex(*hsv_to_rgb(h, s, v))

    if fmt == 'HWB':
        h, w, b = _hue_and_percents(match)
        return rgb_to_hex(*hwb_to_rgb(h, w, b))

    if fmt == 'CMYK':
        c, m, y, k = (min(100, int(part)) / 100 for part in match.groups())
        return rgb_to_hex(*cmyk_to_rgb(c, m, y, k))

    if fmt == 'LCH':
        l, c, h = (int(part) for part in match.groups())
        return rgb_to_hex(*lch_to_rgb(min(100, l), c, h % 360))

    l, a, b = (int(part) for part in match.groups())
    return rgb_to_hex(*lab_to_rgb(min(100, l), a, b))


def _hue_and_percents(match: re.Match) -> Tuple[float, float, float]:
    h, first, second = (int(part) for part in match.groups())
    return h % 360, min(100, first) / 100, min(100, second) / 100


def convert_color(hex_color: str) -> List[ColorFormat]:
    """Render a hex color in every supported notation."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        raise InvalidInputError("Invalid color")

    r, g, b = rgb
    h, s, l = rgb_to_hsl(r, g, b)
    hv, sv, v = rgb_to_hsv(r, g, b)
    hw, w, bk = rgb_to_hwb(r, g, b)
    c, m, y, k = rgb_to_cmyk(r, g, b)
    ll, cc, hh = rgb_to_lch(r, g, b)
    lab_l, lab_a, lab_b = rgb_to_lab(r, g, b)

    def pct(x):
        return _round(x * 100)

    hsv_body = f"{_round(hv)}, {pct(sv)}%, {pct(v)}%"
    return [
        ColorFormat('HEX', rgb_to_hex(r, g, b)),
        ColorFormat('RGB', f"rgb({r}, {g}, {b})"),
        ColorFormat('RGBA', f"rgba({r}, {g}, {b}, 1)"),
        ColorFormat('HSL', f"hsl({_round(h)}, {pct(s)}%, {pct(l)}%)"),
        ColorFormat('HSV', f"hsv({hsv_body})"),
        ColorFormat('HSB', f"hsb({hsv_body})"),
        ColorFormat('HWB', f"hwb({_round(hw)}, {pct(w)}%, {pct(bk)}%)"),
        ColorFormat('CMYK', f"cmyk({pct(c)}%, {pct(m)}%, {pct(y)}%, {pct(k)}%)"),
        ColorFormat('LCH', f"lch({_round(ll)}, {_round(cc)}, {_round(hh)})"),
        ColorFormat('LAB', f"lab({_round(lab_l)}, {_round(lab_a)}, {_round(lab_b)})"),
    ]
