"""
Color-space conversions between RGB, HSV and HSL.
All channels, hue included, are fractions in [0,1].
"""

import math
from typing import Tuple

RGB = Tuple[float, float, float]
HSV = Tuple[float, float, float]
HSL = Tuple[float, float, float]


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """
    Convert HSV to RGB.

    Args:
        h: Hue (0.0-1.0, one full turn)
        s: Saturation (0.0-1.0)
        v: Value (0.0-1.0)

    Returns:
        RGB tuple
    """
    h6 = h * 6
    if math.isfinite(h6):
        sector = math.floor(h6)
        f = h6 - sector
        i = int(sector) % 6
    else:
        # Infinite or NaN hue reads as 0
        f = 0.0
        i = 0

    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    if i == 0:
        return v, t, p
    if i == 1:
        return q, v, p
    if i == 2:
        return p, v, t
    if i == 3:
        return p, q, v
    if i == 4:
        return t, p, v
    return v, p, q


def _hue_to_channel(p: float, q: float, t: float) -> float:
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


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert HSL to RGB.

    Args:
        h: Hue (0.0-1.0, one full turn)
        s: Saturation (0.0-1.0)
        l: Lightness (0.0-1.0)

    Returns:
        RGB tuple
    """
    if s == 0:
        # Achromatic (gray)
        return l, l, l

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    return (
        _hue_to_channel(p, q, h + 1 / 3),
        _hue_to_channel(p, q, h),
        _hue_to_channel(p, q, h - 1 / 3),
    )


def _hue(r: float, g: float, b: float, max_val: float, d: float) -> float:
    if max_val == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif max_val == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return h / 6


def rgb_to_hsv(r: float, g: float, b: float) -> HSV:
    """
    Convert RGB to HSV.

    Achromatic input (r == g == b) reports hue and saturation 0.
    """
    max_val = max(r, g, b)
    min_val = min(r, g, b)
    d = max_val - min_val

    if d == 0:
        return 0.0, 0.0, max_val

    s = d / max_val if max_val else 0.0
    return _hue(r, g, b, max_val, d), s, max_val


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """
    Convert RGB to HSL.

    Achromatic input (r == g == b) reports hue and saturation 0.
    """
    max_val = max(r, g, b)
    min_val = min(r, g, b)
    l = (max_val + min_val) / 2
    d = max_val - min_val

    if d == 0:
        return 0.0, 0.0, l

    denom = 2 - max_val - min_val if l > 0.5 else max_val + min_val
    s = d / denom if denom else 0.0
    return _hue(r, g, b, max_val, d), s, l
