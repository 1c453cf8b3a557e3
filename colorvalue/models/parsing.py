"""
Text recognition for color values.

Recognizes, in order of precedence, named colors, ``#RRGGBB[AA]``,
``#RGB[A]`` and ``rgb()/hsv()/hsl()`` functional notation, producing
normalized ``(r, g, b, a)`` channel tuples.
"""

import re
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

import Levenshtein

from colorvalue.core import CONFIG, memoize
from colorvalue.models.conversions import hsl_to_rgb, hsv_to_rgb
from colorvalue.utils.logger import get_logger

logger = get_logger(__name__)

RGBA = Tuple[float, float, float, float]

TRANSPARENT: RGBA = (0.0, 0.0, 0.0, 0.0)

# Read-only: lookups hand out tuples, never shared Color instances
NAMED_COLORS: Mapping[str, RGBA] = MappingProxyType({
    "transparent": TRANSPARENT,
    "white": (1.0, 1.0, 1.0, 1.0),
    "black": (0.0, 0.0, 0.0, 1.0),
})

_HEX_LONG = re.compile(
    r'#([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})?',
    re.IGNORECASE
)
_HEX_SHORT = re.compile(
    r'#([0-9a-f])([0-9a-f])([0-9a-f])([0-9a-f])?',
    re.IGNORECASE
)
_COMPONENT = r'([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[-+]?\d+)?%?)'
_FUNCTIONAL = re.compile(
    r'\b(rgb|hsv|hsl)a?\s*\(\s*'
    + _COMPONENT + r'\s*,\s*'
    + _COMPONENT + r'\s*,\s*'
    + _COMPONENT + r'\s*(?:,\s*'
    + _COMPONENT + r'\s*)?\)',
    re.IGNORECASE
)

# Maximum of a bare number in each slot, per function
_SLOT_MAXIMA = {
    'rgb': (255, 255, 255, 255),
    'hsv': (360, 100, 100, 255),
    'hsl': (360, 100, 100, 255),
}


class ColorError(ValueError):
    """Raised by strict parsing when text is not a recognized color."""
    pass


def _scale(token: str, maximum: float, epsilon: float) -> float:
    if token.endswith('%'):
        value = float(token[:-1]) / 100
    else:
        value = float(token) / maximum

    # Snap round-off at the boundaries
    if abs(value) < epsilon:
        return 0.0
    if abs(value - 1) < epsilon:
        return 1.0
    return value


def _parse_hex(match: 're.Match', duplicate: bool) -> RGBA:
    digits = [d if d is not None else ('f' if duplicate else 'ff') for d in match.groups()]
    if duplicate:
        digits = [d + d for d in digits]
    r, g, b, a = (int(d, 16) / 255 for d in digits)
    return r, g, b, a


def _parse_functional(match: 're.Match', epsilon: float) -> RGBA:
    func = match.group(1).lower()
    maxima = _SLOT_MAXIMA[func]
    c1, c2, c3 = (
        _scale(match.group(i + 2), maxima[i], epsilon) for i in range(3)
    )
    alpha_token = match.group(5)
    a = _scale(alpha_token, maxima[3], epsilon) if alpha_token is not None else 1.0

    if func == 'hsv':
        c1, c2, c3 = hsv_to_rgb(c1, c2, c3)
    elif func == 'hsl':
        c1, c2, c3 = hsl_to_rgb(c1, c2, c3)

    return c1, c2, c3, a


@memoize
def _recognize(text: str, epsilon: float) -> Optional[RGBA]:
    """Match text against each grammar in precedence order."""
    if text in NAMED_COLORS:
        return NAMED_COLORS[text]

    match = _HEX_LONG.fullmatch(text)
    if match:
        return _parse_hex(match, duplicate=False)

    match = _HEX_SHORT.fullmatch(text)
    if match:
        return _parse_hex(match, duplicate=True)

    match = _FUNCTIONAL.search(text)
    if match:
        return _parse_functional(match, epsilon)

    return None


def suggest_name(text: str) -> Optional[str]:
    """
    Find the named color closest to text by edit distance.

    Args:
        text: Unrecognized color text

    Returns:
        Name within the configured edit distance, or None
    """
    best = min(NAMED_COLORS, key=lambda name: Levenshtein.distance(text, name))
    if Levenshtein.distance(text, best) <= CONFIG["suggestion_max_distance"]:
        return best
    return None


def parse_channels(text: object, strict: bool = False) -> RGBA:
    """
    Parse color text into normalized RGBA channels.

    Args:
        text: Color text (named, hex or functional notation)
        strict: Raise instead of falling back to transparent

    Returns:
        Tuple of (r, g, b, a) channels in [0,1]

    Raises:
        ColorError: If strict and the text is not a recognized color
    """
    if isinstance(text, str):
        channels = _recognize(text, CONFIG["snap_epsilon"])
        if channels is not None:
            return channels

    if strict:
        if not isinstance(text, str):
            raise ColorError(f"Color text must be a string, got {type(text).__name__}")
        message = f"Unrecognized color: {text!r}"
        suggestion = suggest_name(text)
        if suggestion is not None:
            message += f", did you mean {suggestion!r}?"
        raise ColorError(message)

    logger.debug(f"Unrecognized color {text!r}, falling back to transparent")
    return TRANSPARENT
