"""
Color Value Package
===================
This package parses CSS-like color text into a normalized four-channel
value, converts between RGB, HSV and HSL, computes brightness, luminance,
contrast and distance metrics, and applies in-place transformations.
"""

__version__ = "0.1.0"

from colorvalue.core import CONFIG, configure
from colorvalue.models import (
    Color, ColorError, NAMED_COLORS,
    parse_color, parse_color_strict,
    get_contrast_color, find_nearest_color
)

__all__ = [
    'Color',
    'ColorError',
    'NAMED_COLORS',
    'parse_color',
    'parse_color_strict',
    'get_contrast_color',
    'find_nearest_color',
    'CONFIG',
    'configure'
]
