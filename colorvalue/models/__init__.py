"""
Color Value - Data Models
=========================
This package contains the color value type, its text recognizer and
the color-space conversions it builds on.
"""

from colorvalue.models.color import (
    Color, quantize, parse_color, parse_color_strict,
    get_contrast_color, find_nearest_color
)
from colorvalue.models.conversions import (
    hsv_to_rgb, hsl_to_rgb, rgb_to_hsv, rgb_to_hsl
)
from colorvalue.models.parsing import ColorError, NAMED_COLORS, parse_channels

__all__ = [
    'Color', 'quantize', 'parse_color', 'parse_color_strict',
    'get_contrast_color', 'find_nearest_color',
    'hsv_to_rgb', 'hsl_to_rgb', 'rgb_to_hsv', 'rgb_to_hsl',
    'ColorError', 'NAMED_COLORS', 'parse_channels'
]
