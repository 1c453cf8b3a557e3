"""
Mutable four-channel color value.
Provides parsing, conversion, accessibility metrics and in-place transformations.
"""

import math
from typing import List, Optional, Tuple

from typing_extensions import Self

from colorvalue.core import CONFIG
from colorvalue.models.conversions import (
    HSL, HSV, hsl_to_rgb, hsv_to_rgb, rgb_to_hsl, rgb_to_hsv
)
from colorvalue.models.parsing import RGBA, parse_channels
from colorvalue.utils.logger import get_logger

# Configure logger
logger = get_logger(__name__)

# Type definitions
Bytes = Tuple[int, int, int, int]

# Perceptual weights of red, green and blue
BRIGHTNESS_WEIGHTS = (0.299, 0.587, 0.114)
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


def quantize(x: float) -> int:
    """Map a [0,1] channel to a byte, clamping out-of-range values."""
    x = x * 255
    if x >= 255:
        return 255
    if x > 0:
        return round(x)
    # Negative and NaN channels
    return 0


def _linearize(c: float) -> float:
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def _check_color(other: object) -> None:
    if not isinstance(other, Color):
        raise TypeError(f"Expected a Color, got {type(other).__name__}")


class Color:
    """
    Mutable color with red, green, blue and alpha channels in [0,1].

    Channels are not clamped on construction, so arithmetic may leave the
    unit interval transiently; ``to_css`` clamps when serializing.
    ``mix``, ``brighten``, ``darken`` and ``hue_shift`` modify the color in
    place and return it for chaining, while ``mixed``, ``brightened``,
    ``darkened`` and ``hue_shifted`` return a new color.
    """

    __slots__ = ('red', 'green', 'blue', 'alpha')

    # Mutable values are not hashable
    __hash__ = None

    def __init__(self, red: float, green: float, blue: float, alpha: float):
        self.red = red
        self.green = green
        self.blue = blue
        self.alpha = alpha

    @classmethod
    def from_css(cls, text: object, strict: bool = False) -> 'Color':
        """
        Create a color from CSS-like text.

        Args:
            text: Named color, ``#RGB[A]``, ``#RRGGBB[AA]`` or
                ``rgb()/hsv()/hsl()`` notation with optional trailing ``a``
            strict: Raise ColorError instead of returning transparent

        Returns:
            Color instance; unrecognized text yields transparent black
        """
        return cls(*parse_channels(text, strict=strict))

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, a: float = 1.0) -> 'Color':
        """Create a color from hue, saturation and value in [0,1]."""
        r, g, b = hsv_to_rgb(h, s, v)
        return cls(r, g, b, a)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> 'Color':
        """Create a color from hue, saturation and lightness in [0,1]."""
        r, g, b = hsl_to_rgb(h, s, l)
        return cls(r, g, b, a)

    @classmethod
    def from_bytes(cls, r: int, g: int, b: int, a: int = 255) -> 'Color':
        """Create a color from 0-255 channel values."""
        return cls(r / 255, g / 255, b / 255, a / 255)

    @property
    def rgba(self) -> RGBA:
        """Get the raw (r, g, b, a) channels."""
        return (self.red, self.green, self.blue, self.alpha)

    def to_bytes(self) -> Bytes:
        """Get the quantized (r, g, b, a) bytes."""
        return (
            quantize(self.red),
            quantize(self.green),
            quantize(self.blue),
            quantize(self.alpha),
        )

    def to_css(self) -> str:
        """Return the canonical ``#rrggbbaa`` representation."""
        return '#' + ''.join(f"{byte:02x}" for byte in self.to_bytes())

    def to_hsv(self) -> HSV:
        """Get the (h, s, v) tuple, each in [0,1]."""
        return rgb_to_hsv(self.red, self.green, self.blue)

    def to_hsl(self) -> HSL:
        """Get the (h, s, l) tuple, each in [0,1]."""
        return rgb_to_hsl(self.red, self.green, self.blue)

    def clone(self) -> 'Color':
        """Return an independent copy."""
        return type(self)(self.red, self.green, self.blue, self.alpha)

    def with_alpha(self, alpha: float) -> 'Color':
        """Return a copy with the alpha channel replaced."""
        return type(self)(self.red, self.green, self.blue, alpha)

    @property
    def is_achromatic(self) -> bool:
        """Check whether the color has no hue (r == g == b)."""
        return self.red == self.green == self.blue

    @property
    def brightness(self) -> float:
        """Perceived brightness in [0,1], ignoring alpha."""
        wr, wg, wb = BRIGHTNESS_WEIGHTS
        return wr * self.red + wg * self.green + wb * self.blue

    @property
    def is_light(self) -> bool:
        """Check whether brightness reaches the light threshold."""
        return self.brightness >= CONFIG["light_threshold"]

    @property
    def luminance(self) -> float:
        """
        Calculate relative luminance according to WCAG 2.0.

        Returns:
            Luminance value between 0 (black) and 1 (white)
        """
        wr, wg, wb = LUMINANCE_WEIGHTS
        return (
            wr * _linearize(self.red)
            + wg * _linearize(self.green)
            + wb * _linearize(self.blue)
        )

    def contrast_ratio(self, other: 'Color') -> float:
        """
        Calculate contrast ratio between two colors according to WCAG 2.0.

        Args:
            other: Color to compare with

        Returns:
            Contrast ratio (1-21)
        """
        _check_color(other)
        l1 = self.luminance
        l2 = other.luminance

        # Ensure the lighter color is always the first one
        if l1 < l2:
            l1, l2 = l2, l1

        return (l1 + 0.05) / (l2 + 0.05)

    def perceptual_distance(self, other: 'Color') -> float:
        """
        Calculate brightness-weighted distance in RGB space.

        Args:
            other: Color to compare with

        Returns:
            Distance value (0 for identical colors, 1 for black and white)
        """
        _check_color(other)
        wr, wg, wb = BRIGHTNESS_WEIGHTS
        return math.sqrt(
            wr * (self.red - other.red) ** 2
            + wg * (self.green - other.green) ** 2
            + wb * (self.blue - other.blue) ** 2
        )

    def mix(self, other: 'Color', proportion: float) -> Self:
        """
        Interpolate all four channels toward another color, in place.

        Args:
            other: Color to mix toward
            proportion: 0 keeps this color, 1 reaches ``other``; values
                outside [0,1] are clamped

        Returns:
            This color
        """
        _check_color(other)
        if proportion <= 0:
            return self
        if proportion > 1:
            proportion = 1

        self.red += (other.red - self.red) * proportion
        self.green += (other.green - self.green) * proportion
        self.blue += (other.blue - self.blue) * proportion
        self.alpha += (other.alpha - self.alpha) * proportion
        return self

    def brighten(self, amount: float) -> Self:
        """Mix toward white in place, keeping the current alpha."""
        return self.mix(Color(1.0, 1.0, 1.0, self.alpha), amount)

    def darken(self, amount: float) -> Self:
        """Mix toward black in place, keeping the current alpha."""
        return self.mix(Color(0.0, 0.0, 0.0, self.alpha), amount)

    def hue_shift(self, fraction: float) -> Self:
        """
        Rotate the hue in place by a fraction of a full turn.

        Achromatic colors have no hue and are left unchanged.

        Args:
            fraction: Turns to rotate by; wraps modulo 1

        Returns:
            This color

        Raises:
            ValueError: If fraction is infinite or NaN
        """
        if not math.isfinite(fraction):
            raise ValueError(f"Hue shift fraction must be finite, got {fraction!r}")

        if self.is_achromatic:
            logger.debug(f"Skipping hue shift of achromatic color {self.to_css()}")
            return self

        h, s, v = self.to_hsv()
        self.red, self.green, self.blue = hsv_to_rgb((h + fraction) % 1, s, v)
        return self

    def mixed(self, other: 'Color', proportion: float) -> 'Color':
        """Return a new color mixed toward ``other``."""
        return self.clone().mix(other, proportion)

    def brightened(self, amount: float) -> 'Color':
        """Return a new, brightened color."""
        return self.clone().brighten(amount)

    def darkened(self, amount: float) -> 'Color':
        """Return a new, darkened color."""
        return self.clone().darken(amount)

    def hue_shifted(self, fraction: float) -> 'Color':
        """Return a new color with rotated hue."""
        return self.clone().hue_shift(fraction)

    def __eq__(self, other: object) -> bool:
        """Compare colors channel by channel."""
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgba == other.rgba

    def __str__(self) -> str:
        return self.to_css()

    def __repr__(self) -> str:
        return (
            f"Color(red={self.red!r}, green={self.green!r}, "
            f"blue={self.blue!r}, alpha={self.alpha!r})"
        )


# Utility functions for color operations

def parse_color(text: object) -> Color:
    """
    Parse color text into a Color, falling back to transparent.

    Args:
        text: Color text in any recognized form

    Returns:
        Color object
    """
    return Color.from_css(text)


def parse_color_strict(text: object) -> Color:
    """
    Parse color text into a Color.

    Raises:
        ColorError: If the text is not a recognized color
    """
    return Color.from_css(text, strict=True)


def get_contrast_color(
    color: Color,
    light_color: Optional[Color] = None,
    dark_color: Optional[Color] = None
) -> Color:
    """
    Pick whichever of two candidates contrasts more with a color.

    Args:
        color: Base color
        light_color: Light candidate (default: white)
        dark_color: Dark candidate (default: black)

    Returns:
        Copy of the candidate with the higher contrast ratio
    """
    if light_color is None:
        light_color = Color(1.0, 1.0, 1.0, 1.0)
    if dark_color is None:
        dark_color = Color(0.0, 0.0, 0.0, 1.0)

    if color.contrast_ratio(light_color) >= color.contrast_ratio(dark_color):
        return light_color.clone()
    return dark_color.clone()


def find_nearest_color(target: Color, color_list: List[Color]) -> Color:
    """
    Find the color in a list perceptually nearest to a target.

    Args:
        target: Target color to match
        color_list: List of colors to search

    Returns:
        Nearest color from the list

    Raises:
        ValueError: If color_list is empty
    """
    if not color_list:
        raise ValueError("Empty color list provided")

    return min(color_list, key=target.perceptual_distance)
