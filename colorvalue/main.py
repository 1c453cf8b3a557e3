"""
Command Line Entry Point for Color Value
========================================
This module exposes parsing, metrics and transformations as subcommands.
"""

import sys
import argparse
from typing import List, Optional

from colorvalue.core import configure, load_config
from colorvalue.models.color import Color
from colorvalue.models.parsing import ColorError
from colorvalue.utils.logger import setup_logger, get_logger

# Configure logger
logger = get_logger(__name__)


def _fraction_triplet(values) -> str:
    return ", ".join(f"{x:.4f}" for x in values)


def cmd_css(args: argparse.Namespace) -> List[str]:
    return [Color.from_css(text, strict=args.strict).to_css() for text in args.colors]


def cmd_info(args: argparse.Namespace) -> List[str]:
    color = Color.from_css(args.color, strict=args.strict)
    return [
        f"css: {color.to_css()}",
        f"brightness: {color.brightness:.4f}",
        f"luminance: {color.luminance:.4f}",
        f"tone: {'light' if color.is_light else 'dark'}",
        f"hsv: {_fraction_triplet(color.to_hsv())}",
        f"hsl: {_fraction_triplet(color.to_hsl())}",
    ]


def cmd_contrast(args: argparse.Namespace) -> List[str]:
    first = Color.from_css(args.first, strict=args.strict)
    second = Color.from_css(args.second, strict=args.strict)
    return [f"{first.contrast_ratio(second):.4f}"]


def cmd_distance(args: argparse.Namespace) -> List[str]:
    first = Color.from_css(args.first, strict=args.strict)
    second = Color.from_css(args.second, strict=args.strict)
    return [f"{first.perceptual_distance(second):.4f}"]


def cmd_mix(args: argparse.Namespace) -> List[str]:
    first = Color.from_css(args.first, strict=args.strict)
    second = Color.from_css(args.second, strict=args.strict)
    return [first.mix(second, args.proportion).to_css()]


def cmd_brighten(args: argparse.Namespace) -> List[str]:
    return [Color.from_css(args.color, strict=args.strict).brighten(args.amount).to_css()]


def cmd_darken(args: argparse.Namespace) -> List[str]:
    return [Color.from_css(args.color, strict=args.strict).darken(args.amount).to_css()]


def cmd_hue_shift(args: argparse.Namespace) -> List[str]:
    return [Color.from_css(args.color, strict=args.strict).hue_shift(args.fraction).to_css()]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="colorvalue",
        description="Parse, measure and transform CSS-like colors."
    )
    parser.add_argument("--strict", "-s", action="store_true",
                        help="Fail on unrecognized colors instead of using transparent")
    parser.add_argument("--config", "-c", help="Path to JSON configuration file")
    parser.add_argument("--log-level", "-l", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        default="WARNING", help="Logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    css = subparsers.add_parser("css", help="Print the canonical #rrggbbaa form")
    css.add_argument("colors", nargs="+", help="Color text")
    css.set_defaults(func=cmd_css)

    info = subparsers.add_parser("info", help="Print metrics and conversions of a color")
    info.add_argument("color", help="Color text")
    info.set_defaults(func=cmd_info)

    for name, func, help_text in (
        ("contrast", cmd_contrast, "Print the WCAG contrast ratio of two colors"),
        ("distance", cmd_distance, "Print the perceptual distance of two colors"),
    ):
        metric = subparsers.add_parser(name, help=help_text)
        metric.add_argument("first", help="First color text")
        metric.add_argument("second", help="Second color text")
        metric.set_defaults(func=func)

    mix = subparsers.add_parser("mix", help="Mix the first color toward the second")
    mix.add_argument("first", help="Color text to mix from")
    mix.add_argument("second", help="Color text to mix toward")
    mix.add_argument("proportion", type=float, help="Proportion (0-1)")
    mix.set_defaults(func=cmd_mix)

    brighten = subparsers.add_parser("brighten", help="Mix a color toward white")
    brighten.add_argument("color", help="Color text")
    brighten.add_argument("amount", type=float, help="Amount (0-1)")
    brighten.set_defaults(func=cmd_brighten)

    darken = subparsers.add_parser("darken", help="Mix a color toward black")
    darken.add_argument("color", help="Color text")
    darken.add_argument("amount", type=float, help="Amount (0-1)")
    darken.set_defaults(func=cmd_darken)

    hue_shift = subparsers.add_parser("hue-shift", help="Rotate the hue of a color")
    hue_shift.add_argument("color", help="Color text")
    hue_shift.add_argument("fraction", type=float, help="Fraction of a full turn")
    hue_shift.set_defaults(func=cmd_hue_shift)

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)
    setup_logger(args.log_level)

    try:
        settings = load_config(args.config)
        if settings:
            configure(settings)
        for line in args.func(args):
            print(line)
        return 0
    except ColorError as e:
        logger.error(str(e))
        return 1
    except (OSError, KeyError, ValueError) as e:
        logger.error(f"Command failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
