"""
Color Value - Utilities Package
===============================
This package contains utility modules for the color engine.
"""

from colorvalue.utils.logger import (
    JsonFormatter, setup_logger, get_logger, LogCapture
)


__all__ = [
    'JsonFormatter', 'setup_logger', 'get_logger', 'LogCapture'
]
