"""
Core configuration for the color engine.
This module holds the tunable settings shared by parsing, metrics and caching.
"""

import os
import json
import logging
import functools
from typing import Dict, Any, Callable, Optional


# Configure logging with reasonable defaults
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "WARNING"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Global configuration settings with production defaults
CONFIG: Dict[str, Any] = {
    # Parsing
    "snap_epsilon": 0.00001,
    "parse_cache_size": 1000,
    "suggestion_max_distance": 2,

    # Metrics
    "light_threshold": 0.5,
}


def memoize(func: Callable) -> Callable:
    """Memoization decorator for caching pure function results."""
    cache = {}

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Create a hashable key from the arguments
        key = repr(args) + repr(sorted(kwargs.items()))
        if key not in cache:
            cache[key] = func(*args, **kwargs)

            # Remove oldest 25% of entries when the limit is reached
            if len(cache) > CONFIG["parse_cache_size"]:
                remove_count = len(cache) // 4
                for _ in range(remove_count):
                    if cache:
                        cache.pop(next(iter(cache)))

        return cache[key]

    wrapper.cache_clear = cache.clear
    return wrapper


def configure(settings: Dict[str, Any]) -> None:
    """
    Update the core configuration with custom settings.

    Args:
        settings: Dictionary of configuration settings to update
    """
    unknown = set(settings) - set(CONFIG)
    if unknown:
        raise KeyError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    CONFIG.update(settings)
    logger.info(f"Core configuration updated: {', '.join(settings.keys())}")


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration settings from a JSON file.

    Args:
        config_path: Path to a JSON file holding an object of settings

    Returns:
        Dictionary of settings (empty when no path is given)

    Raises:
        ValueError: If the file does not hold a JSON object
    """
    if not config_path:
        return {}

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            settings = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {config_path}: {e}") from e

    if not isinstance(settings, dict):
        raise ValueError(f"Configuration in {config_path} must be a JSON object")

    return settings


__all__ = [
    "CONFIG",
    "memoize",
    "configure",
    "load_config",
]
