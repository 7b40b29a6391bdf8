"""
Input validation for the public entry points.

Analysis never raises on bad input: anything that is not a string is
treated as empty text.
"""

import logging
from typing import Any

from .error_handler import ConfigError

logger = logging.getLogger(__name__)


def ensure_text(value: Any) -> str:
    """
    Coerce an entry-point argument to text.

    Returns:
        ``value`` unchanged if it is a string, otherwise an empty string
    """
    if isinstance(value, str):
        return value
    if value is not None:
        logger.debug(f"Ignoring non-string input of type {type(value).__name__}")
    return ""


def validate_mask_char(mask_char: str, reserved: str = "") -> str:
    """
    Check the censor mask character.

    Args:
        mask_char: Candidate mask character
        reserved: Characters that patterns can match (look-alikes); masking
            with one of them could let masked text match again

    Raises:
        ConfigError: If it is not a single non-alphanumeric, non-reserved character
    """
    if not isinstance(mask_char, str) or len(mask_char) != 1:
        raise ConfigError(f"Mask character must be a single character, got {mask_char!r}")
    if mask_char.isalnum() or mask_char.isspace():
        raise ConfigError(f"Mask character must not be a letter, digit or space: {mask_char!r}")
    if mask_char in reserved:
        raise ConfigError(f"Mask character {mask_char!r} is used as a look-alike and cannot mask text")
    return mask_char


def validate_positive_int(value: Any, name: str) -> int:
    """
    Raises:
        ConfigError: If value is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"'{name}' must be a positive integer, got {value!r}")
    return value
