import logging
import traceback
from functools import wraps
from typing import Callable, Tuple

logger = logging.getLogger(__name__)


class TextIntegrityError(Exception):
    """Exception with a user-friendly message"""
    def __init__(self, user_message: str, technical_message: str = None):
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        super().__init__(self.technical_message)


class ConfigError(TextIntegrityError):
    """Raised when a configuration file cannot be read or holds invalid values."""


class DictionaryError(TextIntegrityError):
    """Raised when a custom dictionary file is malformed."""


def _yaml_error_types() -> Tuple[type, ...]:
    import yaml
    return (yaml.YAMLError,)


# Error message mappings
ERROR_MESSAGES = {
    # Our own errors carry their message already
    ConfigError: lambda e: (
        "Settings file error",
        f"{e.user_message}\n\nFix the settings file or remove it to use defaults."
    ),
    DictionaryError: lambda e: (
        "Dictionary file error",
        f"{e.user_message}\n\nEach line must hold one word, optionally prefixed "
        "with 'tagalog:' or 'english:'."
    ),
    TextIntegrityError: lambda e: (
        "Something went wrong",
        e.user_message
    ),

    # File errors
    FileNotFoundError: lambda e: (
        "File not found",
        f"The file could not be found. It may have been moved or deleted.\n\n"
        f"Path: {e.filename if hasattr(e, 'filename') else 'Unknown'}"
    ),
    PermissionError: lambda e: (
        "Permission denied",
        "Unable to access this file. Please check that you have permission "
        "to read it."
    ),
    IsADirectoryError: lambda e: (
        "Invalid file",
        "Expected a text file but got a folder."
    ),
    UnicodeDecodeError: lambda e: (
        "Unreadable text",
        "The file is not valid UTF-8 text. Save it as UTF-8 and try again."
    ),

    # Config errors
    "yaml": lambda e: (
        "Settings file error",
        "Your settings file is not valid YAML. Fix it or remove it to use defaults."
    ),
}


def get_friendly_message(error: Exception) -> Tuple[str, str]:
    """Get user-friendly title and message for an error"""
    error_str = str(error).lower()

    # Check exact type matches first
    for error_type, msg_func in ERROR_MESSAGES.items():
        if isinstance(error_type, type) and isinstance(error, error_type):
            return msg_func(error)

    if isinstance(error, _yaml_error_types()):
        return ERROR_MESSAGES["yaml"](error)

    # Check string matches in error message (case-insensitive)
    for key, msg_func in ERROR_MESSAGES.items():
        if isinstance(key, str) and key.lower() in error_str:
            return msg_func(error)

    # Default fallback
    return (
        "Something went wrong",
        f"An unexpected error occurred:\n\n{str(error)[:200]}\n\n"
        "Please try again. Run with --verbose for details."
    )


def handle_error(error: Exception, context: str = "") -> Tuple[str, str]:
    """Log error and return friendly message"""
    # Log full technical details
    logger.error(f"Error in {context}: {error}")
    logger.debug(traceback.format_exc())

    return get_friendly_message(error)


def safe_operation(context: str = "operation"):
    """Decorator that converts unexpected exceptions into TextIntegrityError"""
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except TextIntegrityError:
                raise  # Already friendly, pass through
            except Exception as e:
                title, message = handle_error(e, context)
                raise TextIntegrityError(message, str(e)) from e
        return wrapper
    return decorator
