"""
Tests for text_integrity/validator.py

Tests input coercion and settings validation.
"""

import pytest

from text_integrity.error_handler import ConfigError
from text_integrity.validator import (
    ensure_text,
    validate_mask_char,
    validate_positive_int,
)


# ---------------------------------------------------------------------------
# ensure_text
# ---------------------------------------------------------------------------

class TestEnsureText:
    def test_string_unchanged(self):
        assert ensure_text("hello") == "hello"
        assert ensure_text("") == ""

    @pytest.mark.parametrize("value", [None, 42, 3.5, ["a"], {"a": 1}, b"bytes"])
    def test_non_string_is_empty(self, value):
        assert ensure_text(value) == ""


# ---------------------------------------------------------------------------
# validate_mask_char
# ---------------------------------------------------------------------------

class TestValidateMaskChar:
    @pytest.mark.parametrize("char", ["*", "#", "-", "~"])
    def test_valid(self, char):
        assert validate_mask_char(char) == char

    @pytest.mark.parametrize("char", ["", "ab", "x", "7", " ", None])
    def test_invalid(self, char):
        with pytest.raises(ConfigError):
            validate_mask_char(char)

    def test_reserved(self):
        with pytest.raises(ConfigError):
            validate_mask_char("@", reserved="@$")


# ---------------------------------------------------------------------------
# validate_positive_int
# ---------------------------------------------------------------------------

class TestValidatePositiveInt:
    def test_valid(self):
        assert validate_positive_int(3, "n") == 3

    @pytest.mark.parametrize("value", [0, -1, 1.5, "3", True, None])
    def test_invalid(self, value):
        with pytest.raises(ConfigError) as exc_info:
            validate_positive_int(value, "profanity.max_separator_run")
        assert "profanity.max_separator_run" in exc_info.value.user_message
