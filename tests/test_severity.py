"""
Tests for text_integrity/profanity/severity.py

Tests tier structure and count-based classification.
"""

import pytest

from text_integrity.profanity.severity import (
    SEVERITY_TIERS,
    classify_severity,
    tier_names,
)


class TestSeverityTierStructure:
    def test_has_four_tiers(self):
        assert len(SEVERITY_TIERS) == 4

    def test_tier_names(self):
        assert set(SEVERITY_TIERS.keys()) == {"severe", "moderate", "mild", "none"}

    def test_tier_order(self):
        assert SEVERITY_TIERS["severe"]["order"] == 1
        assert SEVERITY_TIERS["moderate"]["order"] == 2
        assert SEVERITY_TIERS["mild"]["order"] == 3
        assert SEVERITY_TIERS["none"]["order"] == 4

    def test_tier_fields(self):
        for tier in SEVERITY_TIERS.values():
            assert set(tier) == {"order", "min_matches"}


class TestClassifySeverity:
    @pytest.mark.parametrize("count,expected", [
        (0, "none"),
        (1, "mild"),
        (2, "moderate"),
        (3, "moderate"),
        (4, "severe"),
        (25, "severe"),
    ])
    def test_thresholds(self, count, expected):
        assert classify_severity(count) == expected

    def test_monotonic(self):
        orders = [SEVERITY_TIERS[classify_severity(n)]["order"] for n in range(10)]
        assert orders == sorted(orders, reverse=True)


class TestTierNames:
    def test_most_severe_first(self):
        assert tier_names() == ["severe", "moderate", "mild", "none"]

