"""
Severity tiers for profanity scans.
Severity is a function of how many distinct matches a text contains.
"""

from typing import Dict, List

NONE = "none"
MILD = "mild"
MODERATE = "moderate"
SEVERE = "severe"

SEVERITY_TIERS: Dict[str, Dict] = {
    SEVERE: {
        "order": 1,
        "min_matches": 4,
    },
    MODERATE: {
        "order": 2,
        "min_matches": 2,
    },
    MILD: {
        "order": 3,
        "min_matches": 1,
    },
    NONE: {
        "order": 4,
        "min_matches": 0,
    },
}


def tier_names() -> List[str]:
    """Tier names from most to least severe."""
    return [name for name, _ in sorted(SEVERITY_TIERS.items(), key=lambda x: x[1]["order"])]


def classify_severity(match_count: int) -> str:
    """
    Map a deduplicated match count to a tier name.

    0 -> none, 1 -> mild, 2-3 -> moderate, 4+ -> severe.
    """
    for tier_name in tier_names():
        if match_count >= SEVERITY_TIERS[tier_name]["min_matches"]:
            return tier_name
    return NONE
