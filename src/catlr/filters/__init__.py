"""Include/exclude filters for listing and printing."""

from .filter_set import FilterSet, Filters, is_visible
from .pattern_matcher import normalize_pattern, pattern_matches

__all__ = [
    "FilterSet",
    "Filters",
    "is_visible",
    "normalize_pattern",
    "pattern_matches",
]
