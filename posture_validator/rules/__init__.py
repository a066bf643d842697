"""
Rules module for the posture validator.

Provides the extraction patterns and the per-field identifier format rules.
"""

from posture_validator.rules.format_rules import FORMAT_RULES, check_value
from posture_validator.rules.patterns import (
    DECLARATION_SEARCH_PATTERN,
    TARGET_RESOURCE_TYPE,
    TRACKED_FIELDS,
    assignment_search_pattern,
    find_assignments,
    find_resource_declarations,
)

__all__ = [
    "FORMAT_RULES",
    "check_value",
    "DECLARATION_SEARCH_PATTERN",
    "TARGET_RESOURCE_TYPE",
    "TRACKED_FIELDS",
    "assignment_search_pattern",
    "find_assignments",
    "find_resource_declarations",
]
