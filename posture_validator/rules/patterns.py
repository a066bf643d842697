"""
Extraction patterns for Terraform posture files.

These are deliberately not an HCL parser: declarations and identifier
assignments are matched anywhere in the file, regardless of which block
they sit in.
"""

import re

from posture_validator.types import FieldName, IdentifierAssignment, ResourceDeclaration


TARGET_RESOURCE_TYPE = "google_securityposture_posture"

# Check order within a file
TRACKED_FIELDS: tuple[FieldName, ...] = ("posture_id", "policy_set_id", "policy_id")

_RESOURCE_DECLARATION = re.compile(
    r'resource "' + re.escape(TARGET_RESOURCE_TYPE) + r'" "([^"]*)"\s*\{'
)

# Value runs to the first unescaped double quote on the same line
_VALUE = r'((?:[^"\\\n]|\\.)*)'

_ASSIGNMENTS: dict[FieldName, re.Pattern] = {
    name: re.compile(name + r'\s*=\s*"' + _VALUE + '"') for name in TRACKED_FIELDS
}

# Used to locate the first declaration's line when the count is wrong
DECLARATION_SEARCH_PATTERN = r'resource "' + re.escape(TARGET_RESOURCE_TYPE) + '"'


def find_resource_declarations(content: str) -> list[ResourceDeclaration]:
    return [
        ResourceDeclaration(
            resource_type=TARGET_RESOURCE_TYPE,
            label=match.group(1),
            offset=match.start(),
        )
        for match in _RESOURCE_DECLARATION.finditer(content)
    ]


def find_assignments(content: str, field_name: FieldName) -> list[IdentifierAssignment]:
    try:
        pattern = _ASSIGNMENTS[field_name]
    except KeyError:
        raise ValueError(f"Untracked field: {field_name}") from None

    return [
        IdentifierAssignment(
            field_name=field_name,
            value=match.group(1),
            offset=match.start(),
        )
        for match in pattern.finditer(content)
    ]


def assignment_search_pattern(field_name: FieldName, value: str) -> str:
    """Build a line-search pattern for one literal assignment."""
    return field_name + r'\s*=\s*"' + re.escape(value) + '"'
