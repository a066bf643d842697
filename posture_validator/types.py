"""
Type definitions shared across the posture validator.
"""

import re
from typing import Literal, Optional
from dataclasses import dataclass


FieldName = Literal["posture_id", "policy_set_id", "policy_id"]

DiagnosticKind = Literal[
    "read_error",
    "walk_error",
    "declaration_count",
    "missing_field",
    "invalid_format",
]

# Sentinel for a line number that could not be resolved
UNKNOWN_LINE = None


@dataclass(frozen=True)
class ConfigurationFile:
    """A Terraform file read from the tree."""

    path: str
    content: bytes


@dataclass(frozen=True)
class ReadFailure:
    """A matching file that could not be read."""

    path: str
    error: OSError


@dataclass(frozen=True)
class ResourceDeclaration:
    """A `resource "<type>" "<label>" {` header found in a file."""

    resource_type: str
    label: str
    # Character offset into the decoded file text
    offset: int


@dataclass(frozen=True)
class IdentifierAssignment:
    """A `<field> = "<value>"` assignment found anywhere in a file."""

    field_name: FieldName
    value: str
    # Character offset into the decoded file text
    offset: int


@dataclass(frozen=True)
class FormatRule:
    field_name: FieldName
    pattern: re.Pattern
    description: str


@dataclass(frozen=True)
class FormatCheckResult:
    passed: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class Diagnostic:
    """A single validation failure, optionally carrying an approximate line."""

    file_path: str
    message: str
    kind: DiagnosticKind
    line: Optional[int] = UNKNOWN_LINE

    def __str__(self) -> str:
        return self.message
