"""
posture-validator - naming and structure checks for Security Posture Terraform.

Walks a directory of Terraform files, confirms each declares exactly one
``google_securityposture_posture`` resource, and checks every
``posture_id``, ``policy_set_id`` and ``policy_id`` value against its
format rule.

Example:
    >>> from posture_validator import validate
    >>>
    >>> for message in validate("postures/"):
    ...     print(message)
"""

# Main export
from posture_validator.core.validator import PostureValidator, validate
from posture_validator.core.collector import DiagnosticCollector
from posture_validator.core.walker import TreeWalkError, iter_configuration_files

# Core types
from posture_validator.types import (
    ConfigurationFile,
    Diagnostic,
    DiagnosticKind,
    FieldName,
    FormatRule,
    IdentifierAssignment,
    ReadFailure,
    ResourceDeclaration,
    UNKNOWN_LINE,
)

# Configuration
from posture_validator.config import (
    ConfigSchemaError,
    ConfigValidationError,
    ValidatorOptions,
    load_options,
    validate_config,
)

# Rules
from posture_validator.rules import FORMAT_RULES, TARGET_RESOURCE_TYPE, TRACKED_FIELDS

__all__ = [
    # Main
    "PostureValidator",
    "validate",
    "DiagnosticCollector",
    "TreeWalkError",
    "iter_configuration_files",
    # Types
    "ConfigurationFile",
    "Diagnostic",
    "DiagnosticKind",
    "FieldName",
    "FormatRule",
    "IdentifierAssignment",
    "ReadFailure",
    "ResourceDeclaration",
    "UNKNOWN_LINE",
    # Configuration
    "ConfigSchemaError",
    "ConfigValidationError",
    "ValidatorOptions",
    "load_options",
    "validate_config",
    # Rules
    "FORMAT_RULES",
    "TARGET_RESOURCE_TYPE",
    "TRACKED_FIELDS",
]
