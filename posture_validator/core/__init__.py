from posture_validator.core.collector import DiagnosticCollector
from posture_validator.core.walker import (
    DEFAULT_EXTENSION,
    TreeWalkError,
    iter_configuration_files,
)
from posture_validator.core.validator import PostureValidator, validate

__all__ = [
    "DiagnosticCollector",
    "DEFAULT_EXTENSION",
    "TreeWalkError",
    "iter_configuration_files",
    "PostureValidator",
    "validate",
]
