"""
Validator options and the optional YAML configuration file.

The log level is taken from the options, then POSTURE_VALIDATOR_LOG_LEVEL,
then defaults to "info".
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from jsonschema import Draft202012Validator, ValidationError as JsonSchemaError

from posture_validator.config_schema import VALIDATOR_CONFIG_SCHEMA
from posture_validator.core.walker import DEFAULT_EXTENSION
from posture_validator.utils.logger import LOG_LEVELS, Logger, LogLevel, create_logger


LOG_LEVEL_ENV_VAR = "POSTURE_VALIDATOR_LOG_LEVEL"


@dataclass
class ValidatorOptions:
    """Options for a PostureValidator."""

    # Log level for validator operations (can also use POSTURE_VALIDATOR_LOG_LEVEL)
    log_level: Optional[LogLevel] = None
    # File extension to select, compared case-insensitively
    extension: str = DEFAULT_EXTENSION
    # Pre-built logger; overrides log_level
    logger: Optional[Logger] = None


@dataclass
class ConfigValidationError:
    """A single configuration error with location and message."""

    path: str
    message: str
    keyword: str


class ConfigSchemaError(Exception):
    """Raised when a configuration document fails schema validation."""

    def __init__(self, errors: list[ConfigValidationError]) -> None:
        summary = "\n".join(f"  - {e.path}: {e.message}" for e in errors)
        super().__init__(f"Invalid validator configuration:\n{summary}")
        self.errors = errors


_validator: Draft202012Validator | None = None


def _get_validator() -> Draft202012Validator:
    global _validator
    if _validator is None:
        Draft202012Validator.check_schema(VALIDATOR_CONFIG_SCHEMA)
        _validator = Draft202012Validator(VALIDATOR_CONFIG_SCHEMA)
    return _validator


def _format_path(error: JsonSchemaError) -> str:
    parts = [str(p) for p in error.absolute_path]
    return "/" + "/".join(parts) if parts else "/"


def validate_config(data: Any) -> None:
    """Validate a parsed configuration document.

    Raises:
        ConfigSchemaError: If validation fails, with one entry per problem.
    """
    raw_errors = list(_get_validator().iter_errors(data))
    if raw_errors:
        raise ConfigSchemaError([
            ConfigValidationError(
                path=_format_path(e),
                message=e.message,
                keyword=e.validator,
            )
            for e in raw_errors
        ])


def load_options(path: Union[str, Path]) -> ValidatorOptions:
    """Load ValidatorOptions from a YAML file.

    An empty file yields default options.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    validate_config(data)
    return ValidatorOptions(
        log_level=data.get("log_level"),
        extension=data.get("extension", DEFAULT_EXTENSION),
    )


def resolve_logger(options: ValidatorOptions) -> Logger:
    if options.logger is not None:
        return options.logger

    env_log_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    log_level: LogLevel = (
        options.log_level
        or (env_log_level if env_log_level in LOG_LEVELS else None)  # type: ignore[assignment]
        or "info"
    )
    return create_logger(log_level)
