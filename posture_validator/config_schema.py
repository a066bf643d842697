"""
JSON Schema for the optional validator configuration file.
"""

from posture_validator.utils.logger import LOG_LEVELS


VALIDATOR_CONFIG_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "https://posture-validator/config.schema.json",
    "title": "Posture validator configuration",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "log_level": {
            "type": "string",
            "enum": list(LOG_LEVELS),
        },
        "extension": {
            "type": "string",
            "pattern": r"^\.[A-Za-z0-9_.-]+$",
        },
    },
}
