import re
from types import MappingProxyType
from typing import Mapping

from posture_validator.types import FieldName, FormatCheckResult, FormatRule


_LOWERCASE_ID = r"^[a-z][a-z0-9-_]{0,62}$"
_MIXED_CASE_ID = r"^[a-zA-Z][a-zA-Z0-9-_]{0,62}$"

FORMAT_RULES: Mapping[FieldName, FormatRule] = MappingProxyType({
    "posture_id": FormatRule(
        field_name="posture_id",
        pattern=re.compile(_LOWERCASE_ID),
        description="a lowercase letter followed by up to 62 lowercase letters, digits, '-' or '_'",
    ),
    "policy_set_id": FormatRule(
        field_name="policy_set_id",
        pattern=re.compile(_LOWERCASE_ID),
        description="a lowercase letter followed by up to 62 lowercase letters, digits, '-' or '_'",
    ),
    "policy_id": FormatRule(
        field_name="policy_id",
        pattern=re.compile(_MIXED_CASE_ID),
        description="a letter followed by up to 62 letters, digits, '-' or '_'",
    ),
})


def check_value(field_name: FieldName, value: str) -> FormatCheckResult:
    rule = FORMAT_RULES[field_name]
    if rule.pattern.fullmatch(value):
        return FormatCheckResult(passed=True)
    return FormatCheckResult(
        passed=False,
        reason=f"value '{value}' must be {rule.description} (pattern {rule.pattern.pattern})",
    )
