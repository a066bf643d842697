"""
Posture tree validator.

Walks a directory of Terraform files and checks, per file:
1. Exactly one 'google_securityposture_posture' resource declaration.
2. At least one 'posture_id' assignment.
3. Every 'posture_id', 'policy_set_id' and 'policy_id' value found anywhere
   in the file against its format rule.
Identifier assignments are not scoped to the resource block.
"""

import os
from typing import Optional, Union

from posture_validator.config import ValidatorOptions, resolve_logger
from posture_validator.core.collector import DiagnosticCollector
from posture_validator.core.walker import TreeWalkError, iter_configuration_files
from posture_validator.rules.format_rules import FORMAT_RULES, check_value
from posture_validator.rules.patterns import (
    DECLARATION_SEARCH_PATTERN,
    TRACKED_FIELDS,
    assignment_search_pattern,
    find_assignments,
    find_resource_declarations,
)
from posture_validator.types import ConfigurationFile, Diagnostic, IdentifierAssignment, ReadFailure
from posture_validator.utils.lines import find_line, line_of_offset


PathLike = Union[str, "os.PathLike[str]"]


class PostureValidator:
    """
    Validate a tree of Terraform posture files.

    Example:
        >>> validator = PostureValidator(ValidatorOptions(log_level="silent"))
        >>> for message in validator.validate("postures/"):
        ...     print(message)
    """

    def __init__(self, options: Optional[ValidatorOptions] = None):
        self._options = options or ValidatorOptions()
        self._logger = resolve_logger(self._options)

    def validate(self, root: PathLike) -> list[str]:
        """Return every diagnostic message for ``root``, in traversal order."""
        return [d.message for d in self.validate_tree(root)]

    def validate_tree(self, root: PathLike) -> list[Diagnostic]:
        """
        Validate every matching file under ``root``.

        Per-file problems are reported as diagnostics. A failure to
        traverse the tree stops the walk and is reported as one final
        diagnostic after everything collected so far.
        """
        root = os.fspath(root)
        collector = DiagnosticCollector()
        files_checked = 0

        self._logger.info("Validating posture tree", {"root": root})

        try:
            for item in iter_configuration_files(root, self._options.extension, self._logger):
                files_checked += 1
                if isinstance(item, ReadFailure):
                    collector.read_error(item.path, item.error)
                    continue
                self._validate_file(item, collector)
        except TreeWalkError as e:
            self._logger.error("Could not walk the directory", {"root": root, "path": e.path})
            collector.walk_error(root, e)

        self._logger.info(
            "Posture tree validated",
            {"root": root, "files": files_checked, "diagnostics": len(collector)},
        )
        return list(collector.diagnostics)

    def _validate_file(self, file: ConfigurationFile, collector: DiagnosticCollector) -> None:
        content = file.content.decode("utf-8", errors="replace")

        declarations = find_resource_declarations(content)
        if len(declarations) != 1:
            line = None
            if declarations:
                # Search only up to the first match so its own line is found
                first_offset = declarations[0].offset
                line = find_line(content[: first_offset + 1], DECLARATION_SEARCH_PATTERN)
                if line is None:
                    line = find_line(content, DECLARATION_SEARCH_PATTERN)
            self._logger.debug(
                "Wrong number of posture declarations",
                {"path": file.path, "found": len(declarations)},
            )
            collector.declaration_count(file.path, len(declarations), line)
            return

        assignments = {name: find_assignments(content, name) for name in TRACKED_FIELDS}

        if not assignments["posture_id"]:
            collector.missing_posture_id(file.path)

        for field_name in TRACKED_FIELDS:
            for assignment in assignments[field_name]:
                result = check_value(field_name, assignment.value)
                if result.passed:
                    continue
                self._logger.debug(
                    "Invalid identifier", {"path": file.path, "field": field_name, "reason": result.reason}
                )
                collector.invalid_format(
                    file.path,
                    field_name,
                    assignment.value,
                    FORMAT_RULES[field_name].pattern.pattern,
                    _assignment_line(content, assignment),
                )


def _assignment_line(content: str, assignment: IdentifierAssignment) -> Optional[int]:
    line = find_line(content, assignment_search_pattern(assignment.field_name, assignment.value))
    if line is None:
        # Assignment spans lines; fall back to the match position
        line = line_of_offset(content, assignment.offset)
    return line


def validate(root_path: PathLike, options: Optional[ValidatorOptions] = None) -> list[str]:
    """
    Validate a posture tree and return its diagnostic messages.

    Args:
        root_path: Directory to walk
        options: Optional validator options

    Returns:
        Ordered diagnostic messages; empty when the tree is valid
    """
    return PostureValidator(options).validate(root_path)
