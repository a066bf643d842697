"""
Append-only collection of diagnostics for one validation run.
"""

from typing import Iterator, Optional

from posture_validator.rules.patterns import TARGET_RESOURCE_TYPE
from posture_validator.types import Diagnostic, FieldName


class DiagnosticCollector:
    """
    Ordered diagnostics for a single run.

    Entries are never removed or deduplicated: the same condition found
    twice is reported twice.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(tuple(self._diagnostics))

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    def messages(self) -> list[str]:
        return [d.message for d in self._diagnostics]

    def add(self, diagnostic: Diagnostic) -> Diagnostic:
        self._diagnostics.append(diagnostic)
        return diagnostic

    def read_error(self, path: str, error: BaseException) -> Diagnostic:
        return self.add(
            Diagnostic(
                file_path=path,
                message=f"Error: Could not read Terraform file: {path}. Details: {error}",
                kind="read_error",
            )
        )

    def walk_error(self, root: str, error: BaseException) -> Diagnostic:
        return self.add(
            Diagnostic(
                file_path=root,
                message=f"Error: Could not walk the directory: {error}",
                kind="walk_error",
            )
        )

    def declaration_count(self, path: str, found: int, line: Optional[int]) -> Diagnostic:
        message = (
            f"Error: File {path} must contain exactly one '{TARGET_RESOURCE_TYPE}' "
            f"resource declaration. Found {found}."
        )
        if line is not None:
            message += f" First occurrence near line ~{line}."
        return self.add(
            Diagnostic(file_path=path, message=message, kind="declaration_count", line=line)
        )

    def missing_posture_id(self, path: str) -> Diagnostic:
        return self.add(
            Diagnostic(
                file_path=path,
                message=(
                    f"Error: '{TARGET_RESOURCE_TYPE}' resource declared in {path}, "
                    "but no 'posture_id' assignment found in the file."
                ),
                kind="missing_field",
            )
        )

    def invalid_format(
        self,
        path: str,
        field_name: FieldName,
        value: str,
        pattern: str,
        line: Optional[int],
    ) -> Diagnostic:
        location = f"{path} at line ~{line}" if line is not None else path
        return self.add(
            Diagnostic(
                file_path=path,
                message=(
                    f"Error: Invalid '{field_name}' value '{value}' found in {location}. "
                    f"Must match '{pattern}'."
                ),
                kind="invalid_format",
                line=line,
            )
        )
