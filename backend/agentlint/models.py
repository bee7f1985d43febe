"""
Shared result and structure types.

Every validator returns a ValidationResult built from Diagnostic entries.
The parsed-structure types (Section, FrontMatter, ParsedConfig) are produced
fresh for each validation call and never cached.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Diagnostic:
    """A single finding reported by a validator."""

    message: str
    line: Optional[int] = None
    suggestion: Optional[str] = None

    def __str__(self) -> str:
        loc = f"[line {self.line}] " if self.line is not None else ""
        return f"{loc}{self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "message": self.message,
            "line": self.line,
            "suggestion": self.suggestion,
        }


@dataclass
class ValidationResult:
    """
    Outcome of validating one document.

    Errors and warnings keep the order in which their checks ran.
    Warnings never affect validity.
    """

    errors: List[Diagnostic] = field(default_factory=list)
    warnings: List[Diagnostic] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def total_errors(self) -> int:
        return len(self.errors)

    @property
    def total_warnings(self) -> int:
        return len(self.warnings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "valid": self.valid,
            "total_errors": self.total_errors,
            "total_warnings": self.total_warnings,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
        }

    def summary(self) -> str:
        """Generate human-readable summary."""
        lines = []
        status = "PASSED" if self.valid else "FAILED"
        lines.append(f"Validation {status}")
        lines.append(f"  Errors: {self.total_errors}, Warnings: {self.total_warnings}")

        if self.errors:
            lines.append("\n  Errors:")
            for err in self.errors:
                lines.append(f"    - {err}")
                if err.suggestion:
                    lines.append(f"      Suggestion: {err.suggestion}")

        if self.warnings:
            lines.append("\n  Warnings:")
            for warn in self.warnings:
                lines.append(f"    - {warn}")
                if warn.suggestion:
                    lines.append(f"      Suggestion: {warn.suggestion}")

        return "\n".join(lines)


def aggregate(
    errors: List[Diagnostic],
    warnings: List[Diagnostic],
) -> ValidationResult:
    """Combine findings into a result without reordering or deduplicating."""
    return ValidationResult(errors=list(errors), warnings=list(warnings))


class DiagnosticCollector:
    """Accumulates findings for one validation run, in check order."""

    def __init__(self) -> None:
        self.errors: List[Diagnostic] = []
        self.warnings: List[Diagnostic] = []

    def error(
        self,
        message: str,
        line: Optional[int] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        self.errors.append(Diagnostic(message=message, line=line, suggestion=suggestion))

    def warn(
        self,
        message: str,
        suggestion: str,
        line: Optional[int] = None,
    ) -> None:
        # warnings always carry a remediation hint
        self.warnings.append(Diagnostic(message=message, line=line, suggestion=suggestion))

    def result(self) -> ValidationResult:
        return aggregate(self.errors, self.warnings)


@dataclass
class IndexedLine:
    """One physical line with its 1-based line number."""

    number: int
    text: str


@dataclass
class Section:
    """A heading and the line range it owns."""

    title: str
    level: int
    start_line: int
    end_line: int


@dataclass
class FrontMatter:
    """Delimited key/value block at the top of a document."""

    present: bool = False
    closed: bool = False
    fields: Dict[str, str] = field(default_factory=dict)
    start_line: Optional[int] = None
    end_line: Optional[int] = None


@dataclass
class ParsedConfig:
    """Top-level assignments and named sections of a configuration file."""

    top_level: Dict[str, str] = field(default_factory=dict)
    sections: Dict[str, Dict[str, str]] = field(default_factory=dict)
    key_lines: Dict[str, int] = field(default_factory=dict)

    def has_section_prefix(self, prefix: str) -> bool:
        return any(name.startswith(prefix) for name in self.sections)
