"""
Project Instructions Validator

Validates AGENTS.md project-instruction documents.

Checks, in order:
1. The first non-blank line is a level-1 heading (error)
2. No hardcoded secrets on any line (error, one per match)
3. Recommended sections: Setup, Code Standards, Security (warnings)
4. At least one ``$skill-name`` reference outside code blocks (warning)
5. Enough fenced code examples (warning)
"""

from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional

from ..models import DiagnosticCollector, IndexedLine, Section, ValidationResult
from ..parsing import count_code_blocks, find_section, index_lines, iter_prose_lines, scan_sections
from ..settings import DEFAULT_SETTINGS, ValidatorSettings
from .secrets import SecretScanner


logger = logging.getLogger(__name__)

LEVEL_ONE_HEADING = re.compile(r'^# +\S')
SKILL_REFERENCE = re.compile(r'\$[A-Za-z][\w-]*')

SECTION_SUGGESTIONS = {
    "setup": "Add a '## Setup' section with install and build commands",
    "code standards": "Add a '## Code Standards' section describing conventions agents must follow",
    "security": "Add a '## Security' section listing rules for secrets and input validation",
}


class _Document:
    """Parsed view of one document, built per validation call."""

    def __init__(self, content: str):
        self.lines: List[IndexedLine] = index_lines(content)
        self.sections: List[Section] = scan_sections(self.lines)


class AgentsMdValidator:
    """
    Validator for AGENTS.md project instructions.

    Stateless apart from its settings; safe to reuse across documents.
    """

    def __init__(self, settings: Optional[ValidatorSettings] = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self.secret_scanner = SecretScanner(self.settings)
        self._checks: List[Callable[[_Document, DiagnosticCollector], None]] = [
            self._check_title,
            self._check_secrets,
            self._check_sections,
            self._check_skill_references,
            self._check_code_examples,
        ]

    def validate(self, content: str) -> ValidationResult:
        """
        Validate AGENTS.md content.

        Args:
            content: Markdown content to validate

        Returns:
            ValidationResult with errors and warnings in check order
        """
        doc = _Document(content)
        collector = DiagnosticCollector()
        for check in self._checks:
            check(doc, collector)

        result = collector.result()
        logger.debug(
            "AGENTS.md validated: %d errors, %d warnings",
            result.total_errors,
            result.total_warnings,
        )
        return result

    def _check_title(self, doc: _Document, collector: DiagnosticCollector) -> None:
        first = next((line for line in doc.lines if line.text.strip()), None)
        if first is None:
            collector.error(
                "Document is empty; it must start with a level-1 heading",
                line=1,
                suggestion="Start the file with '# <Project Name>'",
            )
        elif not LEVEL_ONE_HEADING.match(first.text):
            collector.error(
                "AGENTS.md must start with a level-1 heading (# Title)",
                line=first.number,
                suggestion="Start the file with '# <Project Name>'",
            )

    def _check_secrets(self, doc: _Document, collector: DiagnosticCollector) -> None:
        for match in self.secret_scanner.scan(doc.lines):
            collector.error(
                f"Potential hardcoded secret ({match.category}) on line {match.line}",
                line=match.line,
                suggestion="Reference credentials through environment variables instead",
            )

    def _check_sections(self, doc: _Document, collector: DiagnosticCollector) -> None:
        for title in self.settings.agents_sections:
            if find_section(doc.sections, [title]) is None:
                collector.warn(
                    f"Missing recommended section: {title}",
                    suggestion=SECTION_SUGGESTIONS.get(
                        title.lower(), f"Add a '## {title}' section"
                    ),
                )

    def _check_skill_references(self, doc: _Document, collector: DiagnosticCollector) -> None:
        for line in iter_prose_lines(doc.lines):
            if SKILL_REFERENCE.search(line.text):
                return
        collector.warn(
            "No skill references found (expected tokens like $skill-name)",
            suggestion="Reference the skills agents should use, e.g. $swarm-orchestration",
        )

    def _check_code_examples(self, doc: _Document, collector: DiagnosticCollector) -> None:
        blocks = count_code_blocks(doc.lines)
        if blocks < self.settings.min_code_blocks:
            collector.warn(
                f"Only {blocks} code examples found "
                f"(at least {self.settings.min_code_blocks} recommended)",
                suggestion="Add fenced code blocks showing setup, build and test commands",
            )


def validate_agents_md(
    content: str,
    settings: Optional[ValidatorSettings] = None,
) -> ValidationResult:
    """
    Convenience function to validate AGENTS.md content.

    Args:
        content: Raw document text
        settings: Optional rule overrides

    Returns:
        ValidationResult
    """
    return AgentsMdValidator(settings).validate(content)
