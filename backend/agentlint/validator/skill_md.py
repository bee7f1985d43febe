"""
Skill Definition Validator

Validates SKILL.md files.

Format Requirements:
1. Frontmatter (required): opened and closed by ``---``
2. Frontmatter fields (required): name, description
3. Recommended Sections: Purpose, When to Trigger (or When to Use)
"""

from __future__ import annotations

import logging
from typing import Optional

from ..models import DiagnosticCollector, FrontMatter, ValidationResult
from ..parsing import FRONT_MATTER_MARKER, extract_front_matter, find_section, index_lines, scan_sections
from ..settings import DEFAULT_SETTINGS, ValidatorSettings


logger = logging.getLogger(__name__)


class SkillMdValidator:
    """
    Validator for SKILL.md skill definitions.

    Validates:
    1. Frontmatter presence and closure
    2. Required frontmatter fields
    3. Purpose and trigger sections in the body
    """

    def __init__(self, settings: Optional[ValidatorSettings] = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS

    def validate(self, content: str) -> ValidationResult:
        """
        Validate SKILL.md content.

        Args:
            content: Markdown content to validate

        Returns:
            ValidationResult with errors and warnings in check order
        """
        lines = index_lines(content)
        frontmatter = extract_front_matter(lines)
        collector = DiagnosticCollector()

        if not frontmatter.present:
            collector.error(
                f"Missing YAML frontmatter (file must start with '{FRONT_MATTER_MARKER}')",
                line=1,
                suggestion="Add a frontmatter block with name and description fields",
            )
        elif not frontmatter.closed:
            collector.error(
                f"YAML frontmatter is not properly closed (missing closing '{FRONT_MATTER_MARKER}')",
                line=frontmatter.start_line,
                suggestion=f"Add a '{FRONT_MATTER_MARKER}' line after the last frontmatter field",
            )
            # nothing past an unterminated block can be trusted
            logger.debug("SKILL.md frontmatter unclosed; skipping remaining checks")
            return collector.result()
        else:
            self._check_fields(frontmatter, collector)

        body = lines[frontmatter.end_line:] if frontmatter.closed else lines
        sections = scan_sections(body)

        if find_section(sections, self.settings.skill_purpose_titles) is None:
            collector.warn(
                f"Missing '{self.settings.skill_purpose_titles[0]}' section",
                suggestion=(
                    f"Add a '## {self.settings.skill_purpose_titles[0]}' section "
                    "explaining what the skill does"
                ),
            )

        if find_section(sections, self.settings.skill_trigger_titles) is None:
            accepted = " or ".join(f"'{t}'" for t in self.settings.skill_trigger_titles)
            collector.warn(
                f"Missing trigger conditions section ({accepted})",
                suggestion=(
                    f"Add a '## {self.settings.skill_trigger_titles[0]}' section "
                    "listing when the skill should activate"
                ),
            )

        result = collector.result()
        logger.debug(
            "SKILL.md validated: %d errors, %d warnings",
            result.total_errors,
            result.total_warnings,
        )
        return result

    def _check_fields(self, frontmatter: FrontMatter, collector: DiagnosticCollector) -> None:
        for name in self.settings.skill_required_fields:
            if name not in frontmatter.fields:
                collector.error(
                    f"Missing required frontmatter field: {name}",
                    line=frontmatter.start_line,
                    suggestion=f"Add '{name}: ...' to the frontmatter block",
                )


def validate_skill_md(
    content: str,
    settings: Optional[ValidatorSettings] = None,
) -> ValidationResult:
    """
    Convenience function to validate SKILL.md content.

    Args:
        content: Raw document text
        settings: Optional rule overrides

    Returns:
        ValidationResult
    """
    return SkillMdValidator(settings).validate(content)
