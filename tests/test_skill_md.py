"""
Tests for the SKILL.md skill definition validator.
"""

from backend.agentlint.settings import ValidatorSettings
from backend.agentlint.validator import SkillMdValidator, validate_skill_md


def get_valid_skill_md():
    """Return a minimal valid skill definition."""
    return """---
name: my-skill
description: >
  This is a description of my skill.
  Use when: complex tasks.
---

# My Skill

## Purpose

This skill does something useful.

## When to Trigger

- Complex tasks
- Multi-file changes
"""


class TestValidSkills:
    """Tests for well-formed skill definitions."""

    def test_valid_skill(self):
        """Test that a complete skill passes without findings."""
        result = validate_skill_md(get_valid_skill_md())
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    def test_when_to_use_is_synonym(self):
        """Test that 'When to Use' satisfies the trigger check."""
        content = get_valid_skill_md().replace("## When to Trigger", "## When to Use")
        result = validate_skill_md(content)
        assert all("trigger" not in w.message for w in result.warnings)


class TestFrontmatterErrors:
    """Tests for frontmatter errors."""

    def test_missing_frontmatter(self):
        """Test error when the document has no frontmatter."""
        result = validate_skill_md("# My Skill\n\n## Purpose\n\nThis skill does something.\n")
        assert not result.valid
        assert len(result.errors) == 1
        assert "frontmatter" in result.errors[0].message
        assert result.errors[0].line == 1

    def test_missing_frontmatter_still_checks_sections(self):
        """Test section checks still run over the whole document."""
        result = validate_skill_md("# My Skill\n\n## Purpose\n\ntext\n")
        assert not any("Purpose" in w.message for w in result.warnings)
        assert any("trigger" in w.message for w in result.warnings)

    def test_unclosed_frontmatter(self):
        """Test error when the frontmatter is never closed."""
        content = """---
name: broken-skill
description: >
  This skill is broken

# Broken Skill

## Purpose

Missing closing frontmatter
"""
        result = validate_skill_md(content)
        assert not result.valid
        assert len(result.errors) == 1
        assert "not properly closed" in result.errors[0].message
        assert result.errors[0].line == 1
        assert result.warnings == []

    def test_unclosed_skips_field_checks(self):
        """Test missing fields are not reported for an unclosed block."""
        result = validate_skill_md("---\n# Nothing\n")
        messages = [e.message for e in result.errors]
        assert len(messages) == 1
        assert not any("field" in m for m in messages)

    def test_missing_name(self):
        """Test error when name is missing."""
        content = "---\ndescription: >\n  Skill without name\n---\n\n# Skill\n\n## Purpose\n"
        result = validate_skill_md(content)
        assert not result.valid
        assert [e.message for e in result.errors] == ["Missing required frontmatter field: name"]

    def test_missing_description(self):
        """Test error when description is missing."""
        content = "---\nname: no-description-skill\n---\n\n# Skill\n\n## Purpose\n"
        result = validate_skill_md(content)
        assert not result.valid
        assert len(result.errors) == 1
        assert "description" in result.errors[0].message

    def test_missing_both_fields_in_order(self):
        """Test name is reported before description."""
        result = validate_skill_md("---\nversion: 1\n---\n")
        assert ["name" in result.errors[0].message, "description" in result.errors[1].message] == [True, True]

    def test_indented_marker_is_not_frontmatter(self):
        """Test the marker must be the first line exactly."""
        result = validate_skill_md("\n---\nname: x\ndescription: y\n---\n")
        assert "frontmatter" in result.errors[0].message


class TestWarnings:
    """Tests for section warnings."""

    def test_missing_purpose(self):
        """Test warning about missing Purpose section."""
        content = "---\nname: no-purpose\ndescription: d\n---\n\n# S\n\n## When to Trigger\n\n- Always\n"
        result = validate_skill_md(content)
        assert result.valid
        assert any("Purpose" in w.message for w in result.warnings)

    def test_missing_trigger(self):
        """Test warning about missing trigger conditions."""
        content = "---\nname: no-triggers\ndescription: d\n---\n\n# S\n\n## Purpose\n\nDoes something\n"
        result = validate_skill_md(content)
        assert any("trigger" in w.message for w in result.warnings)

    def test_headings_in_frontmatter_ignored(self):
        """Test sections are only scanned after the frontmatter."""
        content = "---\nname: x\ndescription: |\n  ## Purpose\n---\n# S\n"
        result = validate_skill_md(content)
        assert any("Purpose" in w.message for w in result.warnings)

    def test_all_warnings_have_suggestions(self):
        """Test that every warning carries a suggestion."""
        content = "---\nname: w\ndescription: >\n  Skill with warnings\n---\n\n# W\n\nContent\n"
        result = validate_skill_md(content)
        assert len(result.warnings) == 2
        for warning in result.warnings:
            assert warning.suggestion

    def test_custom_trigger_titles(self):
        """Test accepted trigger titles come from settings."""
        settings = ValidatorSettings(skill_trigger_titles=["Activation"])
        content = "---\nname: a\ndescription: b\n---\n## Purpose\n## Activation\n"
        assert validate_skill_md(content, settings).warnings == []


class TestValidatorBehaviour:
    """Tests for determinism."""

    def test_idempotent(self):
        """Test repeated validation yields equal results."""
        validator = SkillMdValidator()
        content = "---\nname: x\n---\n"
        assert validator.validate(content) == validator.validate(content)

    def test_empty_content(self):
        """Test empty input is reported, not raised."""
        result = validate_skill_md("")
        assert not result.valid
        assert "frontmatter" in result.errors[0].message


class TestMarkerExactness:
    """Tests for exact frontmatter marker lines."""

    def test_marker_with_trailing_space(self):
        """Test '--- ' on line 1 is not accepted as frontmatter."""
        result = validate_skill_md("--- \nname: a\ndescription: b\n---\n## Purpose\n## When to Use\n")
        assert not result.valid
        assert "frontmatter" in result.errors[0].message
