"""
Validator settings.

Rule tables used by the validators, defined as pydantic models so they can be
overridden from a YAML file. The defaults reproduce the standard rule set.

Example override file::

    min_code_blocks: 1
    agents_sections: [Setup, Security]
    secret_placeholders: [xxx, changeme, dummy-token]
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class SettingsError(ValueError):
    """Raised when validator settings cannot be loaded."""


class SecretRule(BaseModel):
    """A keyword pattern that introduces a credential value."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    category: str = Field(..., min_length=1)
    pattern: str = Field(..., min_length=1)
    min_length: int = Field(8, ge=1)

    @field_validator("pattern")
    @classmethod
    def pattern_must_compile(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regular expression: {e}") from e
        return v


DEFAULT_SECRET_RULES = (
    SecretRule(category="api_key", pattern=r"api_?key"),
    SecretRule(category="password", pattern=r"password"),
    SecretRule(category="secret", pattern=r"secret"),
    SecretRule(category="token", pattern=r"token"),
)

DEFAULT_PLACEHOLDERS = (
    "xxx",
    "your-key-here",
    "your_key_here",
    "your-api-key",
    "your_api_key",
    "your-token-here",
    "changeme",
    "change-me",
    "placeholder",
    "redacted",
    "example",
    "dummy",
    "<your-key>",
)


class ValidatorSettings(BaseModel):
    """Rule configuration shared by all validators."""

    # tuple fields: one instance is shared by every validator
    model_config = ConfigDict(extra="forbid", frozen=True)

    # Project instructions (AGENTS.md)
    secret_rules: Tuple[SecretRule, ...] = DEFAULT_SECRET_RULES
    secret_placeholders: Tuple[str, ...] = DEFAULT_PLACEHOLDERS
    agents_sections: Tuple[str, ...] = ("Setup", "Code Standards", "Security")
    min_code_blocks: int = Field(2, ge=0)

    # Skill definition (SKILL.md)
    skill_required_fields: Tuple[str, ...] = ("name", "description")
    skill_purpose_titles: Tuple[str, ...] = ("Purpose",)
    skill_trigger_titles: Tuple[str, ...] = ("When to Trigger", "When to Use")

    # Tool configuration (config.toml)
    config_required_keys: Tuple[str, ...] = ("model", "approval_policy", "sandbox_mode")
    approval_policies: Tuple[str, ...] = ("untrusted", "on-failure", "on-request", "never")
    sandbox_modes: Tuple[str, ...] = ("read-only", "workspace-write", "danger-full-access")

    @field_validator("skill_purpose_titles", "skill_trigger_titles")
    @classmethod
    def titles_not_empty(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("at least one section title is required")
        return v

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "ValidatorSettings":
        """Load settings from YAML content; missing keys keep their defaults."""
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise SettingsError(f"YAML parse error: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SettingsError("Settings must be a YAML mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise SettingsError(f"Invalid settings: {e}") from e

    @classmethod
    def from_file(cls, path: Path) -> "ValidatorSettings":
        """Load settings from a file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                return cls.from_yaml(f.read())
        except OSError as e:
            raise SettingsError(f"Cannot read settings file {path}: {e}") from e


DEFAULT_SETTINGS = ValidatorSettings()
