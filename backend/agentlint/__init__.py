"""
Agentlint: structural validation for agent onboarding documents.

This package validates project instructions (AGENTS.md), skill definitions
(SKILL.md) and tool configuration (config.toml) held in memory, returning
line-accurate errors and warnings.
"""

from .models import (
    Diagnostic,
    ValidationResult,
    Section,
    FrontMatter,
    ParsedConfig,
    aggregate,
)
from .settings import SecretRule, SettingsError, ValidatorSettings
from .validator import (
    DocumentKind,
    ValidationEngine,
    validate_agents_md,
    validate_config_toml,
    validate_skill_md,
)

__version__ = "1.0.0"
__all__ = [
    "Diagnostic",
    "ValidationResult",
    "Section",
    "FrontMatter",
    "ParsedConfig",
    "aggregate",
    "SecretRule",
    "SettingsError",
    "ValidatorSettings",
    "DocumentKind",
    "ValidationEngine",
    "validate_agents_md",
    "validate_config_toml",
    "validate_skill_md",
]
