"""
Onboarding Document Validators.

This package provides one validator per document kind:
- AGENTS.md: project instructions (title, secrets, sections, skills, examples)
- SKILL.md: skill definitions (frontmatter, purpose and trigger sections)
- config.toml: tool configuration (required keys, enums, MCP servers, profiles)
"""

from .secrets import SecretMatch, SecretScanner
from .agents_md import AgentsMdValidator, validate_agents_md
from .skill_md import SkillMdValidator, validate_skill_md
from .config_toml import ConfigTomlValidator, validate_config_toml
from .engine import DocumentKind, ValidationEngine

__all__ = [
    # Secrets
    "SecretMatch",
    "SecretScanner",
    # AGENTS.md
    "AgentsMdValidator",
    "validate_agents_md",
    # SKILL.md
    "SkillMdValidator",
    "validate_skill_md",
    # config.toml
    "ConfigTomlValidator",
    "validate_config_toml",
    # Engine
    "DocumentKind",
    "ValidationEngine",
]
