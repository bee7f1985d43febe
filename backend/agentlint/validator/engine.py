"""
Validation Engine.

Routes document text to the validator for its kind.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import PurePath
from typing import Dict, Optional

from ..models import ValidationResult
from ..settings import DEFAULT_SETTINGS, ValidatorSettings
from .agents_md import AgentsMdValidator
from .config_toml import ConfigTomlValidator
from .skill_md import SkillMdValidator


logger = logging.getLogger(__name__)


class DocumentKind(Enum):
    """Kinds of documents the engine can validate."""
    AGENTS_MD = "agents_md"
    SKILL_MD = "skill_md"
    CONFIG_TOML = "config_toml"

    @classmethod
    def from_filename(cls, name: str) -> Optional["DocumentKind"]:
        """Map a file name (or path) to a document kind, ignoring case."""
        basename = PurePath(name).name.lower()
        return FILENAME_KINDS.get(basename)


FILENAME_KINDS = {
    "agents.md": DocumentKind.AGENTS_MD,
    "skill.md": DocumentKind.SKILL_MD,
    "config.toml": DocumentKind.CONFIG_TOML,
}


class ValidationEngine:
    """
    Holds one validator per document kind.

    The engine keeps no per-call state, so a single instance can serve any
    number of callers.
    """

    def __init__(self, settings: Optional[ValidatorSettings] = None):
        """
        Initialize the validation engine.

        Args:
            settings: Rule overrides shared by all validators.
        """
        self.settings = settings or DEFAULT_SETTINGS
        self.validators = {
            DocumentKind.AGENTS_MD: AgentsMdValidator(self.settings),
            DocumentKind.SKILL_MD: SkillMdValidator(self.settings),
            DocumentKind.CONFIG_TOML: ConfigTomlValidator(self.settings),
        }

    def validate(self, kind: DocumentKind | str, content: str) -> ValidationResult:
        """
        Validate one document.

        Args:
            kind: Document kind, or its string value.
            content: Raw document text.

        Returns:
            ValidationResult from the matching validator.

        Raises:
            ValueError: If ``kind`` is not a known document kind.
        """
        kind = DocumentKind(kind)
        logger.debug("Validating %s (%d chars)", kind.value, len(content))
        return self.validators[kind].validate(content)

    def validate_all(
        self,
        documents: Dict[DocumentKind, str],
    ) -> Dict[DocumentKind, ValidationResult]:
        """
        Validate several documents.

        Returns:
            Results keyed by kind, in the order the documents were given.
        """
        return {kind: self.validate(kind, content) for kind, content in documents.items()}
