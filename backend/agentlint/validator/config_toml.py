"""
Tool Configuration Validator

Validates config.toml files for the coding agent CLI.

Checks, in order:
1. Required top-level keys: model, approval_policy, sandbox_mode (errors)
2. approval_policy and sandbox_mode hold known values (errors)
3. At least one [mcp_servers.*] table (warning)
4. Permissive defaults without [profiles.*] overrides (warnings)
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..models import DiagnosticCollector, ParsedConfig, ValidationResult
from ..parsing import parse_config
from ..settings import DEFAULT_SETTINGS, ValidatorSettings


logger = logging.getLogger(__name__)

MCP_SECTION_PREFIX = "mcp_servers."
PROFILE_SECTION_PREFIX = "profiles."


class ConfigTomlValidator:
    """Validator for config.toml tool configuration."""

    def __init__(self, settings: Optional[ValidatorSettings] = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS

    def validate(self, content: str) -> ValidationResult:
        """
        Validate config.toml content.

        Args:
            content: Raw configuration text

        Returns:
            ValidationResult with errors and warnings in check order
        """
        config = parse_config(content)
        collector = DiagnosticCollector()

        for key in self.settings.config_required_keys:
            if key not in config.top_level:
                collector.error(
                    f"Missing required field: {key}",
                    suggestion=f"Add a top-level '{key} = ...' assignment",
                )

        self._check_enum(
            config, collector, "approval_policy", self.settings.approval_policies
        )
        self._check_enum(
            config, collector, "sandbox_mode", self.settings.sandbox_modes
        )

        has_profiles = config.has_section_prefix(PROFILE_SECTION_PREFIX)

        if not config.has_section_prefix(MCP_SECTION_PREFIX):
            collector.warn(
                "No MCP servers configured",
                suggestion="Configure at least one server under [mcp_servers.<name>]",
            )

        if config.top_level.get("approval_policy") == "never" and not has_profiles:
            collector.warn(
                'Using "never" approval policy without profile overrides',
                line=config.key_lines.get("approval_policy"),
                suggestion=(
                    "Add a [profiles.<name>] section so unattended execution is opt-in "
                    "rather than the default"
                ),
            )

        if config.top_level.get("sandbox_mode") == "danger-full-access" and not has_profiles:
            collector.warn(
                'Using "danger-full-access" sandbox mode without profile overrides',
                line=config.key_lines.get("sandbox_mode"),
                suggestion=(
                    "Default to 'workspace-write' and enable full access only in a "
                    "[profiles.<name>] section"
                ),
            )

        result = collector.result()
        logger.debug(
            "config.toml validated: %d errors, %d warnings",
            result.total_errors,
            result.total_warnings,
        )
        return result

    def _check_enum(
        self,
        config: ParsedConfig,
        collector: DiagnosticCollector,
        key: str,
        allowed: Sequence[str],
    ) -> None:
        value = config.top_level.get(key)
        if value is None or value in allowed:
            return
        collector.error(
            f'Invalid {key}: "{value}"',
            line=config.key_lines.get(key),
            suggestion=f"Use one of: {', '.join(allowed)}",
        )


def validate_config_toml(
    content: str,
    settings: Optional[ValidatorSettings] = None,
) -> ValidationResult:
    """
    Convenience function to validate config.toml content.

    Args:
        content: Raw configuration text
        settings: Optional rule overrides

    Returns:
        ValidationResult
    """
    return ConfigTomlValidator(settings).validate(content)
