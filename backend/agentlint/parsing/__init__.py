"""
Lenient parsers for onboarding documents.

Parsers never fail: they return a best-effort structure and leave every
judgement about validity to the validators.
"""

from .lines import index_lines
from .sections import count_code_blocks, find_section, iter_prose_lines, scan_sections
from .frontmatter import FRONT_MATTER_MARKER, extract_front_matter
from .config import parse_config

__all__ = [
    "index_lines",
    "scan_sections",
    "find_section",
    "iter_prose_lines",
    "count_code_blocks",
    "FRONT_MATTER_MARKER",
    "extract_front_matter",
    "parse_config",
]
