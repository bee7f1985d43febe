"""
Line-oriented configuration parser.

Understands just enough TOML to extract what the validators need:

- ``key = value`` assignments, top-level or inside a section
- ``[name.sub]`` table headers (and ``[[name]]`` array tables), flattened to
  one dotted section name
- ``#`` comment lines and blank lines

Values are kept as strings. Double- and single-quoted strings are de-quoted
verbatim, bracketed lists keep their literal text, and bare literals
(``true``, ``42``) keep their source text. Lines matching none of the above
are skipped.
"""

from __future__ import annotations

import re
from typing import Optional

from ..models import ParsedConfig
from .lines import index_lines


SEGMENT = r'(?:[A-Za-z0-9_-]+|"[^"]*"|\'[^\']*\')'
HEADER_PATTERN = re.compile(rf'^\[\[?\s*({SEGMENT}(?:\s*\.\s*{SEGMENT})*)\s*\]\]?\s*(?:#.*)?$')
ASSIGNMENT_PATTERN = re.compile(r'^([A-Za-z0-9_-]+|"[^"]*")\s*=\s*(.*)$')


def _section_name(raw: str) -> str:
    parts = re.findall(SEGMENT, raw)
    return ".".join(p[1:-1] if p[:1] in ('"', "'") else p for p in parts)


def _parse_value(raw: str) -> Optional[str]:
    raw = raw.strip()
    if not raw:
        return None

    quote = raw[0]
    if quote in ('"', "'"):
        end = raw.find(quote, 1)
        if end == -1:
            return raw[1:]
        return raw[1:end]

    if raw.startswith("["):
        end = raw.rfind("]")
        return raw if end == -1 else raw[:end + 1]

    # bare literal, drop any trailing comment
    return raw.split("#", 1)[0].strip()


def parse_config(text: str) -> ParsedConfig:
    """
    Parse configuration text.

    Args:
        text: Raw configuration content.

    Returns:
        ParsedConfig with top-level values, flattened sections and the line
        number of every top-level assignment.
    """
    config = ParsedConfig()
    current: Optional[str] = None

    for line in index_lines(text):
        stripped = line.text.strip()
        if not stripped or stripped.startswith("#"):
            continue

        header = HEADER_PATTERN.match(stripped)
        if header:
            current = _section_name(header.group(1))
            config.sections.setdefault(current, {})
            continue

        assignment = ASSIGNMENT_PATTERN.match(stripped)
        if not assignment:
            continue

        key = assignment.group(1).strip('"')
        value = _parse_value(assignment.group(2))
        if value is None:
            continue

        if current is None:
            config.top_level[key] = value
            config.key_lines[key] = line.number
        else:
            config.sections[current][key] = value

    return config
