"""
Hardcoded secret detection.

Each rule is a keyword pattern followed by a ``:`` or ``=`` separator and a
value. A quoted value is taken up to its closing quote, spaces and commas
included; a bare value ends at whitespace, a comma or a semicolon. A match is
reported only when the value reaches the rule's minimum length and is not an
obvious placeholder.

Whitespace alone does not separate keyword and value: ``token ghp_abc...`` is
not reported, since prose such as "rotate the token regularly" reads the same.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Pattern, Tuple

from ..models import IndexedLine
from ..settings import DEFAULT_SETTINGS, SecretRule, ValidatorSettings


# keyword, optional closing quote (JSON keys), separator, then a quoted or bare value
MATCH_TEMPLATE = (
    r'(?:{keyword})["\']?\s*[:=]\s*'
    r'(?:"(?P<dq>[^"]*)"|\'(?P<sq>[^\']*)\'|`(?P<bq>[^`]*)`'
    r'|["\'`]?(?P<bare>[^\s"\'`,;]+))'
)
VALUE_GROUPS = ("dq", "sq", "bq", "bare")

PLACEHOLDER_SHAPES = [
    re.compile(r'^[x*.]+$', re.IGNORECASE),     # xxxxxxxx, ********, ...
    re.compile(r'^\$\{?[A-Za-z_][A-Za-z0-9_]*\}?$'),  # $VAR, ${VAR}
    re.compile(r'^<[^>]*>$'),                   # <your-key>
]


@dataclass
class SecretMatch:
    """A suspected hardcoded credential."""

    line: int
    category: str


class SecretScanner:
    """
    Scans lines against an ordered rule table.

    Rules are evaluated in table order for every line, so matches come out
    ordered by line number and then by rule.
    """

    def __init__(self, settings: Optional[ValidatorSettings] = None):
        settings = settings or DEFAULT_SETTINGS
        self.rules: List[Tuple[SecretRule, Pattern]] = [
            (rule, re.compile(MATCH_TEMPLATE.format(keyword=rule.pattern), re.IGNORECASE))
            for rule in settings.secret_rules
        ]
        self.placeholders = {p.lower() for p in settings.secret_placeholders}

    def is_placeholder(self, value: str) -> bool:
        if value.lower() in self.placeholders:
            return True
        return any(shape.match(value) for shape in PLACEHOLDER_SHAPES)

    def scan(self, lines: Iterable[IndexedLine]) -> List[SecretMatch]:
        matches = []
        for line in lines:
            for rule, pattern in self.rules:
                for match in pattern.finditer(line.text):
                    value = next(
                        match.group(name) for name in VALUE_GROUPS
                        if match.group(name) is not None
                    )
                    if len(value) < rule.min_length or self.is_placeholder(value):
                        continue
                    matches.append(SecretMatch(line=line.number, category=rule.category))
        return matches
