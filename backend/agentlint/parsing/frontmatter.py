"""
Front matter extraction.

A document carries front matter only when its first line is exactly the ``---``
marker. Only simple ``key: value`` pairs are read; folded (``>``) and literal
(``|``) block scalars absorb the indented lines that follow them. Anything
else inside the block is ignored.
"""

from __future__ import annotations

import re
from typing import Dict, List

from ..models import FrontMatter, IndexedLine


FRONT_MATTER_MARKER = "---"

FIELD_PATTERN = re.compile(r'^([A-Za-z_][\w-]*)\s*:(?:\s+(.*?))?\s*$')
BLOCK_INDICATORS = {">", ">-", ">+", "|", "|-", "|+"}


def _is_marker(text: str) -> bool:
    return text == FRONT_MATTER_MARKER


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _parse_fields(block: List[IndexedLine]) -> Dict[str, str]:
    fields: Dict[str, str] = {}
    i = 0
    while i < len(block):
        text = block[i].text
        i += 1
        match = FIELD_PATTERN.match(text)
        if not match:
            continue

        key, value = match.group(1), match.group(2) or ""
        if value not in BLOCK_INDICATORS:
            fields[key] = _unquote(value)
            continue

        # absorb until a non-blank line returns to the key's indentation
        absorbed: List[str] = []
        while i < len(block):
            cont = block[i].text
            if cont.strip() and not cont[:1].isspace():
                break
            absorbed.append(cont.strip())
            i += 1

        while absorbed and not absorbed[-1]:
            absorbed.pop()
        joiner = "\n" if value.startswith("|") else " "
        fields[key] = joiner.join(absorbed).strip()

    return fields


def extract_front_matter(lines: List[IndexedLine]) -> FrontMatter:
    """
    Detect and parse a front matter block.

    Returns:
        FrontMatter with ``present=False`` if the first line is not the marker,
        ``closed=False`` if no closing marker follows, otherwise the parsed
        fields and the line numbers of both markers.
    """
    if not lines or not _is_marker(lines[0].text):
        return FrontMatter()

    start = lines[0].number
    for idx in range(1, len(lines)):
        if _is_marker(lines[idx].text):
            return FrontMatter(
                present=True,
                closed=True,
                fields=_parse_fields(lines[1:idx]),
                start_line=start,
                end_line=lines[idx].number,
            )

    return FrontMatter(present=True, closed=False, start_line=start)
